# -*- coding: utf-8 -*-
#
# This file is part of `abcmusic`, a library for the ABC music notation
#
# Copyright © 2026 by the abcmusic developers
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Test abcmusic.duration.
"""

from fractions import Fraction

### find abcmusic
import sys
sys.path.insert(0, '.')

import pytest

from abcmusic.duration import beats, multiplier
from abcmusic.errors import ParseError
from abcmusic.header import HeaderBuilder


def header(length=None, beat=None):
    b = HeaderBuilder()
    b.length = length
    b.beat = beat
    return b.header()


def test_main():

    assert multiplier(None) == 1
    assert multiplier("") == 1
    assert multiplier("2") == 2
    assert multiplier("12") == 12
    assert multiplier("3/2") == Fraction(3, 2)
    assert multiplier("/4") == Fraction(1, 4)
    assert multiplier("3/") == Fraction(3, 2)
    assert multiplier("/") == Fraction(1, 2)

    for text in ("abc", "1//2", "0", "3/0", "/0", " 2", "2\n", "-1", "²"):
        with pytest.raises(ParseError):
            multiplier(text)

    # the default length is the beat when there is no tempo
    h = header()
    assert beats(None, h) == 1
    assert beats("3/2", h) == Fraction(3, 2)

    # L:1/8 Q:1/4=120
    h = header(Fraction(1, 8), Fraction(1, 4))
    assert beats(None, h) == Fraction(1, 2)
    assert beats("2", h) == 1
    assert beats("/", h) == Fraction(1, 4)

    # L:1/4 Q:1/8=...
    h = header(Fraction(1, 4), Fraction(1, 8))
    assert beats("3/4", h) == Fraction(3, 2)

    # beats(N/D) == length / beat * N / D
    for n in range(1, 5):
        for d in range(1, 9):
            assert beats("{}/{}".format(n, d), h) == h.length / h.beat * Fraction(n, d)

    with pytest.raises(ValueError):
        beats("abc", h)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
