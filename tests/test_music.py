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
Test the music module.
"""

from fractions import Fraction

### find abcmusic
import sys
sys.path.insert(0, '.')

import io

import pytest

from abcmusic.music import (
    Chord, MusicSequence, Note, Rest, Tuplet, format_element, join, measure)
from abcmusic.pitch import Accidental


C = Note(0, Accidental.NATURAL, 'C', Fraction(1))
D = Note(0, Accidental.SHARP, 'D', Fraction(1, 2))
R = Rest(Fraction(2))


def test_main():
    a = measure([C, D])
    b = measure([R])
    c = measure([Chord([C, D]), Tuplet([C, C, D])])

    # join is associative, the empty sequence is the identity
    assert join(join(a, b), c) == join(a, join(b, c)) == join(a, b, c)
    assert join(a, join()) == a == join(join(), a)
    assert join() == MusicSequence()
    assert len(join()) == 0

    s = join(a, b, c)
    assert len(s) == 5
    assert len(s.measures) == 3
    assert list(s) == [C, D, R, Chord((C, D)), Tuplet((C, C, D))]
    assert s.measures[1] == (R,)
    assert a + b == join(a, b)
    assert hash(join(a, b)) == hash(a + b)

    # measure boundaries count for equality
    assert measure([C, D]) != join(measure([C]), measure([D]))
    assert list(measure([C, D])) == list(join(measure([C]), measure([D])))

    with pytest.raises(ValueError):
        Chord([])
    with pytest.raises(ValueError):
        Tuplet(())

    assert format_element(C) == "C*1"
    assert format_element(Note(2, Accidental.FLAT, 'E', Fraction(1, 2))) == "_E''*1/2"
    assert format_element(Note(-1, Accidental.DOUBLE_SHARP, 'F', Fraction(3))) == "^^F,*3"
    assert format_element(Chord([C, C])) == "[C*1 C*1]"
    assert format_element(R) == "z*2"

    f = io.StringIO()
    join(a, b).dump(f)
    assert f.getvalue() == "   1 | C*1 ^D*1/2\n   2 | z*2\n"


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
