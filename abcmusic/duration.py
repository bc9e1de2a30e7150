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
Functions to deal with ABC note lengths.

A duration is a :class:`~fractions.Fraction`. An ABC duration token multiplies
the default note length (``L:``); the resulting length is expressed in beats by
dividing it by the beat length of the tempo (``Q:``).

The multiplier text can be a number (``2``), a fraction (``3/2``), or a
fraction with a missing part: ``/4`` means 1/4 and ``3/`` means 3/2, while a
single slash halves the length::

    >>> from abcmusic.duration import multiplier
    >>> multiplier('3'), multiplier('/'), multiplier('3/'), multiplier('/4')
    (Fraction(3, 1), Fraction(1, 2), Fraction(3, 2), Fraction(1, 4))

"""

import fractions
import re

from .errors import ParseError


_duration_re = re.compile(r'([0-9]*)(/?)([0-9]*)')


def multiplier(text=None):
    """Return the Fraction the duration text multiplies the default length with.

    An empty or None text returns 1. Raises
    :class:`~abcmusic.errors.ParseError` if the text is not a valid duration.

    """
    if not text:
        return fractions.Fraction(1)
    m = _duration_re.fullmatch(text)
    if not m:
        raise ParseError("invalid duration: {!r}".format(text))
    numerator, slash, denominator = m.groups()
    num = int(numerator) if numerator else 1
    den = int(denominator) if denominator else 2 if slash else 1
    if num == 0 or den == 0:
        raise ParseError("invalid duration: {!r}".format(text))
    return fractions.Fraction(num, den)


def beats(text, header):
    """Return the duration of the text as a Fraction of beats.

    The ``header`` is the :class:`~abcmusic.header.Header` that defines the
    default note length and the beat length.

    """
    return header.length / header.beat * multiplier(text)

