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
Functions and constants to deal with ABC pitches and accidentals.

An ABC pitch is a letter with optional octave marks. Uppercase letters are in
the reference octave, lowercase letters one octave higher; each ``'`` raises
the pitch an octave, each ``,`` lowers it::

    >>> from abcmusic.pitch import octave
    >>> octave('C'), octave('c'), octave("c''"), octave('C,,')
    (0, 1, 3, -2)

"""

import enum

from .errors import ParseError


class Accidental(enum.IntEnum):
    """An accidental, the value is the alteration in semitones."""
    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2


#: ABC accidental texts
ACCIDENTALS = {
    '__': Accidental.DOUBLE_FLAT,
    '_': Accidental.FLAT,
    '=': Accidental.NATURAL,
    '^': Accidental.SHARP,
    '^^': Accidental.DOUBLE_SHARP,
}

PITCH_LETTERS = 'ABCDEFG'


def accidental(text):
    """Return the :class:`Accidental` for the ABC text, e.g. ``'^'``.

    Raises :class:`~abcmusic.errors.ParseError` for unknown text.

    """
    try:
        return ACCIDENTALS[text]
    except KeyError:
        raise ParseError("invalid accidental: {!r}".format(text)) from None


def split(pitch):
    """Return a tuple (letter, octave) for the pitch text, e.g. ``('C', 2)`` for ``"c'"``.

    The letter is uppercase, the octave is relative to the uppercase letters.
    Raises :class:`~abcmusic.errors.ParseError` for invalid text.

    """
    name = pitch[:1].upper()
    if not name or name not in PITCH_LETTERS:
        raise ParseError("invalid pitch: {!r}".format(pitch))
    base = 1 if pitch[0].islower() else 0
    return name, base + pitch.count("'") - pitch.count(",")


def octave(pitch):
    """Return the octave offset of the pitch text, relative to the uppercase letters."""
    return split(pitch)[1]


def letter(pitch):
    """Return the pitch letter (uppercase) of the pitch text."""
    return split(pitch)[0]

