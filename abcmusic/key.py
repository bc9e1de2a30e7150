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
Key signatures and accidental resolution.

A key signature is an integer from -7 to 7: the number of flats (negative) or
sharps (positive)::

    >>> from abcmusic.key import signature
    >>> signature('Bb'), signature('Em'), signature('C#')
    (-2, 1, 7)

"""

from .errors import UnknownKeyError
from .pitch import Accidental, accidental


#: Major keys, from 7 flats to 7 sharps
MAJOR_KEYS = (
    "Cb", "Gb", "Db", "Ab", "Eb", "Bb", "F", "C",
    "G", "D", "A", "E", "B", "F#", "C#",
)

#: Minor keys, from 7 flats to 7 sharps
MINOR_KEYS = (
    "Abm", "Ebm", "Bbm", "Fm", "Cm", "Gm", "Dm", "Am",
    "Em", "Bm", "F#", "C#m", "G#m", "D#m", "A#m",
)

#: The order in which sharps are added to a key signature
SHARP_ORDER = "FCGDAEB"

#: The order in which flats are added to a key signature
FLAT_ORDER = "BEADGCF"


def signature(text):
    """Return the key signature for the key name, e.g. ``'Bb'`` or ``'C#m'``.

    The major keys are searched first. Raises
    :class:`~abcmusic.errors.UnknownKeyError` if the key is not found.

    """
    for keys in MAJOR_KEYS, MINOR_KEYS:
        try:
            return keys.index(text) - 7
        except ValueError:
            pass
    raise UnknownKeyError(text)


def key_accidental(letter, key):
    """Return the Accidental the key signature gives to the (uppercase) pitch letter."""
    if key > 0 and letter in SHARP_ORDER[:key]:
        return Accidental.SHARP
    elif key < 0 and letter in FLAT_ORDER[:-key]:
        return Accidental.FLAT
    return Accidental.NATURAL


def resolve(pitch, text, accidentals, key):
    """Return the effective Accidental for a note in a measure.

    ``pitch`` is the pitch text as written (letter with octave marks),
    ``text`` the explicit accidental text or None, ``accidentals`` the dict
    holding the accidentals written earlier in the same measure, and ``key``
    the key signature.

    An explicit accidental is stored in the dict under the pitch text. The
    octave marks are part of the pitch text, so an accidental only affects
    notes in the same octave.

    """
    if text:
        result = accidentals[pitch] = accidental(text)
        return result
    try:
        return accidentals[pitch]
    except KeyError:
        return key_accidental(pitch[0].upper(), key)

