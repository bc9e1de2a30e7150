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
The musical result of reading ABC text.

The music of one voice is a :class:`MusicSequence`: a tuple of measures, each
measure being a tuple of elements. An element is a :class:`Rest`, a
:class:`Note`, a :class:`Chord` or a :class:`Tuplet`. All durations are
:class:`~fractions.Fraction` values, in beats.

Sequences are combined with :func:`join`, and a list of elements becomes a
one-measure sequence with :func:`measure`::

    >>> from fractions import Fraction
    >>> from abcmusic.music import Note, Rest, join, measure
    >>> from abcmusic.pitch import Accidental
    >>> c = Note(0, Accidental.NATURAL, 'C', Fraction(1))
    >>> s = join(measure([c, c]), measure([Rest(Fraction(2))]))
    >>> len(s), len(s.measures)
    (3, 2)

"""

import collections
import itertools


Rest = collections.namedtuple("Rest", "duration")
Rest.duration.__doc__ = "The duration in beats."

Note = collections.namedtuple("Note", "octave accidental letter duration")
Note.octave.__doc__ = "The octave offset, 0 for the octave of the uppercase letters."
Note.accidental.__doc__ = "The effective :class:`~abcmusic.pitch.Accidental`."
Note.letter.__doc__ = "The pitch letter, ``'A'`` to ``'G'``."
Note.duration.__doc__ = "The duration in beats."


class Chord(collections.namedtuple("Chord", "notes")):
    """Notes that sound together; ``notes`` is a tuple of at least one Note."""
    __slots__ = ()

    def __new__(cls, notes):
        notes = tuple(notes)
        if not notes:
            raise ValueError("a chord needs at least one note")
        return super().__new__(cls, notes)


class Tuplet(collections.namedtuple("Tuplet", "notes")):
    """A duplet, triplet or quadruplet; ``notes`` is a tuple of Note and Chord elements."""
    __slots__ = ()

    def __new__(cls, notes):
        notes = tuple(notes)
        if not notes:
            raise ValueError("a tuplet needs at least one note")
        return super().__new__(cls, notes)


class MusicSequence:
    """An immutable sequence of musical elements, grouped in measures.

    Iterating over a MusicSequence yields the elements; the :attr:`measures`
    attribute keeps the measure boundaries. Two sequences are equal if they
    have the same measures.

    """
    __slots__ = ('_measures',)

    def __init__(self, measures=()):
        self._measures = tuple(tuple(m) for m in measures)

    @property
    def measures(self):
        """The tuple of measures, each one a tuple of elements."""
        return self._measures

    def __iter__(self):
        return itertools.chain.from_iterable(self._measures)

    def __len__(self):
        return sum(map(len, self._measures))

    def __eq__(self, other):
        if isinstance(other, MusicSequence):
            return self._measures == other._measures
        return NotImplemented

    def __hash__(self):
        return hash(self._measures)

    def __add__(self, other):
        if isinstance(other, MusicSequence):
            return join(self, other)
        return NotImplemented

    def __repr__(self):
        return "<{} ({} measures, {} elements)>".format(
            type(self).__name__, len(self._measures), len(self))

    def dump(self, file=None):
        """Print the sequence, one measure per line."""
        for n, m in enumerate(self._measures, 1):
            print("{:4} | {}".format(n, " ".join(map(format_element, m))), file=file)


def join(*sequences):
    """Return a new MusicSequence with the measures of all the sequences.

    Without arguments, an empty sequence is returned.

    """
    return MusicSequence(itertools.chain.from_iterable(s.measures for s in sequences))


def measure(elements):
    """Return a MusicSequence of one measure containing the elements."""
    return MusicSequence((elements,))


def format_element(element):
    """Return a short readable text for a Rest, Note, Chord or Tuplet element."""
    if isinstance(element, Rest):
        return "z*{}".format(element.duration)
    elif isinstance(element, Note):
        marks = "'" * element.octave if element.octave > 0 else "," * -element.octave
        acc = {-2: "__", -1: "_", 1: "^", 2: "^^"}.get(element.accidental, "")
        return "{}{}{}*{}".format(acc, element.letter, marks, element.duration)
    elif isinstance(element, Chord):
        return "[{}]".format(" ".join(map(format_element, element.notes)))
    elif isinstance(element, Tuplet):
        return "({})".format(" ".join(map(format_element, element.notes)))
    raise TypeError("not a music element: {!r}".format(element))


MusicPiece = collections.namedtuple("MusicPiece", "header voices")
MusicPiece.header.__doc__ = "The :class:`~abcmusic.header.Header`."
MusicPiece.voices.__doc__ = "A tuple of (name, :class:`MusicSequence`) pairs, in the order of the header."

