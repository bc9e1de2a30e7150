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
The Document Object Model for ABC header and body text.

The header of a tune is read into a :class:`HeaderDocument`, the body of a
single voice into a :class:`Root`. Both can be created from text by the
functions in :mod:`abcmusic.dom.read`, or by hand, e.g.::

    >>> from abcmusic.dom import abc
    >>> m = abc.Measure(abc.Element(abc.Note(abc.Pitch('c'), abc.Duration('2'))))
    >>> m.dump()
    <abc.Measure (1 child)>
     ╰╴<abc.Element (1 child)>
        ╰╴<abc.Note (2 children)>
           ├╴<abc.Pitch 'c'>
           ╰╴<abc.Duration '2'>

"""

from . import element


class Comment(element.TextElement):
    """A comment, starting with ``%``. Comments are ignored when building music."""


## header

class HeaderDocument(element.Element):
    """A full ABC header: the field lines upto and including the ``K:`` line."""


class Index(element.TextElement):
    """The reference number of a tune (``X:``)."""


class Title(element.HeadElement):
    """The title (``T:``), has a Name child."""


class Name(element.TextElement):
    """A name, such as a title or a composer."""


class Option(element.HeadElement):
    """A header option that has one child: an Author, Meter, Length, Tempo or Voice."""


class Author(element.HeadElement):
    """The composer (``C:``), has a Name child."""


class Meter(element.HeadElement):
    """The meter (``M:``), has a Fraction or a SpecialMeter child."""


class SpecialMeter(element.TextElement):
    """A symbolic meter: ``C`` (common time) or ``C|`` (cut time)."""


class Length(element.HeadElement):
    """The default note length (``L:``), has a Fraction child."""


class Tempo(element.HeadElement):
    """The tempo (``Q:``), has an optional Fraction (the beat) and an Integer (BPM)."""


class Voice(element.HeadElement):
    """A voice declaration (``V:``), has a VoiceName child."""


class VoiceName(element.TextElement):
    """The name of a voice."""


class Key(element.TextElement):
    """The key (``K:``), e.g. ``'Bb'`` or ``'F#m'``."""


class Fraction(element.HeadElement):
    """A fraction, has two Integer children: numerator and denominator."""


class Integer(element.TextElement):
    """A non-negative integer, the head is the text."""


class Field(element.TextElement):
    """Another information field that is kept but not interpreted.

    The head is the field letter, the ``value`` the rest of the line.

    """
    def __init__(self, head, value="", *children):
        super().__init__(head, *children)
        self.value = value

    def copy(self):
        return type(self)(self.head, self.value, *(n.copy() for n in self))

    def body_equals(self, other):
        return self.head == other.head and self.value == other.value


## body

class Root(element.Element):
    """The body of one voice, has one or more MajorSection children."""


class MajorSection(element.Element):
    """A part of the music ended by a double or thick bar line.

    Has an optional Repeat (repeating back to the start of the section) and
    an optional Sequence child, in that order.

    """


class Sequence(element.Element):
    """A sequence of Block nodes."""


class Block(element.Element):
    """A single Repeat or Measure."""


class Repeat(element.Element):
    """A repeated part: a Start, an optional End1 and an optional End2 child."""


class Start(element.Element):
    """The part that is played twice, has a Sequence child."""


class End1(element.Element):
    """The first ending, has a Sequence child."""


class End2(element.Element):
    """The second ending, has a Block child."""


class Measure(element.Element):
    """A measure, has Element children (and maybe Comment nodes)."""


class Element(element.Element):
    """One musical event: has a Rest, Note, Chord or Tuplet child."""


class Rest(element.HeadElement):
    """A rest (``z``), has an optional Duration child."""


class Note(element.Element):
    """A note, has an optional Accidental, a Pitch and an optional Duration child."""


class Chord(element.HeadElement):
    """Notes sounding together (``[ceg]``), has Note children."""


class Tuplet(element.Element):
    """A tuplet, has a Duplet, Triplet or Quadruplet child."""


class TupletGroup(element.HeadElement):
    """Base class for the notes in a tuplet.

    The class attribute ``count`` is the number of notes (or chords) the group
    has.

    """
    count = 0


class Duplet(TupletGroup):
    """Two notes in the time of three (``(2``)."""
    count = 2


class Triplet(TupletGroup):
    """Three notes in the time of two (``(3``)."""
    count = 3


class Quadruplet(TupletGroup):
    """Four notes in the time of three (``(4``)."""
    count = 4


class Pitch(element.TextElement):
    """A pitch: a letter with octave marks, e.g. ``"c''"`` or ``'C,'``."""


class Duration(element.TextElement):
    """A duration multiplier, e.g. ``'2'``, ``'/'``, ``'3/2'``."""


class Accidental(element.TextElement):
    """An explicit accidental: one of ``^^``, ``^``, ``=``, ``_``, ``__``."""


class Bar(element.TextElement):
    """A bar line, e.g. ``'|'`` or ``':|'``.

    Only used while reading; bar lines are turned into tree structure.

    """


class Ending(element.TextElement):
    """An ending marker, the head is ``'1'`` or ``'2'``.

    Only used while reading; endings are turned into End1 and End2 nodes.

    """

