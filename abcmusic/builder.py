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
Build the music of a voice from its document tree.

The :class:`MusicBuilder` walks a :class:`~abcmusic.dom.abc.Root` tree and
returns a :class:`~abcmusic.music.MusicSequence`. Repeats are expanded, so the
sequence contains the music as it is played::

    >>> from abcmusic.builder import build
    >>> from abcmusic.dom import read
    >>> from abcmusic.header import HeaderBuilder
    >>> header = HeaderBuilder().header()
    >>> s = build(read.body_document("|: C D :| E2 |]"), header)
    >>> len(s.measures), len(s)
    (3, 5)

"""

import logging

from parce.util import Dispatcher

from . import duration, key, music, pitch
from .dom import abc
from .dom.util import children, first, single
from .errors import StructuralError


logger = logging.getLogger(__name__)


class MusicBuilder:
    """Builds a MusicSequence from the body tree of a voice.

    The ``header`` (a :class:`~abcmusic.header.Header`) defines the key
    signature, the default note length and the beat length.

    Every node type has its own method; a node of a type that is not expected
    at its place raises a :class:`~abcmusic.errors.StructuralError`.

    """
    _sequence = Dispatcher()
    _element = Dispatcher()

    def __init__(self, header):
        self.header = header

    def build(self, node):
        """Return the MusicSequence for the node."""
        meth = self._sequence.get(type(node))
        if not meth:
            raise StructuralError("unexpected node: {!r}".format(node))
        return meth(node)

    def element(self, node, accidentals):
        """Return the music element (Rest, Note, Chord or Tuplet) for the node.

        ``accidentals`` is the dict with the accidentals of the current measure.

        """
        meth = self._element.get(type(node))
        if not meth:
            raise StructuralError("unexpected node in measure: {!r}".format(node))
        return meth(node, accidentals)

    @_sequence(abc.Root)
    def root(self, node):
        sections = list(node / abc.MajorSection)
        if not sections:
            raise StructuralError("{!r} has no sections".format(node))
        logger.debug("building %d section(s)", len(sections))
        return music.join(*map(self.build, sections))

    @_sequence(abc.MajorSection)
    def major_section(self, node):
        children = list(node ^ abc.Comment)
        if not children or len(children) > 2:
            raise StructuralError("{!r} should have a Repeat and/or a Sequence".format(node))
        types = tuple(map(type, children))
        if types not in ((abc.Repeat,), (abc.Sequence,), (abc.Repeat, abc.Sequence)):
            raise StructuralError("unexpected children in {!r}".format(node))
        return music.join(*map(self.build, children))

    @_sequence(abc.Sequence)
    def sequence(self, node):
        blocks = list(node ^ abc.Comment)
        if not blocks:
            raise StructuralError("{!r} has no blocks".format(node))
        for n in blocks:
            if not isinstance(n, abc.Block):
                raise StructuralError("unexpected node in sequence: {!r}".format(n))
        return music.join(*map(self.build, blocks))

    @_sequence(abc.Block)
    def block(self, node):
        child = single(node)
        if not isinstance(child, (abc.Repeat, abc.Measure)):
            raise StructuralError("unexpected node in block: {!r}".format(child))
        return self.build(child)

    @_sequence(abc.Repeat)
    def repeat(self, node):
        start = end1 = end2 = None
        for n in node ^ abc.Comment:
            if isinstance(n, abc.Start) and start is None:
                start = self.build(n)
            elif isinstance(n, abc.End1) and start is not None and end1 is None and end2 is None:
                end1 = self.build(n)
            elif isinstance(n, abc.End2) and start is not None and end2 is None:
                end2 = self.build(n)
            else:
                raise StructuralError("unexpected node in repeat: {!r}".format(n))
        if start is None:
            raise StructuralError("{!r} has no Start".format(node))
        parts = [start]
        if end1 is not None:
            parts.append(end1)
        parts.append(start)
        if end2 is not None:
            parts.append(end2)
        logger.debug("repeat: %d measure(s) played twice", len(start.measures))
        return music.join(*parts)

    @_sequence(abc.Start)
    @_sequence(abc.End1)
    def part(self, node):
        child = single(node)
        if not isinstance(child, abc.Sequence):
            raise StructuralError("{!r} should have a Sequence".format(node))
        return self.build(child)

    @_sequence(abc.End2)
    def end2(self, node):
        child = single(node)
        if not isinstance(child, abc.Block):
            raise StructuralError("{!r} should have a Block".format(node))
        return self.build(child)

    @_sequence(abc.Measure)
    def measure(self, node):
        accidentals = {}
        elements = []
        for n in node ^ abc.Comment:
            if not isinstance(n, abc.Element):
                raise StructuralError("unexpected node in measure: {!r}".format(n))
            elements.append(self.element(single(n), accidentals))
        return music.measure(elements)

    @_element(abc.Rest)
    def rest(self, node, accidentals):
        return music.Rest(self.beats(node))

    @_element(abc.Note)
    def note(self, node, accidentals):
        name = first(node, abc.Pitch).head
        explicit = None
        for n in node / abc.Accidental:
            explicit = n.head
        letter, octave = pitch.split(name)
        return music.Note(
            octave,
            key.resolve(name, explicit, accidentals, self.header.key),
            letter,
            self.beats(node))

    @_element(abc.Chord)
    def chord(self, node, accidentals):
        return music.Chord(self.note_or_chord(n, accidentals, abc.Note)
                           for n in children(node))

    @_element(abc.Tuplet)
    def tuplet(self, node, accidentals):
        group = single(node)
        if not isinstance(group, abc.TupletGroup):
            raise StructuralError("unexpected node in tuplet: {!r}".format(group))
        return music.Tuplet(self.note_or_chord(n, accidentals, (abc.Note, abc.Chord))
                            for n in children(group))

    def note_or_chord(self, node, accidentals, allowed):
        """Build a node inside a chord or tuplet, which must be of the allowed type(s)."""
        if not isinstance(node, allowed):
            raise StructuralError("unexpected node: {!r}".format(node))
        return self.element(node, accidentals)

    def beats(self, node):
        """Return the duration in beats of the Note or Rest node."""
        text = None
        for n in node / abc.Duration:
            text = n.head
        return duration.beats(text, self.header)


def build(root, header):
    """Return the MusicSequence for the Root node of a voice."""
    return MusicBuilder(header).build(root)

