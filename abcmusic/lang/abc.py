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
ABC language and transformation definition.

There are two languages: :class:`AbcHeader` for the header of a tune (the
information fields upto and including the ``K:`` line), and :class:`Abc` for
the music of one voice. The transforms build the nodes of
:mod:`abcmusic.dom.abc`.

"""

import parce.action as a
from parce import Language, lexicon
from parce.rule import bygroup
from parce.transform import Transform
from parce.util import Dispatcher

from ..dom import abc
from ..errors import ParseError, StructuralError


RE_DURATION = r"[0-9]*/[0-9]*|[0-9]+"
RE_NOTE = r"(\^\^|\^|__|_|=)?([A-Ga-g][,']*)(" + RE_DURATION + r")?"
RE_REST = r"(z)(" + RE_DURATION + r")?"
RE_FRACTION = r"[0-9]+/[0-9]+"
RE_TEXT = r"[^\s%](?:[^\n%]*[^\s%])?"   # a line of text, without surrounding whitespace


class AbcHeader(Language):
    """The header of an ABC tune."""

    @lexicon
    def root(cls):
        yield r'%[^\n]*', a.Comment
        yield r'(X)(:)', bygroup(a.Name.Field, a.Delimiter), cls.index
        yield r'(T)(:)', bygroup(a.Name.Field, a.Delimiter), cls.title
        yield r'(C)(:)', bygroup(a.Name.Field, a.Delimiter), cls.composer
        yield r'(M)(:)', bygroup(a.Name.Field, a.Delimiter), cls.meter
        yield r'(L)(:)', bygroup(a.Name.Field, a.Delimiter), cls.length
        yield r'(Q)(:)', bygroup(a.Name.Field, a.Delimiter), cls.tempo
        yield r'(V)(:)', bygroup(a.Name.Field, a.Delimiter), cls.voice
        yield r'(K)(:)', bygroup(a.Name.Field, a.Delimiter), cls.key
        yield r'([A-Za-z])(:)', bygroup(a.Name.Field, a.Delimiter), cls.field
        yield r'\S', a.Invalid

    @classmethod
    def end_of_field(cls):
        """The rules that end a field and catch comments."""
        yield r'\n', a.Whitespace, -1
        yield r'%[^\n]*', a.Comment

    @lexicon(consume=True)
    def index(cls):
        """The reference number, ``X:``."""
        yield from cls.end_of_field()
        yield r'[0-9]+', a.Number
        yield r'\S', a.Invalid

    @lexicon(consume=True)
    def title(cls):
        """The title, ``T:``."""
        yield from cls.end_of_field()
        yield RE_TEXT, a.Text

    @lexicon(consume=True)
    def composer(cls):
        """The composer, ``C:``."""
        yield from cls.end_of_field()
        yield RE_TEXT, a.Text

    @lexicon(consume=True)
    def meter(cls):
        """The meter, ``M:``, a fraction or ``C`` or ``C|``."""
        yield from cls.end_of_field()
        yield RE_FRACTION, a.Number.Fraction
        yield r'C\|?', a.Name.Constant
        yield r'\S', a.Invalid

    @lexicon(consume=True)
    def length(cls):
        """The default note length, ``L:``."""
        yield from cls.end_of_field()
        yield RE_FRACTION, a.Number.Fraction
        yield r'\S', a.Invalid

    @lexicon(consume=True)
    def tempo(cls):
        """The tempo, ``Q:``, e.g. ``Q:1/4=120`` or ``Q:120``."""
        yield from cls.end_of_field()
        yield RE_FRACTION, a.Number.Fraction
        yield r'[0-9]+', a.Number
        yield r'=', a.Operator.Assignment
        yield r'\S', a.Invalid

    @lexicon(consume=True)
    def voice(cls):
        """A voice declaration, ``V:``."""
        yield from cls.end_of_field()
        yield RE_TEXT, a.Name.Variable

    @lexicon(consume=True)
    def key(cls):
        """The key, ``K:``."""
        yield from cls.end_of_field()
        yield r'[^\s%]+', a.Name.Constant

    @lexicon(consume=True)
    def field(cls):
        """Any other information field."""
        yield from cls.end_of_field()
        yield RE_TEXT, a.Text


class Abc(Language):
    """The music of one voice."""

    @lexicon
    def root(cls):
        yield r'%[^\n]*', a.Comment
        yield r'\[([12])', bygroup(a.Delimiter.Ending)
        yield r'(:\||\|)([12])', bygroup(a.Delimiter.Bar, a.Delimiter.Ending)
        yield r'\|\]|\|\||\[\||:\|:|::|\|:|:\||\|', a.Delimiter.Bar
        yield r'\[', a.Delimiter.Chord, cls.chord
        yield r'\(([234])', bygroup(a.Delimiter.Tuplet)
        yield from cls.note()
        yield RE_REST, bygroup(a.Text.Music.Rest, a.Number.Duration)
        yield r'\S', a.Invalid

    @classmethod
    def note(cls):
        """A note, with optional accidental and duration."""
        yield RE_NOTE, bygroup(a.Text.Music.Pitch.Accidental, a.Text.Music.Pitch, a.Number.Duration)

    @lexicon(consume=True)
    def chord(cls):
        """Notes between ``[`` and ``]``."""
        yield r'\]', a.Delimiter.Chord, -1
        yield from cls.note()
        yield r'\S', a.Invalid


def invalid(token):
    """Return a ParseError for the invalid token."""
    return ParseError("invalid text: {!r}".format(token.text), token.pos)


class AbcHeaderTransform(Transform):
    """Transform the ABC header to a :class:`~abcmusic.dom.abc.HeaderDocument`."""

    ## helper methods and factory
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create a node, keeping its origin.

        The ``head_origin`` and optionally ``tail_origin`` is an iterable of
        Token instances.

        """
        return element_class.with_origin(tuple(head_origin), tuple(tail_origin), *children)

    def content(self, items):
        """Return the field letter and colon tokens, and the list of value tokens.

        Comments and the newline are left out, invalid text raises a
        :class:`~abcmusic.errors.ParseError`.

        """
        head = items[:2]
        tokens = []
        for t in items[2:]:
            if t.action is a.Invalid:
                raise invalid(t)
            elif t.action is not a.Comment and t.action is not a.Whitespace:
                tokens.append(t)
        return head, tokens

    def value(self, items, what):
        """Return the field head tokens and the single value token of a field."""
        head, tokens = self.content(items)
        if len(tokens) != 1:
            raise ParseError("{} field needs one value".format(what), head[0].pos)
        return head, tokens[0]

    def fraction(self, token):
        """Create a Fraction node from a fraction token."""
        numerator, denominator = token.text.split('/')
        return self.factory(abc.Fraction, (token,), (),
            abc.Integer(numerator), abc.Integer(denominator))

    ### transforming methods
    def root(self, items):
        """Build the ``abc.HeaderDocument``."""
        nodes = []
        for i in items:
            if not i.is_token:
                nodes.append(i.obj)
            elif i.action is a.Comment:
                nodes.append(self.factory(abc.Comment, (i,)))
            elif i.action is a.Invalid:
                raise invalid(i)
        return abc.HeaderDocument(*nodes)

    def index(self, items):
        head, token = self.value(items, "X:")
        return self.factory(abc.Index, (token,))

    def title(self, items):
        head, tokens = self.content(items)
        return self.factory(abc.Title, head, (), self.factory(abc.Name, tokens))

    def composer(self, items):
        head, tokens = self.content(items)
        return abc.Option(self.factory(abc.Author, head, (), self.factory(abc.Name, tokens)))

    def meter(self, items):
        head, token = self.value(items, "M:")
        if token.action is a.Number.Fraction:
            value = self.fraction(token)
        else:
            value = self.factory(abc.SpecialMeter, (token,))
        return abc.Option(self.factory(abc.Meter, head, (), value))

    def length(self, items):
        head, token = self.value(items, "L:")
        return abc.Option(self.factory(abc.Length, head, (), self.fraction(token)))

    def tempo(self, items):
        head, tokens = self.content(items)
        actions = [t.action for t in tokens]
        if actions == [a.Number.Fraction, a.Operator.Assignment, a.Number]:
            children = self.fraction(tokens[0]), self.factory(abc.Integer, tokens[2:])
        elif actions == [a.Number]:
            children = self.factory(abc.Integer, tokens),
        else:
            raise ParseError("invalid tempo", head[0].pos)
        return abc.Option(self.factory(abc.Tempo, head, (), *children))

    def voice(self, items):
        head, token = self.value(items, "V:")
        return abc.Option(self.factory(abc.Voice, head, (), self.factory(abc.VoiceName, (token,))))

    def key(self, items):
        head, token = self.value(items, "K:")
        return self.factory(abc.Key, (token,))

    def field(self, items):
        head, tokens = self.content(items)
        node = self.factory(abc.Field, head[:1])
        node.value = ''.join(t.text for t in tokens)
        return node


class AbcHeaderAdHocTransform(AbcHeaderTransform):
    """AbcHeaderTransform that does not keep the origin tokens."""
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create a node *without* keeping its origin."""
        return element_class.from_origin(tuple(head_origin), tuple(tail_origin), *children)


class AbcTransform(Transform):
    """Transform the music of a voice to a :class:`~abcmusic.dom.abc.Root` tree.

    The tokens are first read into a flat stream of events and bar lines (see
    :class:`EventReader`), which is then grouped into sections, repeats and
    measures (see :class:`SectionReader`).

    """
    ## helper methods and factory
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create a node, keeping its origin.

        The ``head_origin`` and optionally ``tail_origin`` is an iterable of
        Token instances.

        """
        return element_class.with_origin(tuple(head_origin), tuple(tail_origin), *children)

    ### transforming methods
    def root(self, items):
        """Build the ``abc.Root``."""
        return SectionReader(group_tuplets(EventReader(self, items))).root()

    def chord(self, items):
        """Build an ``abc.Chord``."""
        head = items[:1]
        if items[-1] != ']':
            raise ParseError("unterminated chord", head[0].pos)
        tail = (items.pop(),)
        notes = list(EventReader(self, items[1:]))
        if not notes:
            raise ParseError("empty chord", head[0].pos)
        return self.factory(abc.Chord, head, tail, *notes)


class AbcAdHocTransform(AbcTransform):
    """AbcTransform that does not keep the origin tokens."""
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create a node *without* keeping its origin."""
        return element_class.from_origin(tuple(head_origin), tuple(tail_origin), *children)


class EventReader:
    """Reads the items of the root or chord context.

    Iterating yields Note, Rest, Chord, TupletGroup (still empty), Bar, Ending
    and Comment nodes.

    """
    _action = Dispatcher()

    def __init__(self, transform, items):
        self.factory = transform.factory
        self.items = items
        self._accidental = None
        self._music = None      # the pitch or rest token
        self._duration = None

    def __iter__(self):
        for i in self.items:
            if i.is_token:
                meth = self._action.get(i.action)
                if not meth:
                    raise StructuralError("unexpected token: {!r}".format(i))
                result = meth(i)
                if result:
                    yield from result
            else:
                yield from self.pending_music()
                yield i.obj
        yield from self.pending_music()

    def pending_music(self):
        """Yield the pending Note or Rest, if any."""
        token = self._music
        if token:
            children = []
            if token.action is a.Text.Music.Rest:
                head = token,
            else:
                head = ()
                if self._accidental:
                    children.append(self.factory(abc.Accidental, (self._accidental,)))
                children.append(self.factory(abc.Pitch, (token,)))
            if self._duration:
                children.append(self.factory(abc.Duration, (self._duration,)))
            if head:
                yield self.factory(abc.Rest, head, (), *children)
            else:
                yield abc.Note(*children)
        self._accidental = self._music = self._duration = None

    @_action(a.Text.Music.Pitch.Accidental)
    def accidental_action(self, token):
        yield from self.pending_music()
        self._accidental = token

    @_action(a.Text.Music.Pitch)
    @_action(a.Text.Music.Rest)
    def music_action(self, token):
        if self._music:
            yield from self.pending_music()
        self._music = token

    @_action(a.Number.Duration)
    def duration_action(self, token):
        if not self._music or self._duration:
            raise invalid(token)
        self._duration = token

    @_action(a.Delimiter.Bar)
    def bar_action(self, token):
        yield from self.pending_music()
        yield self.factory(abc.Bar, (token,))

    @_action(a.Delimiter.Ending)
    def ending_action(self, token):
        yield from self.pending_music()
        yield self.factory(abc.Ending, (token,))

    @_action(a.Delimiter.Tuplet)
    def tuplet_action(self, token):
        yield from self.pending_music()
        yield self.factory(_tuplet_groups[token.text], (token,))

    @_action(a.Comment)
    def comment_action(self, token):
        yield from self.pending_music()
        yield self.factory(abc.Comment, (token,))

    @_action(a.Invalid)
    def invalid_action(self, token):
        raise invalid(token)


_tuplet_groups = {
    '2': abc.Duplet,
    '3': abc.Triplet,
    '4': abc.Quadruplet,
}


def group_tuplets(nodes):
    """Put the notes and chords following a TupletGroup in the group.

    Yields Element nodes (each holding a Rest, Note, Chord or Tuplet), Bar,
    Ending and Comment nodes.

    """
    group = None
    for node in nodes:
        if group is not None:
            if isinstance(node, (abc.Note, abc.Chord)):
                group.append(node)
                if sum(1 for n in group ^ abc.Comment) == group.count:
                    yield abc.Element(abc.Tuplet(group))
                    group = None
                continue
            elif isinstance(node, abc.Comment):
                group.append(node)
                continue
            raise ParseError("tuplet needs {} notes".format(group.count), group.pos)
        if isinstance(node, abc.TupletGroup):
            group = node
        elif isinstance(node, (abc.Note, abc.Rest, abc.Chord)):
            yield abc.Element(node)
        else:
            yield node
    if group is not None:
        raise ParseError("tuplet needs {} notes".format(group.count), group.pos)


# what a bar line does
MEASURE, SECTION, REPEAT_START, REPEAT_END, ENDING = range(5)

_bar_kinds = {
    '|': (MEASURE,),
    '||': (SECTION,),
    '|]': (SECTION,),
    '[|': (SECTION,),
    '|:': (REPEAT_START,),
    ':|': (REPEAT_END,),
    ':|:': (REPEAT_END, REPEAT_START),
    '::': (REPEAT_END, REPEAT_START),
}


class SectionReader:
    """Groups a flat stream of nodes into an ``abc.Root`` tree.

    The stream contains Element, Bar, Ending and Comment nodes. A repeat end
    without a preceding repeat start repeats from the start of the section, or
    from the end of the previous repeat.

    """
    def __init__(self, nodes):
        self.stream = stream = []     # list of (node, kind) tuples
        for node in nodes:
            if isinstance(node, abc.Bar):
                stream.extend((node, kind) for kind in _bar_kinds[node.head])
            elif isinstance(node, abc.Ending):
                stream.append((node, ENDING))
            else:
                stream.append((node, None))
        self.index = 0
        # kind of the first repeat or section bar at or after each index
        self.structure = structure = [None] * (len(stream) + 1)
        for i in range(len(stream) - 1, -1, -1):
            kind = stream[i][1]
            if kind in (REPEAT_START, REPEAT_END, SECTION):
                structure[i] = kind
            else:
                structure[i] = structure[i + 1]

    def peek(self):
        """Return the current (node, kind) tuple, (None, None) at the end."""
        try:
            return self.stream[self.index]
        except IndexError:
            return None, None

    def at_end(self):
        return self.index >= len(self.stream)

    def root(self):
        """Read all sections and return the Root node."""
        sections = []
        while not self.at_end():
            section = self.major_section()
            if section:
                sections.append(section)
        if not sections:
            raise ParseError("no music found")
        return abc.Root(*sections)

    def major_section(self):
        """Return a MajorSection, or None if it would be empty."""
        children = []
        if self.repeats_back():
            children.append(self.repeat())
        blocks = []
        while not self.at_end():
            node, kind = self.peek()
            if kind == SECTION:
                self.index += 1
                break
            elif kind == MEASURE:
                self.index += 1
            elif kind == REPEAT_START:
                self.index += 1
                blocks.append(abc.Block(self.repeat()))
            elif kind == REPEAT_END:
                raise ParseError("repeat without music", node.pos)
            elif kind == ENDING:
                raise ParseError("ending outside a repeat", node.pos)
            elif self.repeats_back():
                blocks.append(abc.Block(self.repeat()))
            else:
                measure = self.measure()
                if measure:
                    blocks.append(abc.Block(measure))
        if blocks:
            children.append(abc.Sequence(*blocks))
        if children:
            return abc.MajorSection(*children)

    def repeats_back(self):
        """Return True if a repeat end follows before a repeat start or section end."""
        return self.structure[self.index] == REPEAT_END

    def repeat(self):
        """Read a Repeat, the repeat start bar, if any, has already been read."""
        node, kind = self.peek()
        pos = node.pos if node else None
        blocks = self.blocks()
        if not blocks:
            raise ParseError("repeat without music", pos)
        children = [abc.Start(abc.Sequence(*blocks))]
        node, kind = self.peek()
        if kind == ENDING and node.head == '1':
            self.index += 1
            blocks = self.blocks()
            if not blocks:
                raise ParseError("empty first ending", node.pos)
            children.append(abc.End1(abc.Sequence(*blocks)))
            node, kind = self.peek()
        if kind != REPEAT_END:
            raise ParseError("repeat is not closed with :|", node.pos if node else pos)
        self.index += 1
        node, kind = self.peek()
        if kind == ENDING and node.head == '2':
            self.index += 1
            measure = self.measure()
            if not measure:
                raise ParseError("empty second ending", node.pos)
            children.append(abc.End2(abc.Block(measure)))
        return abc.Repeat(*children)

    def blocks(self):
        """Read measures until a bar line or ending that changes the structure."""
        blocks = []
        while True:
            node, kind = self.peek()
            if kind == MEASURE:
                self.index += 1
            elif node is None or kind is not None:
                return blocks
            else:
                measure = self.measure()
                if measure:
                    blocks.append(abc.Block(measure))

    def measure(self):
        """Read a Measure, return None if it contains no music.

        A single bar line ending the measure is consumed, other bar lines and
        endings are left in the stream.

        """
        nodes = []
        while True:
            node, kind = self.peek()
            if kind == MEASURE:
                self.index += 1
                break
            elif node is None or kind is not None:
                break
            nodes.append(node)
            self.index += 1
        if any(isinstance(n, abc.Element) for n in nodes):
            return abc.Measure(*nodes)

