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


r"""
The header of an ABC tune.

The :func:`build` function reads a :class:`~abcmusic.dom.abc.HeaderDocument`
and returns a :class:`Header`::

    >>> from abcmusic.dom import read
    >>> from abcmusic.header import build
    >>> text = "X:1\nT:Speed the Plough\nM:4/4\nL:1/8\nK:G\n"
    >>> h = build(read.header_document(text), text)
    >>> h.title, h.key, h.meter, h.length
    ('Speed the Plough', 1, (4, 4), Fraction(1, 8))

"""

import collections
import fractions
import logging

from parce.util import Dispatcher

from . import key
from .dom import abc
from .dom.util import first, single
from .errors import ParseError, StructuralError


logger = logging.getLogger(__name__)


DEFAULT_LENGTH = fractions.Fraction(1, 8)   #: the default note length when there is no L: field
DEFAULT_METER = (4, 4)                      #: the meter when there is no M: field
DEFAULT_TEMPO = 100                         #: the tempo in beats per minute when there is no Q: field
DEFAULT_KEY = 0                             #: the key signature when the key is not set


Header = collections.namedtuple("Header",
    "index title composer key meter length tempo beat voices text")
Header.index.__doc__ = "The reference number (X:), or None."
Header.title.__doc__ = "The title (the first T: field with text), or None."
Header.composer.__doc__ = "The composer (C:), or None if no C: field has text."
Header.key.__doc__ = "The key signature, from -7 (7 flats) to 7 (7 sharps)."
Header.meter.__doc__ = "The meter as a tuple (numerator, denominator)."
Header.length.__doc__ = "The default note length, a Fraction."
Header.tempo.__doc__ = "The tempo in beats per minute."
Header.beat.__doc__ = "The length of a beat, a Fraction."
Header.voices.__doc__ = "The tuple of voice names, in the order they were declared."
Header.text.__doc__ = "The header text as it was read."


class HeaderBuilder:
    """Collects the values of a header, :meth:`header` returns the Header.

    The attributes are None when not set; the defaults are applied when the
    Header is created.

    """
    def __init__(self, text=""):
        self.text = text
        self.index = None
        self.title = None
        self.composer = None
        self.key = DEFAULT_KEY
        self.meter = None
        self.length = None
        self.tempo = None
        self.beat = None
        self.voices = []

    def add_voice(self, name):
        """Add a voice name; names are kept in order, also when they occur twice."""
        self.voices.append(name)

    def header(self):
        """Return a :class:`Header` with the collected values."""
        length = self.length or DEFAULT_LENGTH
        return Header(
            self.index,
            self.title,
            self.composer,
            self.key,
            self.meter or DEFAULT_METER,
            length,
            self.tempo or DEFAULT_TEMPO,
            self.beat or length,
            tuple(self.voices),
            self.text,
        )


class HeaderReader:
    """Reads the nodes of a HeaderDocument into a :class:`HeaderBuilder`."""

    _node = Dispatcher()
    _option = Dispatcher()

    def __init__(self, builder):
        self.builder = builder

    def read(self, document):
        """Read all the nodes of the HeaderDocument."""
        for node in document:
            meth = self._node.get(type(node))
            if not meth:
                raise StructuralError("unexpected node in header: {!r}".format(node))
            meth(node)

    @_node(abc.Comment)
    @_node(abc.Field)
    def ignore(self, node):
        """Called for nodes that don't change the header."""
        pass

    @_node(abc.Index)
    def index(self, node):
        self.builder.index = integer(node)

    @_node(abc.Title)
    def title(self, node):
        name = first(node, abc.Name).head
        if name and self.builder.title is None:
            self.builder.title = name

    @_node(abc.Key)
    def key_signature(self, node):
        self.builder.key = key.signature(node.head)

    @_node(abc.Option)
    def option(self, node):
        child = single(node)
        meth = self._option.get(type(child))
        if not meth:
            raise StructuralError("unexpected node in option: {!r}".format(child))
        meth(child)

    @_option(abc.Author)
    def author(self, node):
        name = first(node, abc.Name).head
        if name:
            self.builder.composer = name

    @_option(abc.Meter)
    def meter(self, node):
        for n in node / abc.Fraction:
            self.builder.meter = fraction(n)
            return
        special = first(node, abc.SpecialMeter).head
        self.builder.meter = (4, 4) if special == "C" else (2, 2)

    @_option(abc.Length)
    def length(self, node):
        self.builder.length = fractions.Fraction(*fraction(first(node, abc.Fraction)))

    @_option(abc.Tempo)
    def tempo(self, node):
        for n in node / abc.Fraction:
            self.builder.beat = fractions.Fraction(*fraction(n))
        bpm = first(node, abc.Integer)
        self.builder.tempo = integer(bpm)
        if not self.builder.tempo:
            raise ParseError("invalid tempo: 0", bpm.pos)

    @_option(abc.Voice)
    def voice(self, node):
        self.builder.add_voice(first(node, abc.VoiceName).head)


def integer(node):
    """Return the integer value of a TextElement node.

    Raises :class:`~abcmusic.errors.ParseError` if the text is not a number.

    """
    text = node.head
    if not text.isdigit() or not text.isascii():
        raise ParseError("invalid number: {!r}".format(text), node.pos)
    return int(text)


def fraction(node):
    """Return the (numerator, denominator) tuple of a Fraction node.

    Both values must be positive.

    """
    values = [integer(n) for n in node / abc.Integer]
    if len(values) != 2:
        raise StructuralError("{!r} should have two Integer children".format(node))
    numerator, denominator = values
    if not numerator or not denominator:
        raise ParseError("invalid fraction: {}/{}".format(numerator, denominator), node.pos)
    return numerator, denominator


def build(document, text=""):
    """Return a :class:`Header` built from the HeaderDocument.

    The ``text`` is the header text the document was read from, it is kept
    in the :attr:`~Header.text` attribute.

    """
    builder = HeaderBuilder(text)
    HeaderReader(builder).read(document)
    header = builder.header()
    logger.debug("header: key %d, meter %d/%d, length %s, %d voice(s)",
        header.key, header.meter[0], header.meter[1], header.length, len(header.voices))
    return header

