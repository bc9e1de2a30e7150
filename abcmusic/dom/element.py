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
This module defines the :class:`Element` class and its head-carrying variants.

An Element is a node in the document tree of an ABC header or voice body. It
can be constructed manually, or from parce tokens using the
:meth:`~HeadElement.with_origin` class method, in which case the element
remembers the tokens it was read from, and thus its position in the text.

"""

import reprlib

from ..node import Node


class Element(Node):
    """Base class for all element types.

    The Element has no head value. Child elements can be specified directly as
    arguments to the constructor.

    """
    __slots__ = ()

    def __repr__(self):
        def result():
            cls = self.__class__
            mod = cls.__module__.split('.')[-1]
            yield "{}.{}".format(mod, cls.__name__)
            head = self.repr_head()
            if head is not None:
                yield head
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
            pos = self.pos
            if pos is not None:
                yield '[{}:{}]'.format(pos, self.end)
        return "<{}>".format(" ".join(result()))

    def repr_head(self):
        """Return a representation for the head, used in :meth:`__repr__`.

        The default implementation returns None.

        """
        return None

    @property
    def pos(self):
        """Return the position of this element in the source text.

        Returns None if neither this element nor any of its descendants has an
        origin.

        """
        try:
            return self.head_origin[0].pos
        except (AttributeError, IndexError):
            for n in self.descendants():
                try:
                    return n.head_origin[0].pos
                except (AttributeError, IndexError):
                    pass

    @property
    def end(self):
        """Return the end position of this element in the source text, or None."""
        nodes = [self]
        nodes.extend(self.descendants())
        for n in reversed(nodes):
            try:
                return n.head_origin[-1].end
            except (AttributeError, IndexError):
                pass


class HeadElement(Element):
    """Element that is read from one or more tokens, e.g. a delimiter."""
    __slots__ = ('head_origin',)

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children):
        """Instantiate an Element from the origin tokens, but don't keep the tokens."""
        return cls(*children)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children):
        """Instantiate an Element from the origin tokens, and keep the tokens.

        This way, this element knows its position in the text source.

        """
        node = cls.from_origin(head_origin, tail_origin, *children)
        node.head_origin = tuple(head_origin)  #: tuple of parce Tokens the head value is read from
        return node


class TextElement(HeadElement):
    """Element that has a text head value, like a pitch name or a title."""
    __slots__ = ('head',)

    def __init__(self, head, *children):
        super().__init__(*children)
        self.head = head

    def copy(self):
        """Return a copy of this Node and all its children."""
        return type(self)(self.head, *(n.copy() for n in self))

    def repr_head(self):
        """Return a repr value for our head value."""
        return reprlib.repr(self.head)

    def body_equals(self, other):
        """Compares the head value."""
        return self.head == other.head

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children):
        """Instantiate an Element from the origin tokens, but don't keep the tokens.

        The head value is computed by :meth:`read_head`.

        """
        return cls(cls.read_head(head_origin), *children)

    @classmethod
    def read_head(cls, origin):
        """Return the head value as computed from the specified origin tokens.

        The default implementation concatenates the text of the tokens.

        """
        return ''.join(t.text for t in origin)

