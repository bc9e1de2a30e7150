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
This module defines a :class:`Node` class, to build the simple tree structures
that hold an ABC header or the body of a voice.

A Node is a Python list of child nodes that keeps a weak reference to its
parent. Subclasses (see :mod:`abcmusic.dom.abc`) describe what a node means.

"""

import itertools
import weakref


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"


_NO_PARENT = lambda: None


class Node(list):
    """Node implements a simple tree type, based on Python :class:`list`.

    Adding nodes to a node sets their parent. The parent is referred to with a
    weak reference, so keep a reference to the root node of a tree.

    Besides the usual list methods, Node defines three query operators, that
    all expect a Node subclass (or a tuple of classes) as argument:

    * ``node / Class`` iterates over the children that are an instance of
      Class;

    * ``node // Class`` iterates over all descendants in document order that
      are an instance of Class;

    * ``node ^ Class`` iterates over the children that are *not* an instance
      of Class.

    """

    __slots__ = ('__weakref__', '_parent')

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    def __bool__(self):
        """Always True."""
        return True

    def __init__(self, *children):
        self._parent = _NO_PARENT
        if children:
            list.extend(self, children)
            for node in self:
                node._parent = weakref.ref(self)

    def _filter(self, cls, source_iterator, invert=False):
        """Return an iterator over the nodes from source_iterator that match cls.

        Returns NotImplemented if cls is not a class or tuple of classes.

        """
        if not isinstance(cls, (tuple, type)):
            return NotImplemented
        predicate = lambda node: isinstance(node, cls)
        return (itertools.filterfalse if invert else filter)(predicate, source_iterator)

    def __truediv__(self, cls):
        """Iterate over children that inherit the specified class(es)."""
        return self._filter(cls, self)

    def __floordiv__(self, cls):
        """Iterate over descendants inheriting the specified class(es), in document order."""
        return self._filter(cls, self.descendants())

    def __xor__(self, cls):
        """Iterate over children that do not inherit the specified class(es)."""
        return self._filter(cls, self, True)

    @property
    def parent(self):
        """The parent Node or None; uses a weak reference."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _NO_PARENT if node is None else weakref.ref(node)

    def root(self):
        """Return the root node."""
        root = self
        for root in self.ancestors():
            pass
        return root

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare, use :meth:`equals` to compare contents."""
        return self is other

    def __ne__(self, other):
        return self is not other

    def copy(self):
        """Return a copy of this Node and all its children."""
        return type(self)(*(n.copy() for n in self))

    def append(self, node):
        """Append node to this node; the parent is set to this node."""
        node._parent = weakref.ref(self)
        list.append(self, node)

    def extend(self, nodes):
        """Append nodes to this node; the parent is set to this node."""
        index = len(self)
        list.extend(self, nodes)
        for node in self[index:]:
            node._parent = weakref.ref(self)

    def equals(self, other):
        """Return True if we and other are of the same type and have equal contents.

        Calls :meth:`body_equals` before comparing the children.

        """
        return type(self) is type(other) and len(self) == len(other) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests.

        The default implementation returns True.

        """
        return True

    def is_last(self):
        """Return True if this is the last node. Fails if no parent."""
        return self.parent[-1] is self

    def ancestors(self):
        """Yield the parent, then the parent's parent, etcetera."""
        n = self.parent
        while n:
            yield n
            n = n.parent

    def descendants(self):
        """Iterate over all the descendants of this node, in document order."""
        stack = []
        gen = iter(self)
        while True:
            for n in gen:
                yield n
                if len(n):
                    stack.append(gen)
                    gen = iter(n)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def dump(self, file=None, style=None, depth=0):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        i = 2
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        prefix = []
        node = self
        for _ in range(depth):
            prefix.append(d[i + int(node.is_last())])
            node = node.parent
            i = 0
        print(''.join(reversed(prefix)) + repr(self), file=file)
        for n in self:
            n.dump(file, style, depth + 1)

