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
Some utility functions to query the children of document nodes.

Comment nodes can occur anywhere in a tree, so they are skipped.

"""

from ..errors import StructuralError
from . import abc


def children(node):
    """Return the list of children that are not a Comment.

    Raises :class:`~abcmusic.errors.StructuralError` if there are none.

    """
    result = list(node ^ abc.Comment)
    if not result:
        raise StructuralError("{!r} has no children".format(node))
    return result


def single(node):
    """Return the single child of node that is not a Comment.

    Raises :class:`~abcmusic.errors.StructuralError` if there is not exactly
    one such child.

    """
    result = list(node ^ abc.Comment)
    if len(result) != 1:
        raise StructuralError("{!r} should have one child".format(node))
    return result[0]


def first(node, cls):
    """Return the first child of node that is an instance of cls.

    Raises :class:`~abcmusic.errors.StructuralError` if there is no such child.

    """
    for n in node / cls:
        return n
    raise StructuralError("{!r} has no {} child".format(node, cls.__name__))

