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
Exceptions raised when reading ABC text.

All exceptions inherit from :class:`AbcError`, and also from the builtin
exception that describes their nature best, so existing handlers keep working.

"""


class AbcError(Exception):
    """Base class for all exceptions of this package."""


class ParseError(AbcError, ValueError):
    """Raised when the text can't be read as valid ABC.

    The ``pos`` attribute holds the position in the text, if known.

    """
    def __init__(self, message, pos=None):
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self):
        if self.pos is None:
            return self.message
        return "{} (at position {})".format(self.message, self.pos)


class UnknownKeyError(AbcError, KeyError):
    """Raised when a key name is not in the major or minor key tables."""
    def __str__(self):
        return "unknown key: {!r}".format(self.args[0])


class StructuralError(AbcError, RuntimeError):
    """Raised when a document tree contains a node where it is not allowed.

    Trees created by :mod:`abcmusic.dom.read` never cause this error, so it
    denotes a programming error, not an error in the ABC text.

    """

