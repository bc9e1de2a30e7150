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
The abcmusic module.

Read ABC text with :func:`parse` or an ABC file with :func:`load`::

    >>> import abcmusic
    >>> piece = abcmusic.parse("X:1\nT:Scale\nK:D\nDEFG|ABcd|]\n")
    >>> piece.header.title
    'Scale'
    >>> name, music = piece.voices[0]
    >>> len(music.measures), len(music)
    (2, 8)

On first import, the ABC language definitions are added to the parce registry.

"""

import logging

from . import builder, header, split
from .dom import read
from .music import MusicPiece
from .pkginfo import version, version_string


__all__ = ('parse', 'load', 'version', 'version_string')


logger = logging.getLogger(__name__)


def parse(text):
    """Read the ABC text of one tune and return a :class:`~.music.MusicPiece`.

    Raises :class:`~.errors.ParseError` if the text is not valid ABC, and
    :class:`~.errors.UnknownKeyError` for an unknown key.

    """
    head = split.header_text(text)
    h = header.build(read.header_document(head, True), head)
    names = h.voices or ("",)
    logger.debug("reading %d voice(s)", len(names))
    voices = []
    for name in names:
        root = read.body_document(split.voice_text(text, name), True)
        voices.append((name, builder.build(root, h)))
    return MusicPiece(h, tuple(voices))


def load(filename, encoding=None):
    """Read the ABC file and return a :class:`~.music.MusicPiece`.

    If ``encoding`` is not given, UTF-8 is tried first, and then Latin-1.
    Raises :class:`OSError` if the file can't be read.

    """
    if encoding:
        with open(filename, encoding=encoding) as f:
            text = f.read()
    else:
        try:
            with open(filename, encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError:
            logger.debug("%s is not UTF-8, reading it as Latin-1", filename)
            with open(filename, encoding="latin-1") as f:
                text = f.read()
    return parse(text)


from parce.registry import register
register("abcmusic.lang.abc.Abc.root",
    name = "ABC",
    desc = "The music of a voice in ABC notation",
)

register("abcmusic.lang.abc.AbcHeader.root",
    name = "ABC header",
    desc = "The header of a tune in ABC notation",
)

del register

