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
Split the text of an ABC tune in the header and the music of each voice.

The header consists of the lines upto and including the first ``K:`` line, the
rest is the body::

    >>> from abcmusic import split
    >>> text = "X:1\nK:C\nV:1\nCDEF|\nV:2\nC,4|\n"
    >>> split.header_text(text)
    'X:1\nK:C\n'
    >>> split.voice_text(text, "2")
    'C,4|'

"""

import re

from .errors import ParseError


_field_re = re.compile(r'[A-Za-z]:')
_voice_re = re.compile(r'V:(.*)')


def split(text):
    """Return a two-tuple (header, body) with the header and body text.

    Raises :class:`~abcmusic.errors.ParseError` if there is no ``K:`` line.

    """
    lines = text.splitlines(True)
    for n, line in enumerate(lines):
        if line.startswith('K:'):
            return ''.join(lines[:n+1]), ''.join(lines[n+1:])
    raise ParseError("no K: field found")


def header_text(text):
    """Return the header text, the lines upto and including the ``K:`` line."""
    return split(text)[0]


def body_text(text):
    """Return the text after the header."""
    return split(text)[1]


def voice_text(text, name=""):
    """Return the music of the voice with the specified name.

    Empty lines and comment lines are skipped. A ``V:`` line selects the voice
    for the lines following it. All lines are selected up to the first ``V:``
    line when ``name`` is empty. Other information fields in the body are
    skipped. The selected lines are joined with newlines.

    """
    selected = not name
    lines = []
    for line in body_text(text).splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith('%'):
            continue
        m = _voice_re.match(stripped)
        if m:
            selected = m.group(1).strip() == name
        elif not _field_re.match(stripped) and selected:
            lines.append(line)
    return '\n'.join(lines)

