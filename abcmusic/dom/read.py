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
Simple helper functions to build DOM trees reading from text.

By default the generated DOM nodes do not know their position in the
originating text, because the origin tokens are not preserved. If you set the
``with_origin`` argument in the reader functions to True, the origin tokens are
preserved, so the DOM nodes know their position in the text, and errors can
mention the position where they occurred.

"""


from parce.transform import Transformer

from ..lang import abc


_transformer = [Transformer(), Transformer()]
_transformer[0].transform_name_template = "{}AdHocTransform"


def header_document(text, with_origin=False):
    r"""Return an :class:`.abc.HeaderDocument` from the header text.

    Example::

        >>> from abcmusic.dom import read
        >>> read.header_document("T:Cooley's\nM:4/4\nK:Em\n").dump()
        <abc.HeaderDocument (3 children)>
         ├╴<abc.Title (1 child)>
         │  ╰╴<abc.Name "Cooley's">
         ├╴<abc.Option (1 child)>
         │  ╰╴<abc.Meter (1 child)>
         │     ╰╴<abc.Fraction (2 children)>
         │        ├╴<abc.Integer '4'>
         │        ╰╴<abc.Integer '4'>
         ╰╴<abc.Key 'Em'>

    """
    return _transformer[with_origin].transform_text(abc.AbcHeader.root, text)


def body_document(text, with_origin=False):
    """Return an :class:`.abc.Root` from the music text of one voice.

    Example::

        >>> from abcmusic.dom import read
        >>> read.body_document("A2 B | [ce] z |]").dump()
        <abc.Root (1 child)>
         ╰╴<abc.MajorSection (1 child)>
            ╰╴<abc.Sequence (2 children)>
               ├╴<abc.Block (1 child)>
               │  ╰╴<abc.Measure (2 children)>
               │     ├╴<abc.Element (1 child)>
               │     │  ╰╴<abc.Note (2 children)>
               │     │     ├╴<abc.Pitch 'A'>
               │     │     ╰╴<abc.Duration '2'>
               │     ╰╴<abc.Element (1 child)>
               │        ╰╴<abc.Note (1 child)>
               │           ╰╴<abc.Pitch 'B'>
               ╰╴<abc.Block (1 child)>
                  ╰╴<abc.Measure (2 children)>
                     ├╴<abc.Element (1 child)>
                     │  ╰╴<abc.Chord (2 children)>
                     │     ├╴<abc.Note (1 child)>
                     │     │  ╰╴<abc.Pitch 'c'>
                     │     ╰╴<abc.Note (1 child)>
                     │        ╰╴<abc.Pitch 'e'>
                     ╰╴<abc.Element (1 child)>
                        ╰╴<abc.Rest>

    """
    return _transformer[with_origin].transform_text(abc.Abc.root, text)

