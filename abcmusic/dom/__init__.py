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
This module defines a DOM (Document Object Model) for ABC text.

The DOM is a simple tree structure of :class:`~.element.Element` nodes. The
header of a tune becomes a :class:`~.abc.HeaderDocument`, the music of each
voice a :class:`~.abc.Root`. The node types are defined in :mod:`.abc`, and
the :mod:`.read` module reads them from text.

"""

