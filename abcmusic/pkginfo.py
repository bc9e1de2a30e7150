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
Meta-information about the abcmusic package.

Keep the version in sync with pyproject.toml.

"""

import collections
Version = collections.namedtuple("Version", "major minor patch")


#: name of the package
name = "abcmusic"

#: the current version
version = Version(0, 1, 0)
version_suffix = ""
#: the current version as a string
version_string = "{}.{}.{}".format(*version) + version_suffix

#: short description
description = "Read ABC music notation into a structured musical representation"

#: long description
long_description = \
    "The abcmusic package reads text in the ABC music notation, and builds " \
    "the music of every voice as a sequence of timed notes, rests, chords " \
    "and tuplets, with accidentals resolved and repeats expanded."

#: maintainer name
maintainer = "the abcmusic developers"

#: license
license = "GPL v3"

