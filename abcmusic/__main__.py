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
Command line tool to read an ABC file and show its music.

Usage::

    python3 -m abcmusic [-v] [-e ENCODING] FILE

"""

import argparse
import logging
import sys

import abcmusic
from abcmusic.errors import ParseError, UnknownKeyError


def get_parser():
    parser = argparse.ArgumentParser(
        prog="python3 -m abcmusic",
        description="Read an ABC file and show the header and the music of each voice.")
    parser.add_argument('file', help='the ABC file to read')
    parser.add_argument('-e', '--encoding', help='the encoding of the file (default: UTF-8 or Latin-1)')
    parser.add_argument('-v', '--verbose', action='store_true', help='show debug messages')
    parser.add_argument('--version', action='version', version=abcmusic.version_string)
    return parser


def show(piece, file=None):
    """Print the header and the music of all voices of the MusicPiece."""
    h = piece.header
    print("Title:    {}".format(h.title or ""), file=file)
    print("Composer: {}".format(h.composer or ""), file=file)
    print("Key:      {}".format(h.key), file=file)
    print("Meter:    {}/{}".format(*h.meter), file=file)
    print("Length:   {}".format(h.length), file=file)
    print("Tempo:    {} = {}".format(h.beat, h.tempo), file=file)
    for name, music in piece.voices:
        print(file=file)
        print("Voice {!r}: {} measures, {} elements".format(
            name, len(music.measures), len(music)), file=file)
        music.dump(file)


def main(argv=None):
    args = get_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")
    try:
        piece = abcmusic.load(args.file, args.encoding)
    except OSError as err:
        logging.critical("reading %s failed: %s", args.file, err)
        return 1
    except (ParseError, UnknownKeyError) as err:
        logging.critical("parsing %s failed: %s", args.file, err)
        return 1
    show(piece)
    return 0


if __name__ == "__main__":
    sys.exit(main())

