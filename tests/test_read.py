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
Test reading ABC text into DOM trees, by comparing with manually built trees.
"""

### find abcmusic
import sys
import time
sys.path.insert(0, '.')

import pytest

from abcmusic.dom import abc, read
from abcmusic.errors import ParseError
from abcmusic.lang.abc import SectionReader


def note(pitch, duration=None, accidental=None):
    children = []
    if accidental:
        children.append(abc.Accidental(accidental))
    children.append(abc.Pitch(pitch))
    if duration:
        children.append(abc.Duration(duration))
    return abc.Note(*children)


def n(pitch, duration=None, accidental=None):
    """Return an Element with a Note."""
    return abc.Element(note(pitch, duration, accidental))


def m(*elements):
    """Return a Block with a Measure."""
    return abc.Block(abc.Measure(*elements))


def seq(*blocks):
    return abc.Sequence(*blocks)


def check_body(text, *sections):
    """Return True if the text is read as a Root with the sections."""
    return read.body_document(text).equals(abc.Root(*sections))


def check_events():
    """Notes, rests, chords and tuplets."""
    assert check_body("^^c'2 _B,/ =e3/4 z z/ DE",
        abc.MajorSection(seq(m(
            n("c'", "2", "^^"),
            n("B,", "/", "_"),
            n("e", "3/4", "="),
            abc.Element(abc.Rest()),
            abc.Element(abc.Rest(abc.Duration("/"))),
            n("D"),
            n("E"),
        ))))

    assert check_body("[CE] [^F,A2]",
        abc.MajorSection(seq(m(
            abc.Element(abc.Chord(note("C"), note("E"))),
            abc.Element(abc.Chord(note("F,", None, "^"), note("A", "2"))),
        ))))

    assert check_body("(3CDE F (2[CE]D",
        abc.MajorSection(seq(m(
            abc.Element(abc.Tuplet(abc.Triplet(note("C"), note("D"), note("E")))),
            n("F"),
            abc.Element(abc.Tuplet(abc.Duplet(abc.Chord(note("C"), note("E")), note("D")))),
        ))))

    assert check_body("A % a comment\nB",
        abc.MajorSection(seq(m(n("A"), abc.Comment("% a comment"), n("B")))))


def check_structure():
    """Sections, measures, repeats and endings."""
    assert check_body("A | B || C |]",
        abc.MajorSection(seq(m(n("A")), m(n("B")))),
        abc.MajorSection(seq(m(n("C")))))

    # empty measures and sections are dropped
    assert check_body("| A || | B | |",
        abc.MajorSection(seq(m(n("A")))),
        abc.MajorSection(seq(m(n("B")))))

    assert check_body("A |: B | C :| D",
        abc.MajorSection(seq(
            m(n("A")),
            abc.Block(abc.Repeat(abc.Start(seq(m(n("B")), m(n("C")))))),
            m(n("D")))))

    # implicit repeat from the start of the section
    assert check_body("A | B :| C",
        abc.MajorSection(
            abc.Repeat(abc.Start(seq(m(n("A")), m(n("B"))))),
            seq(m(n("C")))))

    assert check_body("|: A |1 B :|2 C | D |]",
        abc.MajorSection(seq(
            abc.Block(abc.Repeat(
                abc.Start(seq(m(n("A")))),
                abc.End1(seq(m(n("B")))),
                abc.End2(m(n("C"))))),
            m(n("D")))))

    assert check_body("A [1 B :| [2 C ||",
        abc.MajorSection(
            abc.Repeat(
                abc.Start(seq(m(n("A")))),
                abc.End1(seq(m(n("B")))),
                abc.End2(m(n("C"))))))

    # a double repeat bar ends a repeat and starts a new one
    assert check_body("A :|: B :|",
        abc.MajorSection(
            abc.Repeat(abc.Start(seq(m(n("A"))))),
            seq(abc.Block(abc.Repeat(abc.Start(seq(m(n("B")))))))))

    # a repeat end after a repeat repeats from there
    assert check_body("|: A :| B :|",
        abc.MajorSection(seq(
            abc.Block(abc.Repeat(abc.Start(seq(m(n("A")))))),
            abc.Block(abc.Repeat(abc.Start(seq(m(n("B")))))))))


def check_header():
    """The header document."""
    text = (
        "X:3\n"
        "T:Title\n"
        "C:Me\n"
        "M:C\n"
        "L:1/4\n"
        "Q:1/4=80\n"
        "V:S\n"
        "R:reel\n"
        "% comment\n"
        "K:Am\n"
    )
    assert read.header_document(text).equals(abc.HeaderDocument(
        abc.Index("3"),
        abc.Title(abc.Name("Title")),
        abc.Option(abc.Author(abc.Name("Me"))),
        abc.Option(abc.Meter(abc.SpecialMeter("C"))),
        abc.Option(abc.Length(abc.Fraction(abc.Integer("1"), abc.Integer("4")))),
        abc.Option(abc.Tempo(abc.Fraction(abc.Integer("1"), abc.Integer("4")), abc.Integer("80"))),
        abc.Option(abc.Voice(abc.VoiceName("S"))),
        abc.Field("R", "reel"),
        abc.Comment("% comment"),
        abc.Key("Am"),
    ))


def check_positions():
    """Nodes read with origin know their position."""
    tree = read.body_document("A2 B", True)
    first = next(tree // abc.Note)
    assert first.pos == 0
    assert first.end == 2
    assert repr(first) == "<abc.Note (2 children) [0:2]>"
    assert repr(abc.Pitch("c")) == "<abc.Pitch 'c'>"
    assert [p.pos for p in tree // abc.Pitch] == [0, 3]
    assert tree.pos == 0

    tree = read.body_document("A2 B")
    assert tree.pos is None

    with pytest.raises(ParseError) as info:
        read.body_document("A B &", True)
    assert info.value.pos == 4


def measures(count, last):
    """Return a stream of one-note measures, ending with the last bar line."""
    nodes = []
    for i in range(count):
        nodes.append(n('C'))
        nodes.append(abc.Bar('|'))
    nodes[-1] = abc.Bar(last)
    return nodes


def check_long_section():
    """A long section without repeats is grouped in linear time."""
    count = 20000
    nodes = measures(count, '|]')
    start = time.perf_counter()
    root = SectionReader(nodes).root()
    assert time.perf_counter() - start < 5
    section, = root
    sequence, = section
    assert len(sequence) == count
    assert all(isinstance(block[0], abc.Measure) for block in sequence)

    # a repeat end far away still repeats back to the section start
    section, = SectionReader(measures(count, ':|')).root()
    repeat, = section
    assert isinstance(repeat, abc.Repeat)
    assert len(repeat[0][0]) == count


def check_errors():
    """Text that can't be read."""
    for text in (
            "",
            "% only a comment",
            "A B &",
            "C2 2",
            "(3 A B |",
            "(3 A z B",
            "(3 A B",
            "A |1 B",
            "|: A | B",
            "|: A | B ||",
            "A :| :|",
            "[CE",
            "[]",
            "[C z]",
            "|: A :|2 |",
            ):
        with pytest.raises(ParseError):
            read.body_document(text)


def test_main():
    check_events()
    check_structure()
    check_header()
    check_positions()
    check_errors()
    check_long_section()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
