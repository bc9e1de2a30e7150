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
Test building music from manually built body trees.
"""

from fractions import Fraction

### find abcmusic
import sys
sys.path.insert(0, '.')

import pytest

from abcmusic.builder import build
from abcmusic.dom import abc
from abcmusic.errors import ParseError, StructuralError
from abcmusic.header import HeaderBuilder
from abcmusic.music import Chord, Note, Rest, Tuplet, join
from abcmusic.pitch import Accidental as A


def header(key=0, length=None, beat=None):
    b = HeaderBuilder()
    b.key = key
    b.length = length
    b.beat = beat
    return b.header()


H = header()


def note(pitch, duration=None, accidental=None):
    children = []
    if accidental:
        children.append(abc.Accidental(accidental))
    children.append(abc.Pitch(pitch))
    if duration:
        children.append(abc.Duration(duration))
    return abc.Note(*children)


def measure(*pitches):
    return abc.Block(abc.Measure(*(abc.Element(note(p)) for p in pitches)))


def sequence(*blocks):
    return abc.Sequence(*blocks)


def root(*children):
    return abc.Root(abc.MajorSection(*children))


def letters(seq):
    """Return the measures of a sequence as a list of strings of note letters."""
    return ["".join(e.letter for e in m) for m in seq.measures]


def check_simple():
    """A single note with defaults."""
    s = build(root(sequence(measure('C'))), H)
    assert len(s.measures) == 1
    assert list(s) == [Note(0, A.NATURAL, 'C', Fraction(1))]

    s = build(root(sequence(abc.Block(abc.Measure(
        abc.Element(note("c''", '3/2', '^')),
        abc.Element(abc.Rest(abc.Duration('2'))),
        abc.Element(abc.Rest()),
        abc.Comment('% comment'),
        )))), header(0, Fraction(1, 8), Fraction(1, 4)))
    assert list(s) == [
        Note(3, A.SHARP, 'C', Fraction(3, 4)),
        Rest(Fraction(1)),
        Rest(Fraction(1, 2)),
    ]


def check_repeats():
    """Test repeat expansion."""
    start = abc.Start(sequence(measure('A'), measure('B')))
    end1 = abc.End1(sequence(measure('C')))
    end2 = abc.End2(measure('D'))

    r = abc.Repeat(start.copy())
    assert letters(build(root(r), H)) == ['A', 'B', 'A', 'B']
    r = abc.Repeat(start.copy(), end1.copy())
    assert letters(build(root(r), H)) == ['A', 'B', 'C', 'A', 'B']
    r = abc.Repeat(start.copy(), end2.copy())
    assert letters(build(root(r), H)) == ['A', 'B', 'A', 'B', 'D']
    r = abc.Repeat(start.copy(), end1.copy(), end2.copy())
    assert letters(build(root(r), H)) == ['A', 'B', 'C', 'A', 'B', 'D']

    # repeat followed by a sequence, repeat inside a sequence
    tree = abc.Root(
        abc.MajorSection(
            abc.Repeat(abc.Start(sequence(measure('A')))),
            sequence(measure('B'), abc.Block(abc.Repeat(abc.Start(sequence(measure('C'))), end2.copy())))),
        abc.MajorSection(
            sequence(measure('E', 'F'))))
    assert letters(build(tree, H)) == ['A', 'A', 'B', 'C', 'C', 'D', 'EF']

    # join(S, E1, S, E2)
    S = build(root(sequence(measure('A'), measure('B'))), H)
    E1 = build(root(sequence(measure('C'))), H)
    E2 = build(root(sequence(measure('D'))), H)
    r = abc.Repeat(start.copy(), end1.copy(), end2.copy())
    assert build(root(r), H) == join(S, E1, S, E2)


def check_accidentals():
    """Accidentals are remembered in a measure, for the same octave."""
    m = abc.Measure(
        abc.Element(note('F')),
        abc.Element(note('F', accidental='=')),
        abc.Element(note('F')),
        abc.Element(note('f')),
        abc.Element(abc.Chord(note('F'), note('f', accidental='_'))),
        abc.Element(abc.Tuplet(abc.Triplet(note('f'), note('F'), note('G')))),
    )
    s = build(root(sequence(abc.Block(m), measure('F'))), header(key=1))
    first, second = s.measures
    assert [n.accidental for n in first[:4]] == [A.SHARP, A.NATURAL, A.NATURAL, A.SHARP]
    assert [n.accidental for n in first[4].notes] == [A.NATURAL, A.FLAT]
    assert [n.accidental for n in first[5].notes] == [A.FLAT, A.NATURAL, A.NATURAL]
    # a new measure starts without accidentals
    assert second[0].accidental is A.SHARP

    s = build(root(sequence(measure('B', 'E', 'A'))), header(key=-2))
    assert [n.accidental for n in s] == [A.FLAT, A.FLAT, A.NATURAL]


def check_groups():
    """Chords and tuplets."""
    c = Note(0, A.NATURAL, 'C', Fraction(1))
    e = Note(0, A.NATURAL, 'E', Fraction(1))
    m = abc.Measure(
        abc.Element(abc.Chord(note('C'), note('E'))),
        abc.Element(abc.Tuplet(abc.Duplet(note('C'), abc.Chord(note('C'), note('E'))))),
    )
    s = build(root(sequence(abc.Block(m))), H)
    assert list(s) == [Chord((c, e)), Tuplet((c, Chord((c, e))))]


def check_errors():
    """Wrongly shaped trees raise StructuralError."""
    bad_trees = [
        abc.Root(),
        root(),
        root(sequence(measure('C')), abc.Repeat(abc.Start(sequence(measure('C'))))),
        root(sequence()),
        root(sequence(abc.Block())),
        root(sequence(abc.Block(measure('C'), measure('D')))),
        root(abc.Repeat()),
        root(abc.Repeat(abc.End1(sequence(measure('C'))))),
        root(abc.Repeat(abc.Start(measure('C')))),
        root(sequence(abc.Block(abc.Measure(note('C'))))),
        root(sequence(abc.Block(abc.Measure(abc.Element(abc.Pitch('C')))))),
        root(sequence(abc.Block(abc.Measure(abc.Element(abc.Chord()))))),
        root(sequence(abc.Block(abc.Measure(abc.Element(abc.Chord(abc.Rest())))))),
        root(sequence(abc.Block(abc.Measure(abc.Element(abc.Tuplet(note('C'))))))),
        root(sequence(abc.Block(abc.Measure(abc.Element(abc.Note()))))),
    ]
    for tree in bad_trees:
        with pytest.raises(StructuralError):
            build(tree, H)

    with pytest.raises(ParseError):
        build(root(sequence(abc.Block(abc.Measure(abc.Element(note('C', 'abc')))))), H)


def test_main():
    check_simple()
    check_repeats()
    check_accidentals()
    check_groups()
    check_errors()


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
