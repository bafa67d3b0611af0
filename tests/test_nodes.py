# -*- coding: utf-8 -*-
#
# This file is part of `mmlast`, a library for Music Macro Language (MML) text
#
# Copyright © 2024 by the mmlast authors
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
Test the nodes module.
"""

import dataclasses
import io

import pytest

### find mmlast
import sys
sys.path.insert(0, '.')

from mmlast import parse
from mmlast.nodes import *
from mmlast import nodes


def test_equality():
    assert Note('c', 4) == Note('c', 4)
    assert Note('c', 4) != Note('c', 8)
    assert Note('c') != Harmony(('c',))
    assert OctaveUp() == OctaveUp()
    assert OctaveUp() != OctaveDown()
    assert Velocity(100) != Timing(100)

    # nodes are hashable
    assert len({Note('c'), Note('c'), Rest()}) == 2
    assert hash(GroupedNotes((Note('c'),), 4)) == hash(GroupedNotes((Note('c'),), 4))


def test_immutable():
    n = Note('c')
    with pytest.raises(dataclasses.FrozenInstanceError):
        n.length = 4


def test_children():
    g = GroupedNotes((Note('c'), GroupedNotes((Note('d'), Note('e'))), Rest()), 4)
    assert g.children() == (Note('c'), GroupedNotes((Note('d'), Note('e'))), Rest())
    assert list(g.descendants()) == [
        Note('c'), GroupedNotes((Note('d'), Note('e'))), Note('d'), Note('e'), Rest()]

    m = RhythmMacroDefine('b', NumberedNote(36))
    assert m.children() == (NumberedNote(36),)
    assert Note('c').children() == ()
    assert list(Note('c').descendants()) == []


def test_dump():
    f = io.StringIO()
    parse("{c d {e}8}4")[0].dump(f)
    assert f.getvalue() == (
        "GroupedNotes(length=4)\n"
        " ├╴Note(note='c')\n"
        " ├╴Note(note='d')\n"
        " ╰╴GroupedNotes(length=8)\n"
        "    ╰╴Note(note='e')\n"
    )

    f = io.StringIO()
    nodes.dump(parse("$b{n36} c8,,100"), f, "ascii")
    assert f.getvalue() == (
        "RhythmMacroDefine(name='b')\n"
        " `-NumberedNote(number=36)\n"
        "Note(note='c', length=8, velocity=100)\n"
    )


def test_comment_kind():
    assert Comment(CommentKind.LINE_DEBUG, "x").is_debug
    assert not Comment(CommentKind.RANGE, "x").is_debug
    assert not Comment(CommentKind.LINE, "x").is_debug
