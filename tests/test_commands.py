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
Test reading commands other than notes.
"""

### find mmlast
import sys
sys.path.insert(0, '.')

from mmlast import parse, read
from mmlast.nodes import *


def test_defaults():
    assert parse("l8 o4 q80 p-100") == [Length(8), Octave(4), Gate(80), PitchBend(-100)]
    assert parse("v100,10 t-4") == [Velocity(100, 10), Timing(-4)]
    assert parse("v100t4,2") == [Velocity(100), Timing(4, 2)]


def test_relative():
    assert parse("><`\"") == [OctaveUp(), OctaveDown(), OctaveUpOnce(), OctaveDownOnce()]
    assert parse(")10 ( )") == [VelocityUp(10), VelocityDown(None), VelocityUp(None)]


def test_control_change():
    assert parse("y7,100") == [ControlChange(7, 100)]
    assert parse("y11,0(0,127,96)") == [ControlChange(11, 0, OnTime(0, 127, 96))]
    assert parse("y11,0(0, 127, 96)") == [ControlChange(11, 0, OnTime(0, 127, 96))]
    cc = read.command("y1,64(-10,10,48)")
    assert cc.on_time.low == -10
    assert cc.on_time.high == 10
    assert cc.on_time.length == 48

    # a parenthesis after whitespace is a velocity change
    assert parse("y7,100 (") == [ControlChange(7, 100), VelocityDown()]


def test_voice_select():
    assert parse("@1") == [VoiceSelect(1)]
    assert parse("@1,2") == [VoiceSelect(1, 2)]
    assert parse("@1,2,3") == [VoiceSelect(1, 2, 3)]
    # msb is only read after lsb
    assert parse("@1,,3") == [VoiceSelect(1)]


def test_macro():
    assert parse("#intro c") == [MacroRef('#intro'), Note('c')]
    assert parse("#a1#b2") == [MacroRef('#a1'), MacroRef('#b2')]
    assert parse("$b{n36}") == [RhythmMacroDefine('b', NumberedNote(36))]
    assert parse("$s{ {cd}8 }") == [
        RhythmMacroDefine('s', GroupedNotes((Note('c'), Note('d')), 8))]


def test_loop():
    assert parse("[2 c : d]") == [LoopBegin(2), Note('c'), LoopBreak(), Note('d'), LoopEnd()]
    assert parse("[c]") == [LoopBegin(None), Note('c'), LoopEnd()]
    assert parse("?c") == [PlayFromHere(), Note('c')]


def test_comments():
    assert parse("/* a  b\n c */") == [Comment(CommentKind.RANGE, " a  b\n c ")]
    assert parse("// hi there\nc") == [Comment(CommentKind.LINE, " hi there"), Note('c')]
    assert parse("//") == [Comment(CommentKind.LINE, "")]
    assert parse("/**/") == [Comment(CommentKind.RANGE, "")]

    debug, = parse("##  debug  ")
    assert debug.kind is CommentKind.LINE_DEBUG
    assert debug.content == "  debug  "
    assert debug.is_debug
    assert not parse("// x")[0].is_debug

    # comment text is not read as commands
    assert parse("c /* d e */ f") == [Note('c'), Comment(CommentKind.RANGE, " d e "), Note('f')]


def test_empty():
    assert parse("") == []
    assert parse("  \n\t ") == []
    assert read.command("") is None


def test_command():
    assert read.command("y7,100") == ControlChange(7, 100)
    assert read.command("@1,2,3 c") == VoiceSelect(1, 2, 3)


def test_deterministic():
    text = "@1 v100 l8 [4 c e g 'ceg'4,80 : {a b}4 ] $b{n36} // end"
    assert parse(text) == parse(text)


if __name__ == "__main__":
    test_defaults()
    test_relative()
    test_control_change()
    test_voice_select()
    test_macro()
    test_loop()
    test_comments()
    test_empty()
    test_command()
    test_deterministic()
