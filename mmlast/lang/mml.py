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
MML language and transform definition.

The :class:`Mml` language definition creates a parce context for every
command; the name of the lexicon is the rule the command matched. The tokens
that start a command are consumed by its context, so every context holds the
complete text of one command.

The :class:`MmlTransform` has a method for every lexicon, which converts the
context into a :mod:`~mmlast.nodes` node. When a command misses a required
part, the method raises a :class:`~mmlast.errors.ConversionError`, which is
logged and the command is left out. :class:`MmlStrictTransform` lets the
error propagate instead.

"""

import functools
import logging

from parce import Language, lexicon, default_action, default_target, skip
from parce.rule import bygroup
from parce.transform import Transform, add_untransformed
import parce.action as a

from mmlast import nodes
from mmlast.errors import ConversionError


logger = logging.getLogger(__name__)

NUMBER = r'-?\d+'

# a parameter never directly follows another number
SLOT_NUMBER = r'(?<!\d)' + NUMBER


class Mml(Language):
    """Music Macro Language definition."""
    @lexicon
    def root(cls):
        yield from cls.commands()

    @classmethod
    def commands(cls):
        """Yield the rules for all commands, whitespace and unknown text."""
        yield r'/\*', a.Comment.Start, cls.range_comment
        yield r'##', a.Comment.Line, cls.line_comment_debug
        yield r'//', a.Comment.Line, cls.line_comment
        yield r'#[^\W\d]\w*', a.Name.Macro, cls.macro
        yield r'[{}]'.format(nodes.NOTE_NAMES), a.Name.Note, cls.abc_note
        yield r'n', a.Name.Note, cls.midi_note
        yield r'r', a.Name.Rest, cls.rest
        yield r'l', a.Keyword, cls.length
        yield r'o', a.Keyword, cls.octave
        yield r'p', a.Keyword, cls.pitch_bend
        yield r'q', a.Keyword, cls.gate
        yield r'v', a.Keyword, cls.velocity
        yield r't', a.Keyword, cls.timing
        yield r'y', a.Keyword, cls.control_change
        yield r'@', a.Keyword, cls.voice_select
        yield r'>', a.Operator, cls.octave_up
        yield r'<', a.Operator, cls.octave_down
        yield r'`', a.Operator, cls.octave_up_once
        yield r'"', a.Operator, cls.octave_down_once
        yield r'\)', a.Operator, cls.velocity_up
        yield r'\(', a.Operator, cls.velocity_down
        yield r'\[', a.Bracket.Loop, cls.loop_begin
        yield r':', a.Bracket.Loop, cls.loop_break
        yield r'\]', a.Bracket.Loop, cls.loop_end
        yield r"'", a.Delimiter.Start, cls.harmony
        yield r'(\$)([^\W\d_])(\{)', bygroup(a.Keyword, a.Name.Macro.Definition, a.Delimiter.Start), \
            cls.rhythm_macro_define
        yield r'\{', a.Delimiter.Start, cls.group_notes
        yield r'\?', a.Keyword, cls.play_from_here
        yield r'&', a.Operator, cls.tie_slur
        yield r'\s+', skip
        yield default_action, a.Invalid

    @classmethod
    def argument(cls):
        """One optional number, then leave the context."""
        yield NUMBER, a.Number, -1
        yield default_target, -1

    @classmethod
    def arguments(cls):
        """Comma separated numbers, then leave the context."""
        yield SLOT_NUMBER, a.Number
        yield r',', a.Separator
        yield default_target, -1

    @classmethod
    def single(cls):
        """Leave the context immediately."""
        yield default_target, -1

    ## notes
    @lexicon(consume=True)
    def abc_note(cls):
        yield from cls.arguments()

    @lexicon(consume=True)
    def midi_note(cls):
        yield from cls.arguments()

    @lexicon(consume=True)
    def rest(cls):
        yield from cls.argument()

    @lexicon(consume=True)
    def harmony(cls):
        yield r'[{}]+'.format(nodes.NOTE_NAMES), a.Name.Note
        yield r"(')(?:(\d+)(?:(,)(\d+))?)?", bygroup(a.Delimiter.End, a.Number, a.Separator, a.Number), -1
        yield r'\s+', skip
        yield default_action, a.Invalid

    @lexicon(consume=True)
    def group_notes(cls):
        yield r'(\})(\d+)?', bygroup(a.Delimiter.End, a.Number), -1
        yield from cls.commands()

    @lexicon(consume=True)
    def tie_slur(cls):
        yield from cls.single()

    ## defaults
    @lexicon(consume=True)
    def length(cls):
        yield from cls.argument()

    @lexicon(consume=True)
    def octave(cls):
        yield from cls.argument()

    @lexicon(consume=True)
    def gate(cls):
        yield from cls.argument()

    @lexicon(consume=True)
    def velocity(cls):
        yield from cls.arguments()

    @lexicon(consume=True)
    def timing(cls):
        yield from cls.arguments()

    @lexicon(consume=True)
    def octave_up(cls):
        yield from cls.single()

    @lexicon(consume=True)
    def octave_down(cls):
        yield from cls.single()

    @lexicon(consume=True)
    def octave_up_once(cls):
        yield from cls.single()

    @lexicon(consume=True)
    def octave_down_once(cls):
        yield from cls.single()

    @lexicon(consume=True)
    def velocity_up(cls):
        yield from cls.argument()

    @lexicon(consume=True)
    def velocity_down(cls):
        yield from cls.argument()

    ## midi
    @lexicon(consume=True)
    def pitch_bend(cls):
        yield from cls.argument()

    @lexicon(consume=True)
    def control_change(cls):
        yield r'\(', a.Delimiter.Start, cls.on_time
        yield from cls.arguments()

    @lexicon(consume=True)
    def on_time(cls):
        """The ``(low,high,length)`` envelope of a control change."""
        yield r'\)', a.Delimiter.End, -1
        yield NUMBER, a.Number
        yield r',', a.Separator
        yield r'\s+', skip
        yield default_action, a.Invalid

    @lexicon(consume=True)
    def voice_select(cls):
        yield from cls.arguments()

    ## structure
    @lexicon(consume=True)
    def macro(cls):
        yield from cls.single()

    @lexicon(consume=True)
    def rhythm_macro_define(cls):
        yield r'\}', a.Delimiter.End, -1
        yield from cls.commands()

    @lexicon(consume=True)
    def loop_begin(cls):
        yield from cls.argument()

    @lexicon(consume=True)
    def loop_break(cls):
        yield from cls.single()

    @lexicon(consume=True)
    def loop_end(cls):
        yield from cls.single()

    @lexicon(consume=True)
    def play_from_here(cls):
        yield from cls.single()

    ## comments
    @lexicon(consume=True)
    def range_comment(cls):
        yield r'\*/', a.Comment.End, -1
        yield default_action, a.Comment

    @lexicon(consume=True)
    def line_comment_debug(cls):
        yield r'[^\r\n]+', a.Comment, -1
        yield default_target, -1

    @lexicon(consume=True)
    def line_comment(cls):
        yield r'[^\r\n]+', a.Comment, -1
        yield default_target, -1


def command(func):
    """Decorator for a transform method that converts one command.

    A :class:`~mmlast.errors.ConversionError` raised by the method is logged
    and None is returned, so the command is left out. If the transform is
    strict, the error is raised again.

    """
    @functools.wraps(func)
    def wrapper(self, items):
        try:
            return func(self, items)
        except ConversionError as e:
            if self.strict:
                raise
            logger.warning("dropped %s: %s", func.__name__, e)
    return wrapper


class MmlTransform(Transform):
    """Transform Mml to a list of :mod:`~mmlast.nodes` nodes."""

    #: If True, a ConversionError is not absorbed but raised.
    strict = False

    ## helper methods
    def arguments(self, items, count, pos=None):
        """Return a list of ``count`` numbers read from Number and Separator
        tokens.

        Every separator advances one position, so values that are not written
        remain None. Other items are ignored.

        """
        args = [None] * count
        index = 0
        for i in items:
            if not i.is_token:
                continue
            elif i.action is a.Separator:
                index += 1
                if index == count:
                    raise ConversionError("too many parameters", i.pos)
            elif i.action is a.Number:
                if args[index] is not None:
                    raise ConversionError("unexpected number {!r}".format(i.text), i.pos)
                args[index] = int(i.text)
        return args

    def required(self, value, what, items):
        """Return value, or raise ConversionError if it is None."""
        if value is None:
            raise ConversionError("expected " + what, items[0].pos)
        return value

    def value(self, items, what="value"):
        """Return the one required number of a command."""
        return self.required(self.arguments(items, 1)[0], what, items)

    def numbers(self, items):
        """Return the list of numbers in the tokens of this context."""
        return [int(i.text) for i in items if i.is_token and i.action is a.Number]

    def text(self, items, action):
        """Return the concatenated text of the tokens with the action."""
        return ''.join(i.text for i in items if i.is_token and i.action is action)

    def untransformed(self, item):
        """Handle a context no transform method exists for.

        Logs a warning, or raises ConversionError if the transform is strict.

        """
        context = item.obj
        token = context.first_token()
        pos = token.pos if token else None
        if self.strict:
            raise ConversionError("unknown command: {}".format(context.lexicon.name), pos)
        logger.warning("dropped unknown command %s at position %s", context.lexicon.name, pos)

    def commands(self, items):
        """Return the list of nodes of the child contexts.

        Commands that failed to convert and unknown commands are left out.

        """
        result = []
        for i in items:
            if i.is_token:
                continue
            elif i.name == "<untransformed>":
                self.untransformed(i)
            elif i.obj is not None:
                result.append(i.obj)
        return result

    ## transforming methods
    @add_untransformed
    def root(self, items):
        """Return the list of nodes, leaving out failed commands."""
        return self.commands(items)

    ## notes
    @command
    def abc_note(self, items):
        """Note, e.g. ``c4,,100``."""
        length, gate, velocity, timing, scale = self.arguments(items, 5)
        return nodes.Note(items[0].text, length, gate, velocity, timing, scale)

    @command
    def midi_note(self, items):
        """NumberedNote, e.g. ``n60,4``."""
        number, length, gate, velocity, timing = self.arguments(items, 5)
        self.required(number, "note number", items)
        return nodes.NumberedNote(number, length, gate, velocity, timing)

    def rest(self, items):
        """Rest."""
        return nodes.Rest(self.arguments(items, 1)[0])

    @command
    def harmony(self, items):
        """Harmony, ``'ceg'4,80``."""
        notes = self.required(self.text(items, a.Name.Note) or None, "notes", items)
        numbers = self.numbers(items)
        length = numbers[0] if numbers else None
        gate = numbers[1] if len(numbers) > 1 else None
        return nodes.Harmony(tuple(notes), length, gate)

    @add_untransformed
    def group_notes(self, items):
        """GroupedNotes, ``{cde}4``.

        Commands that failed to convert are left out.

        """
        notes = tuple(self.commands(items))
        length = self.numbers(items)
        return nodes.GroupedNotes(notes, length[0] if length else None)

    def tie_slur(self, items):
        return nodes.TieSlur()

    ## defaults
    @command
    def length(self, items):
        return nodes.Length(self.value(items, "length"))

    @command
    def octave(self, items):
        return nodes.Octave(self.value(items, "octave"))

    @command
    def gate(self, items):
        return nodes.Gate(self.value(items, "gate"))

    @command
    def velocity(self, items):
        """Velocity with optional random spread, ``v100,10``."""
        value, random = self.arguments(items, 2)
        return nodes.Velocity(self.required(value, "velocity", items), random)

    @command
    def timing(self, items):
        """Timing with optional random spread, ``t-4,2``."""
        value, random = self.arguments(items, 2)
        return nodes.Timing(self.required(value, "timing", items), random)

    def octave_up(self, items):
        return nodes.OctaveUp()

    def octave_down(self, items):
        return nodes.OctaveDown()

    def octave_up_once(self, items):
        return nodes.OctaveUpOnce()

    def octave_down_once(self, items):
        return nodes.OctaveDownOnce()

    def velocity_up(self, items):
        return nodes.VelocityUp(self.arguments(items, 1)[0])

    def velocity_down(self, items):
        return nodes.VelocityDown(self.arguments(items, 1)[0])

    ## midi
    @command
    def pitch_bend(self, items):
        return nodes.PitchBend(self.value(items, "pitch bend"))

    @command
    def control_change(self, items):
        """ControlChange, ``y7,100`` or ``y11,0(0,127,96)``.

        The envelope is optional, but there can only be one, after the value.

        """
        controller, value = self.arguments(items, 2)
        self.required(controller, "controller number", items)
        self.required(value, "controller value", items)
        envelopes = [n for n, i in enumerate(items) if not i.is_token and i.name == "on_time"]
        if not envelopes:
            return nodes.ControlChange(controller, value)
        envelope = items[envelopes[0]].obj
        if len(envelopes) > 1:
            raise ConversionError("more than one envelope", items[envelopes[1]].obj[0].pos)
        elif any(i.is_token for i in items[envelopes[0] + 1:]):
            raise ConversionError("envelope must follow the value", envelope[0].pos)
        args = self.arguments(envelope, 3)
        for arg, what in zip(args, ("low", "high", "length")):
            self.required(arg, what + " value", envelope)
        return nodes.ControlChange(controller, value, nodes.OnTime(*args))

    def on_time(self, items):
        """The items of the envelope, read by :meth:`control_change`."""
        return list(items)

    @command
    def voice_select(self, items):
        """VoiceSelect, ``@1,0,2``."""
        number, bank_lsb, bank_msb = self.arguments(items, 3)
        self.required(number, "voice number", items)
        if bank_lsb is None:
            bank_msb = None
        return nodes.VoiceSelect(number, bank_lsb, bank_msb)

    ## structure
    def macro(self, items):
        """MacroRef, the text as written."""
        return nodes.MacroRef(''.join(i.text for i in items if i.is_token))

    @add_untransformed
    @command
    def rhythm_macro_define(self, items):
        """RhythmMacroDefine, ``$b{n36}``.

        The definition must be exactly one command that converted fine,
        otherwise this command fails as well.

        """
        name = self.required(self.text(items, a.Name.Macro.Definition) or None, "macro name", items)
        bodies = [i for i in items if not i.is_token]
        if not bodies:
            raise ConversionError("expected macro definition", items[0].pos)
        elif len(bodies) > 1:
            raise ConversionError("macro definition must be a single command", items[0].pos)
        elif bodies[0].name == "<untransformed>" or bodies[0].obj is None:
            raise ConversionError("failed to convert macro definition", items[0].pos)
        return nodes.RhythmMacroDefine(name, bodies[0].obj)

    def loop_begin(self, items):
        return nodes.LoopBegin(self.arguments(items, 1)[0])

    def loop_break(self, items):
        return nodes.LoopBreak()

    def loop_end(self, items):
        return nodes.LoopEnd()

    def play_from_here(self, items):
        return nodes.PlayFromHere()

    ## comments
    def range_comment(self, items):
        return nodes.Comment(nodes.CommentKind.RANGE, self.text(items, a.Comment))

    def line_comment_debug(self, items):
        return nodes.Comment(nodes.CommentKind.LINE_DEBUG, self.text(items, a.Comment))

    def line_comment(self, items):
        return nodes.Comment(nodes.CommentKind.LINE, self.text(items, a.Comment))


class MmlStrictTransform(MmlTransform):
    """MmlTransform that raises ConversionError instead of leaving the
    command out.

    """
    strict = True

