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
The nodes of the MML abstract syntax tree.

Every MML command is represented by one immutable node. Nodes compare equal
when they have the same type and equal fields::

    >>> from mmlast import parse
    >>> parse("c8,,100 r")
    [Note(note='c', length=8, gate=None, velocity=100, timing=None, scale=None), Rest(length=None)]

Fields that are not written in the source are None, they are not resolved
against any current state; that is left to the player or compiler that
interprets the nodes.

Only :class:`GroupedNotes` and :class:`RhythmMacroDefine` have child nodes.
Use :meth:`Node.dump` to display a tree::

    >>> parse("{c d e}8")[0].dump()
    GroupedNotes(length=8)
     ├╴Note(note='c')
     ├╴Note(note='d')
     ╰╴Note(note='e')

"""

import collections
import enum
from dataclasses import dataclass, fields
from typing import Optional, Tuple


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "double":  (" ║ ", "   ", " ╠═", " ╚═"),
    "thick":   (" ┃ ", "   ", " ┣╸", " ┗╸"),
    "flat":    ("│", " ", "├", "╰"),
}

DUMP_STYLE_DEFAULT = "round"

#: The letters a Note or Harmony can use.
NOTE_NAMES = "cdefgab"


#: The envelope of a ControlChange: start value, end value and length.
OnTime = collections.namedtuple("OnTime", "low high length")
OnTime.low.__doc__ = "The value at the start of the envelope."
OnTime.high.__doc__ = "The value at the end of the envelope."
OnTime.length.__doc__ = "The length of the envelope."


class CommentKind(enum.Enum):
    """The three kinds of comment."""
    RANGE = "range"             #: ``/* ... */``
    LINE_DEBUG = "line_debug"   #: ``## ...``, shown by debug tooling
    LINE = "line"               #: ``// ...``


@dataclass(frozen=True)
class Node:
    """Base class for all node types."""

    def children(self):
        """Return a tuple of the child nodes; by default empty."""
        return ()

    def descendants(self):
        """Iterate over all the descendants of this node, in document order."""
        stack = []
        gen = iter(self.children())
        while True:
            for n in gen:
                yield n
                if n.children():
                    stack.append(gen)
                    gen = iter(n.children())
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def repr_fields(self):
        """Return a repr without the unset fields and without child nodes."""
        def result():
            for f in fields(self):
                value = getattr(self, f.name)
                if value is None or isinstance(value, Node):
                    continue
                if isinstance(value, tuple) and value and isinstance(value[0], Node):
                    continue
                yield "{}={!r}".format(f.name, value)
        return "{}({})".format(type(self).__name__, ", ".join(result()))

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its children.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        def lines(node, prefix):
            children = node.children()
            for i, n in enumerate(children):
                last = i == len(children) - 1
                yield prefix + d[2 + last] + n.repr_fields()
                yield from lines(n, prefix + d[last])
        print(self.repr_fields(), file=file)
        for line in lines(self, ''):
            print(line, file=file)


## notes

@dataclass(frozen=True)
class Note(Node):
    """A note named by its letter, e.g. ``c8,80``."""
    note: str
    length: Optional[int] = None
    gate: Optional[int] = None
    velocity: Optional[int] = None
    timing: Optional[int] = None
    scale: Optional[int] = None


@dataclass(frozen=True)
class NumberedNote(Node):
    """A note named by its MIDI note number, e.g. ``n60``."""
    number: int
    length: Optional[int] = None
    gate: Optional[int] = None
    velocity: Optional[int] = None
    timing: Optional[int] = None


@dataclass(frozen=True)
class Rest(Node):
    """A rest, ``r``."""
    length: Optional[int] = None


@dataclass(frozen=True)
class Harmony(Node):
    """Notes sounding together, e.g. ``'ceg'4``."""
    notes: Tuple[str, ...]
    length: Optional[int] = None
    gate: Optional[int] = None


@dataclass(frozen=True)
class GroupedNotes(Node):
    """Commands sharing one total length, e.g. ``{cde}4``."""
    notes: Tuple[Node, ...]
    length: Optional[int] = None

    def children(self):
        return self.notes


@dataclass(frozen=True)
class TieSlur(Node):
    """Ties or slurs the current note into the next, ``&``."""


## defaults

@dataclass(frozen=True)
class Length(Node):
    """Sets the default length, ``l``."""
    value: int


@dataclass(frozen=True)
class Octave(Node):
    """Sets the octave, ``o``."""
    value: int


@dataclass(frozen=True)
class Gate(Node):
    """Sets the default gate, ``q``."""
    value: int


@dataclass(frozen=True)
class Velocity(Node):
    """Sets the default velocity, ``v``, with an optional random spread."""
    value: int
    random: Optional[int] = None


@dataclass(frozen=True)
class Timing(Node):
    """Sets the default timing offset, ``t``, with an optional random spread."""
    value: int
    random: Optional[int] = None


@dataclass(frozen=True)
class OctaveUp(Node):
    """``>``"""


@dataclass(frozen=True)
class OctaveDown(Node):
    """``<``"""


@dataclass(frozen=True)
class OctaveUpOnce(Node):
    """A backtick, raises only the next note an octave."""


@dataclass(frozen=True)
class OctaveDownOnce(Node):
    """``"``, lowers only the next note an octave."""


@dataclass(frozen=True)
class VelocityUp(Node):
    """``)``"""
    delta: Optional[int] = None


@dataclass(frozen=True)
class VelocityDown(Node):
    """``(``"""
    delta: Optional[int] = None


## midi

@dataclass(frozen=True)
class PitchBend(Node):
    """``p``"""
    value: int


@dataclass(frozen=True)
class ControlChange(Node):
    """A control change, ``y``, optionally with an :class:`OnTime` envelope."""
    controller: int
    value: int
    on_time: Optional[OnTime] = None


@dataclass(frozen=True)
class VoiceSelect(Node):
    """Program change, ``@``, optionally with bank select.

    ``bank_msb`` is never set without ``bank_lsb``.

    """
    number: int
    bank_lsb: Optional[int] = None
    bank_msb: Optional[int] = None


## structure

@dataclass(frozen=True)
class MacroRef(Node):
    """A macro invocation, the text is kept unexpanded."""
    text: str


@dataclass(frozen=True)
class RhythmMacroDefine(Node):
    """Binds a one-character name to a command, ``$b{n36}``."""
    name: str
    definition: Node

    def children(self):
        return (self.definition,)


@dataclass(frozen=True)
class LoopBegin(Node):
    """``[``, without count the loop repeats forever."""
    count: Optional[int] = None


@dataclass(frozen=True)
class LoopBreak(Node):
    """``:``, the last repetition of a loop ends here."""


@dataclass(frozen=True)
class LoopEnd(Node):
    """``]``"""


@dataclass(frozen=True)
class PlayFromHere(Node):
    """``?``, playback starts here."""


@dataclass(frozen=True)
class Comment(Node):
    """A comment, the content is the text between the delimiters."""
    kind: CommentKind
    content: str

    @property
    def is_debug(self):
        """True for a ``##`` comment."""
        return self.kind is CommentKind.LINE_DEBUG


def dump(nodes, file=None, style=None):
    """Dump all the nodes, e.g. the result of :func:`~mmlast.read.parse`."""
    for node in nodes:
        node.dump(file, style)

