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
Simple functions to read MML text into :mod:`~mmlast.nodes` nodes.

Example::

    >>> from mmlast import read
    >>> read.parse("l8 [2 r : >]")
    [Length(value=8), LoopBegin(count=2), Rest(length=None), LoopBreak(), OctaveUp(), LoopEnd()]

Text that does not match the grammar raises a
:class:`~mmlast.errors.ParseError`. Commands that match the grammar but lack
a required value (like ``l`` without a number) are logged and left out,
unless ``strict`` is set to True, in which case a
:class:`~mmlast.errors.ConversionError` is raised.

"""

import parce
import parce.action as a

from .errors import ParseError
from .lang.mml import Mml
from .transform import Transformer


_start_actions = (a.Delimiter.Start, a.Comment.Start)
_end_actions = (a.Delimiter.End, a.Comment.End)


def check_syntax(text, context):
    """Raise a ParseError if the context contains invalid tokens or
    unterminated contexts.

    A context that opens with a ``{``, ``'``, ``(`` or ``/*`` must also have
    been closed. Child contexts are checked as well.

    """
    start = None
    ended = False
    for node in context:
        if not node.is_token:
            check_syntax(text, node)
        elif node.action is a.Invalid:
            raise ParseError.at(text, node.pos, "unexpected {!r}".format(node.text))
        elif node.action in _start_actions:
            if start is None:
                start = node
        elif node.action in _end_actions:
            ended = True
    if start is not None and not ended:
        raise ParseError.at(text, start.pos, "unterminated {!r}".format(start.text))


def parse(text, strict=False):
    """Return a list of nodes read from the text.

    Raises ParseError if the text is not valid MML. If ``strict`` is True,
    a ConversionError is raised for the first command that can't be
    converted, instead of leaving the command out.

    """
    tree = parce.root(Mml.root, text)
    check_syntax(text, tree)
    return Transformer(strict).transform_tree(tree) or []


def command(text, strict=False):
    """Return one node from the text, or None.

    Examples::

        >>> from mmlast import read
        >>> read.command("y7,100")
        ControlChange(controller=7, value=100, on_time=None)
        >>> read.command("@1,2,3")
        VoiceSelect(number=1, bank_lsb=2, bank_msb=3)

    """
    for node in parse(text, strict):
        return node

