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
Exceptions raised while reading MML text.

A :class:`ParseError` is fatal: the text does not conform to the grammar and
no nodes are returned at all. A :class:`ConversionError` concerns one single
command; it is normally logged and the command is left out of the result,
see :func:`mmlast.read.parse`.

"""


class MmlError(Exception):
    """Base class for mmlast exceptions."""


class ParseError(MmlError):
    """Raised when the text can't be tokenized according to the grammar.

    The ``pos`` attribute is the position in the text, ``line`` and ``column``
    are 1-based.

    """
    def __init__(self, message, pos=None, line=None, column=None):
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.line = line
        self.column = column

    @classmethod
    def at(cls, text, pos, message):
        """Create a ParseError for the position ``pos`` in ``text``."""
        line = text.count('\n', 0, pos) + 1
        column = pos - text.rfind('\n', 0, pos)
        return cls(message, pos, line, column)

    def __str__(self):
        if self.line is None:
            return self.message
        return "line {}, column {}: {}".format(self.line, self.column, self.message)


class ConversionError(MmlError):
    """Raised when a command lacks a required part and can't become a node."""
    def __init__(self, message, pos=None):
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self):
        if self.pos is None:
            return self.message
        return "{} (at position {})".format(self.message, self.pos)

