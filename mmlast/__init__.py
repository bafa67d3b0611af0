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
The mmlast module.

Reads Music Macro Language text into a list of immutable nodes::

    >>> import mmlast
    >>> mmlast.parse("@1 v100 c4 'ceg'2")
    [VoiceSelect(number=1, bank_lsb=None, bank_msb=None), Velocity(value=100, random=None),
    Note(note='c', length=4, gate=None, velocity=None, timing=None, scale=None),
    Harmony(notes=('c', 'e', 'g'), length=2, gate=None)]

"""

from .errors import ConversionError, MmlError, ParseError
from .pkginfo import version, version_string
from .read import parse
from .registry import find


__all__ = (
    'find', 'load', 'parse', 'version', 'version_string',
    'ConversionError', 'MmlError', 'ParseError',
)


def load(filename, strict=False, encoding="utf-8"):
    """Convenience function to read MML from ``filename`` and return the
    list of nodes.

    The ``encoding`` is used to read the file. Raises :class:`OSError` if the
    file can't be read, and :class:`ParseError` if it is not valid MML.

    """
    with open(filename, encoding=encoding) as f:
        text = f.read()
    return parse(text, strict)

