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
Registry of the language definitions bundled with :mod:`mmlast`.

When adding languages to :mod:`mmlast.lang` please also add a registration
here.

"""

__all__ = ['find', 'register']


import parce.registry


registry = parce.registry.Registry()


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Get the root lexicon for a language with name.

    If no name is given, the language is guessed from the ``filename``,
    ``mimetype`` and/or ``contents``. Returns None if no root lexicon can be
    found in mmlast's bundled languages.

    """
    return registry.find(name, filename=filename, mimetype=mimetype, contents=contents)


def register(lexicon_name, *,
    name = None,
    desc = None,
    aliases = (),
    filenames = (),
    mimetypes = (),
    guesses = (),
):
    """Register a root lexicon name with specified properties.

    See for an explanation of all the arguments
    :meth:`parce.registry.Registry.add`.

    """
    registry.add(
        lexicon_name, name = name, desc = desc, section = "Music",
        aliases = list(aliases), filenames = list(filenames),
        mimetypes = list(mimetypes), guesses = list(guesses))



## register bundled languages here
register("mmlast.lang.mml.Mml.root",
    name = "MML",
    desc = "Music Macro Language",
    aliases = ["mml"],
    filenames = [("*.mml", 1)],
    mimetypes = [("text/x-mml", 1)],
)
