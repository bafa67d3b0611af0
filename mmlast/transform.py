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
A Transformer that inherits :class:`parce.transform.Transformer`.

Our transformer can be made strict, in which case it uses the
``StrictTransform`` variants of the transforms, which raise a
:class:`~mmlast.errors.ConversionError` instead of leaving a command out.

"""

import parce.transform


class Transformer(parce.transform.Transformer):
    """A Transformer that finds the strict or lenient transform.

    If ``strict`` is True, the transform classes are looked up using the name
    template ``"{}StrictTransform"``.

    """
    def __init__(self, strict=False):
        super().__init__()
        if strict:
            self.transform_name_template = "{}StrictTransform"
