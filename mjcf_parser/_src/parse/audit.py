# SPDX-FileCopyrightText: Copyright (c) 2025 The mjcf-parser Developers
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Reporting of ``<geom>`` attributes that have no effect on the resolved descriptor."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from .. import diagnostics
from ..diagnostics import DiagnosticSink
from ..geometry.types import ShapeType
from .orientation import ORIENTATION_ATTRIBUTES

__all__ = [
    "GEOM_ATTRIBUTE_SUPPORT",
    "UNSUPPORTED_GEOM_ATTRIBUTES",
    "audit_attributes",
]


def _never(shape_type: ShapeType) -> bool:
    return False


def _unless_plane(shape_type: ShapeType) -> bool:
    return shape_type != ShapeType.PLANE


def _segment_like(shape_type: ShapeType) -> bool:
    return shape_type.segment_like


UNSUPPORTED_GEOM_ATTRIBUTES: tuple[str, ...] = (
    "class",
    "contype",
    "conaffinity",
    "condim",
    "group",
    "priority",
    "material",
    "rgba",
    "friction",
    "mass",
    "density",
    "solmix",
    "solref",
    "solimpl",
    "solimp",
    "margin",
    "gap",
    "hfield",
    "mesh",
    "fitscale",
    "user",
    "fluidshape",
    "fluidcoef",
    "shellinertia",
)
"""Geom attributes defined by MJCF that are never mapped into a descriptor."""


GEOM_ATTRIBUTE_SUPPORT: dict[str, Callable[[ShapeType], bool]] = {
    **dict.fromkeys(UNSUPPORTED_GEOM_ATTRIBUTES, _never),
    "size": _unless_plane,
    "fromto": _segment_like,
    **dict.fromkeys(ORIENTATION_ATTRIBUTES, _unless_plane),
}
"""Maps each audited attribute to whether it is applied for a given shape type."""


def audit_attributes(
    attrib: Mapping[str, str],
    shape_type: ShapeType,
    *,
    sink: DiagnosticSink,
    geom_name: str | None = None,
) -> list[str]:
    """
    Report every attribute present on a geom that does not affect its descriptor.

    One warning record is emitted per attribute, in the order of
    :data:`GEOM_ATTRIBUTE_SUPPORT`. Parsing is never aborted.

    Returns:
        The names of the reported attributes.
    """
    reported = []
    for name, is_supported in GEOM_ATTRIBUTE_SUPPORT.items():
        if name not in attrib or is_supported(shape_type):
            continue
        reported.append(name)
        diagnostics.warning(
            sink,
            f"{name} attribute is currently unsupported",
            attribute=name,
            value=attrib[name],
            geom=geom_name,
            type=shape_type.name.lower(),
        )
    return reported
