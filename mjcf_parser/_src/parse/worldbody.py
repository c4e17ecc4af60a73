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

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from .. import diagnostics
from ..config import OrientationConvention, ParserConfig
from ..diagnostics import DiagnosticSink
from ..errors import DuplicateGeomNameError, WorldBodyHasAttributesError, WorldBodyInvalidChildrenError
from ..geometry.types import GeomDescriptor
from .geom import parse_geom

__all__ = [
    "GeomNamer",
    "WorldbodyChild",
    "explicit_geom_names",
    "parse_worldbody",
]


class WorldbodyChild(enum.Enum):
    """Tags with a defined meaning directly under ``<worldbody>``."""

    GEOM = "geom"
    BODY = "body"
    SITE = "site"
    CAMERA = "camera"
    LIGHT = "light"
    INERTIAL = "inertial"
    JOINT = "joint"
    FREEJOINT = "freejoint"

    @classmethod
    def from_tag(cls, tag: str) -> WorldbodyChild | None:
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def is_valid(self) -> bool:
        """Physical-property tags are only legal inside a ``<body>``."""
        return self not in (WorldbodyChild.INERTIAL, WorldbodyChild.JOINT, WorldbodyChild.FREEJOINT)


class GeomNamer:
    """
    Hands out geom names that are unique within a scene.

    Explicit names are kept as written and must not repeat. A geom without a name gets
    the decimal string of its index, or of the next larger integer if that string is
    already taken by an explicit name.
    """

    def __init__(self, reserved: Iterable[str] = ()):
        self._reserved = set(reserved)
        self._used: set[str] = set()

    def name(self, explicit: str | None, index: int) -> str:
        """
        Name the geom at ``index``.

        Raises:
            DuplicateGeomNameError: If ``explicit`` was already given to another geom.
        """
        if explicit is not None:
            if explicit in self._used:
                raise DuplicateGeomNameError(explicit).attach_geom(explicit, index)
            self._used.add(explicit)
            return explicit
        candidate = index
        while str(candidate) in self._reserved or str(candidate) in self._used:
            candidate += 1
        self._used.add(str(candidate))
        return str(candidate)


def explicit_geom_names(worldbodies: Iterable[ET.Element]) -> list[str]:
    """The ``name`` attributes of the ``<geom>`` children of the given ``<worldbody>`` elements."""
    return [
        child.attrib["name"] for wb in worldbodies for child in wb if child.tag == "geom" and "name" in child.attrib
    ]


def parse_worldbody(
    worldbody: ET.Element,
    *,
    sink: DiagnosticSink | None = None,
    config: ParserConfig | None = None,
    convention: OrientationConvention | None = None,
    first_index: int = 0,
    namer: GeomNamer | None = None,
) -> list[GeomDescriptor]:
    """
    Validate a ``<worldbody>`` element and resolve its ``<geom>`` children.

    Args:
        worldbody: The ``<worldbody>`` element.
        sink: Receiver of diagnostic records. Defaults to the package logger.
        config: Parser configuration.
        convention: Angle conventions of the enclosing document.
        first_index: Index given to the first geom, so that synthesized names stay
            unique across several ``<worldbody>`` elements.
        namer: Name allocator shared by every ``<worldbody>`` of the scene. A new one is made
            from this element alone if not given.

    Returns:
        The geometry descriptors, in document order.

    Raises:
        WorldBodyHasAttributesError: If the element carries any attribute.
        WorldBodyInvalidChildrenError: If ``inertial``, ``joint`` or ``freejoint`` is a direct child.
        DuplicateGeomNameError: If two geoms share a ``name``.
    """
    if sink is None:
        sink = diagnostics.default_sink()

    diagnostics.debug(sink, "Parsing worldbody tag")
    if worldbody.attrib:
        raise WorldBodyHasAttributesError(list(worldbody.attrib))
    if namer is None:
        namer = GeomNamer(explicit_geom_names([worldbody]))

    geoms: list[GeomDescriptor] = []
    for child in worldbody:
        if not isinstance(child.tag, str):
            # comments and processing instructions
            continue
        kind = WorldbodyChild.from_tag(child.tag)
        if kind is None:
            diagnostics.warning(sink, "Ignoring unsupported tag", tag=child.tag)
            continue
        if not kind.is_valid:
            raise WorldBodyInvalidChildrenError(child.tag)
        if kind == WorldbodyChild.GEOM:
            index = first_index + len(geoms)
            name = namer.name(child.attrib.get("name"), index)
            geoms.append(parse_geom(child, index, name=name, sink=sink, config=config, convention=convention))
        else:
            diagnostics.debug(sink, "Skipping unimplemented tag", tag=child.tag)

    return geoms
