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

import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Protocol

import warp as wp

from . import diagnostics
from .config import DEFAULT_MODEL_NAME, OrientationConvention, ParserConfig
from .diagnostics import DiagnosticSink
from .errors import MalformedDocumentError, MissingRequiredTagError, MjcfParseError
from .geometry.types import BoxShape, CapsuleShape, GeomDescriptor, PlaneShape, SphereShape, Vec3
from .parse.worldbody import GeomNamer, explicit_geom_names, parse_worldbody

__all__ = [
    "MjcfModel",
    "ShapeBuilder",
    "parse_mjcf_file",
    "parse_mjcf_string",
]


class ShapeBuilder(Protocol):
    """The subset of a Newton-style ``ModelBuilder`` that receives parsed geometry."""

    def add_shape_plane(self, xform: wp.transform | None = None, key: str | None = None, **kwargs: Any) -> int: ...

    def add_shape_sphere(
        self, body: int, xform: wp.transform | None = None, radius: float = 1.0, key: str | None = None, **kwargs: Any
    ) -> int: ...

    def add_shape_capsule(
        self,
        body: int,
        xform: wp.transform | None = None,
        radius: float = 1.0,
        half_height: float = 0.5,
        key: str | None = None,
        **kwargs: Any,
    ) -> int: ...

    def add_shape_box(
        self,
        body: int,
        xform: wp.transform | None = None,
        hx: float = 0.5,
        hy: float = 0.5,
        hz: float = 0.5,
        key: str | None = None,
        **kwargs: Any,
    ) -> int: ...


@dataclass
class MjcfModel:
    """
    The static scene described by an MJCF document.
    """

    name: str = DEFAULT_MODEL_NAME
    """Value of the root ``model`` attribute, or the configured placeholder."""

    geoms: list[GeomDescriptor] = field(default_factory=list)
    """Resolved ``<worldbody>`` geometries, in document order."""

    camera_eye: Vec3 = (0.0, 0.0, 2.0)
    """Default viewer eye position."""

    camera_target: Vec3 = (0.0, 0.0, 1.0)
    """Default viewer look-at point."""

    def geom(self, name: str) -> GeomDescriptor:
        """Look up a geometry by name.

        Raises:
            KeyError: If no geometry has that name.
        """
        for geom in self.geoms:
            if geom.name == name:
                return geom
        raise KeyError(name)

    def build(self, builder: ShapeBuilder, body: int = -1) -> list[int]:
        """
        Hand every geometry to a physics model builder.

        Args:
            builder: A Newton-style ``ModelBuilder``.
            body: Index of the body the shapes are attached to, -1 for the static world.

        Returns:
            The shape indices returned by the builder, one per geometry.
        """
        shapes = []
        for geom in self.geoms:
            xform = geom.pose.transform
            shape = geom.shape
            if isinstance(shape, PlaneShape):
                s = builder.add_shape_plane(xform=xform, key=geom.name)
            elif isinstance(shape, SphereShape):
                s = builder.add_shape_sphere(body, xform=xform, radius=shape.radius, key=geom.name)
            elif isinstance(shape, CapsuleShape):
                s = builder.add_shape_capsule(
                    body, xform=xform, radius=shape.radius, half_height=shape.half_length, key=geom.name
                )
            elif isinstance(shape, BoxShape):
                hx, hy, hz = shape.half_extents
                s = builder.add_shape_box(body, xform=xform, hx=hx, hy=hy, hz=hz, key=geom.name)
            else:
                raise TypeError(f"Unsupported shape descriptor {type(shape).__name__}")
            shapes.append(s)
        return shapes


def _parse_document(root: ET.Element, sink: DiagnosticSink, config: ParserConfig) -> MjcfModel:
    if root.tag != "mujoco":
        raise MissingRequiredTagError("mujoco")

    model = MjcfModel(name=config.model_name)
    if "model" in root.attrib:
        model.name = root.attrib["model"]
        diagnostics.debug(sink, "Changed model name", model_name=model.name)

    convention = OrientationConvention.from_document(root, config)
    namer = GeomNamer(explicit_geom_names(child for child in root if child.tag == "worldbody"))

    for child in root:
        if child.tag == "worldbody":
            model.geoms.extend(
                parse_worldbody(
                    child,
                    sink=sink,
                    config=config,
                    convention=convention,
                    first_index=len(model.geoms),
                    namer=namer,
                )
            )
        elif child.tag == "default":
            diagnostics.warning(sink, "default classes are currently unsupported and are not applied", tag=child.tag)
        else:
            diagnostics.debug(sink, "Ignoring tag", tag=child.tag)

    return model


def parse_mjcf_string(
    text: str | bytes,
    *,
    sink: DiagnosticSink | None = None,
    config: ParserConfig | None = None,
) -> MjcfModel:
    """
    Parse an MJCF document held in memory.

    Args:
        text: The XML document. Bytes are decoded according to the XML declaration, UTF-8 if it has none.
        sink: Receiver of diagnostic records. Defaults to the package logger.
        config: Parser configuration. Defaults to :class:`ParserConfig`.

    Returns:
        The parsed model. No partial model is ever returned.

    Raises:
        MalformedDocumentError: If the text is not well-formed XML.
        MissingRequiredTagError: If the root element is not ``mujoco``.
        MjcfParseError: For any structural or geometry error, see :mod:`mjcf_parser.errors`.
    """
    if sink is None:
        sink = diagnostics.default_sink()
    if config is None:
        config = ParserConfig()

    diagnostics.debug(sink, "Parsing XML string")
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        diagnostics.error(sink, "Failed to parse XML", reason=str(e))
        raise MalformedDocumentError(str(e)) from e

    try:
        return _parse_document(root, sink, config)
    except MjcfParseError as e:
        context = {} if e.geom is None else {"geom": e.geom, "geom_index": e.geom_index}
        diagnostics.error(sink, "Failed to parse MJCF model", error=type(e).__name__, reason=str(e), **context)
        raise


def parse_mjcf_file(
    path: str | os.PathLike[str],
    *,
    sink: DiagnosticSink | None = None,
    config: ParserConfig | None = None,
) -> MjcfModel:
    """
    Read an MJCF file and parse it with :func:`parse_mjcf_string`.

    The file is read as bytes, so the encoding named in its XML declaration is honoured.
    """
    with open(path, "rb") as f:
        data = f.read()
    return parse_mjcf_string(data, sink=sink, config=config)
