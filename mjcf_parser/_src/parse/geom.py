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

"""Resolution of a ``<geom>`` element into a :class:`GeomDescriptor`."""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from collections.abc import Mapping

import numpy as np

from .. import diagnostics
from ..config import OrientationConvention, ParserConfig
from ..diagnostics import DiagnosticSink
from ..errors import (
    InvalidGeometryTypeError,
    MjcfParseError,
    RequiredAttributeMissingError,
    UnsupportedGeometryTypeError,
)
from ..geometry.types import (
    BoxShape,
    CapsuleShape,
    GeomDescriptor,
    PlaneShape,
    Pose,
    ShapeDescriptor,
    ShapeType,
    SphereShape,
)
from ..math import quat_identity
from .attributes import count_values, parse_vector
from .audit import audit_attributes
from .orientation import resolve_orientation
from .position import PositionResult, resolve_position

__all__ = [
    "GeomKind",
    "parse_geom",
]


class GeomKind(enum.Enum):
    """Every value of the MJCF geom ``type`` attribute."""

    PLANE = "plane"
    HFIELD = "hfield"
    SPHERE = "sphere"
    CAPSULE = "capsule"
    ELLIPSOID = "ellipsoid"
    CYLINDER = "cylinder"
    BOX = "box"
    MESH = "mesh"

    @classmethod
    def from_attribute(cls, geom_type: str | None) -> GeomKind:
        """Resolve a ``type`` attribute value. An absent type is a sphere.

        Raises:
            InvalidGeometryTypeError: If the value is not an MJCF geom type.
        """
        if geom_type is None:
            return cls.SPHERE
        try:
            return cls(geom_type)
        except ValueError:
            raise InvalidGeometryTypeError(geom_type) from None

    @property
    def shape_type(self) -> ShapeType:
        """The implemented shape type of this kind.

        Raises:
            UnsupportedGeometryTypeError: If the kind is recognized but not implemented.
        """
        shape_type = _SHAPE_TYPES.get(self)
        if shape_type is None:
            raise UnsupportedGeometryTypeError(self.value)
        return shape_type


_SHAPE_TYPES = {
    GeomKind.PLANE: ShapeType.PLANE,
    GeomKind.SPHERE: ShapeType.SPHERE,
    GeomKind.CAPSULE: ShapeType.CAPSULE,
    GeomKind.BOX: ShapeType.BOX,
}


def _required_size(attrib: Mapping[str, str]) -> str:
    size_text = attrib.get("size")
    if size_text is None:
        raise RequiredAttributeMissingError("size")
    return size_text


def _build_shape(
    attrib: Mapping[str, str],
    shape_type: ShapeType,
    position: PositionResult,
    sink: DiagnosticSink,
) -> ShapeDescriptor:
    if shape_type == ShapeType.PLANE:
        return PlaneShape()

    size_text = _required_size(attrib)

    if shape_type == ShapeType.SPHERE:
        (radius,) = parse_vector(size_text, 1, attribute="size")
        return SphereShape(radius=float(radius))

    if shape_type == ShapeType.CAPSULE:
        if position.segment_half_length is None:
            radius, half_length = parse_vector(size_text, 2, attribute="size")
            return CapsuleShape(radius=float(radius), half_length=float(half_length))

        # With fromto the size only supplies the radius; a half-length token is overridden.
        if count_values(attrib, "size") == 2:
            radius, _ = parse_vector(size_text, 2, attribute="size")
            diagnostics.debug(
                sink,
                "Capsule half-length from size is overridden by fromto",
                size=size_text,
                fromto=attrib["fromto"],
            )
        else:
            (radius,) = parse_vector(size_text, 1, attribute="size")
        return CapsuleShape(radius=float(radius), half_length=position.segment_half_length)

    if shape_type == ShapeType.BOX:
        half_extents = parse_vector(size_text, 3, attribute="size")
        return BoxShape(half_extents=tuple(float(v) for v in half_extents))

    raise ValueError(f"Unknown shape type value: {shape_type}")


def _resolve_geom(
    attrib: Mapping[str, str],
    name: str,
    sink: DiagnosticSink,
    convention: OrientationConvention,
) -> GeomDescriptor:
    shape_type = GeomKind.from_attribute(attrib.get("type")).shape_type

    position = resolve_position(attrib, shape_type)
    shape = _build_shape(attrib, shape_type, position, sink)
    shape.validate()

    # The plane normal is fixed to +Z; its orientation attributes are only reported.
    if shape_type == ShapeType.PLANE:
        orientation = quat_identity()
    else:
        orientation = resolve_orientation(
            attrib,
            segment_like=shape_type.segment_like,
            convention=convention,
            sink=sink,
        )

    descriptor = GeomDescriptor(
        name=name,
        shape=shape,
        pose=Pose.from_arrays(np.asarray(position.translation), orientation),
    )

    audit_attributes(attrib, shape_type, sink=sink, geom_name=name)
    return descriptor


def parse_geom(
    geom: ET.Element | Mapping[str, str],
    index: int = 0,
    *,
    name: str | None = None,
    sink: DiagnosticSink | None = None,
    config: ParserConfig | None = None,
    convention: OrientationConvention | None = None,
) -> GeomDescriptor:
    """
    Resolve a ``<geom>`` element into a shape and a pose.

    Args:
        geom: The ``<geom>`` element, or its attribute mapping.
        index: Zero-based index of this geom among the geoms of the scene parsed so far.
            Used as the name if the element has no ``name`` attribute.
        name: Name given to the descriptor. Overrides both the ``name`` attribute and the index.
        sink: Receiver of diagnostic records. Defaults to the package logger.
        config: Parser configuration. Defaults to :class:`ParserConfig`.
        convention: Angle conventions of the enclosing document. Derived from ``config`` if not given.

    Returns:
        The resolved geometry descriptor.

    Raises:
        InvalidGeometryTypeError: If ``type`` is not an MJCF geom type.
        UnsupportedGeometryTypeError: If ``type`` is ``hfield``, ``ellipsoid``, ``cylinder`` or ``mesh``.
        RequiredAttributeMissingError: If ``size`` is missing on a sphere, capsule or box.
        MultiplePositionsError: If ``pos`` and ``fromto`` are both given to a capsule or box.
        MultipleOrientationsError: If more than one orientation attribute is given.
        InvalidOrientationError: If the orientation does not describe a rotation.
        InvalidGeometrySizeError: If a dimension is not finite and positive.
        AttributeVectorError: If a numeric attribute is malformed.

    Every error raised carries the geom name and index (:meth:`MjcfParseError.attach_geom`).
    """
    attrib = geom.attrib if isinstance(geom, ET.Element) else geom
    if sink is None:
        sink = diagnostics.default_sink()
    if config is None:
        config = ParserConfig()
    if convention is None:
        convention = OrientationConvention.from_config(config)
    if name is None:
        name = attrib.get("name", str(index))

    diagnostics.debug(sink, "Parsing geom tag", index=index, name=name)

    try:
        return _resolve_geom(attrib, name, sink, convention)
    except MjcfParseError as e:
        if e.geom is None:
            e.attach_geom(name, index)
        raise
