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

"""Resolution of the alternative MJCF orientation encodings into one unit quaternion."""

from __future__ import annotations

import enum
from collections.abc import Mapping

import numpy as np

from .. import diagnostics
from ..config import OrientationConvention
from ..diagnostics import DiagnosticSink
from ..errors import InvalidOrientationError, MultipleOrientationsError
from ..math import (
    normalize_with_norm,
    quat_between_vectors,
    quat_from_axis_angle,
    quat_from_euler,
    quat_from_matrix,
    quat_from_wxyz,
    quat_identity,
)
from .attributes import parse_vector

__all__ = [
    "ORIENTATION_ATTRIBUTES",
    "OrientationAttribute",
    "present_orientation_attributes",
    "resolve_orientation",
]


class OrientationAttribute(enum.Enum):
    """The mutually exclusive orientation attributes of a frame-carrying element."""

    QUAT = "quat"
    AXISANGLE = "axisangle"
    EULER = "euler"
    XYAXES = "xyaxes"
    ZAXIS = "zaxis"

    @property
    def arity(self) -> int:
        return _ARITY[self]


_ARITY = {
    OrientationAttribute.QUAT: 4,
    OrientationAttribute.AXISANGLE: 4,
    OrientationAttribute.EULER: 3,
    OrientationAttribute.XYAXES: 6,
    OrientationAttribute.ZAXIS: 3,
}

ORIENTATION_ATTRIBUTES: tuple[str, ...] = tuple(a.value for a in OrientationAttribute)
"""Names of all orientation attributes, in resolution order."""

_Z_AXIS = np.array([0.0, 0.0, 1.0], dtype=np.float64)


def _to_radians(angles: np.ndarray, convention: OrientationConvention) -> np.ndarray:
    if convention.use_degrees:
        return np.deg2rad(angles)
    return angles


def _from_quat(values: np.ndarray, convention: OrientationConvention) -> np.ndarray:
    q, norm = normalize_with_norm(quat_from_wxyz(values))
    if norm == 0.0 or not np.isfinite(norm):
        raise InvalidOrientationError("quat", "quaternion cannot be normalized")
    return q


def _from_axisangle(values: np.ndarray, convention: OrientationConvention) -> np.ndarray:
    axis, norm = normalize_with_norm(values[:3])
    if norm == 0.0 or not np.isfinite(norm):
        raise InvalidOrientationError("axisangle", "rotation axis is zero")
    angle = float(_to_radians(values[3], convention))
    if not np.isfinite(angle):
        raise InvalidOrientationError("axisangle", "angle is not finite")
    return quat_from_axis_angle(axis, angle)


def _from_euler(values: np.ndarray, convention: OrientationConvention) -> np.ndarray:
    angles = _to_radians(values, convention)
    if not np.all(np.isfinite(angles)):
        raise InvalidOrientationError("euler", "angles are not finite")
    return quat_from_euler(angles, *convention.axes, intrinsic=convention.intrinsic)


def _from_xyaxes(values: np.ndarray, convention: OrientationConvention) -> np.ndarray:
    xaxis, xnorm = normalize_with_norm(values[:3])
    if xnorm == 0.0 or not np.isfinite(xnorm):
        raise InvalidOrientationError("xyaxes", "X axis is zero")
    # Gram-Schmidt: remove the X component from Y before normalizing.
    yaxis = values[3:] - np.dot(values[3:], xaxis) * xaxis
    yaxis, ynorm = normalize_with_norm(yaxis)
    if ynorm <= 1.0e-12 * np.linalg.norm(values[3:]) or not np.isfinite(ynorm):
        raise InvalidOrientationError("xyaxes", "X and Y axes are parallel")
    zaxis = np.cross(xaxis, yaxis)
    return quat_from_matrix(np.column_stack([xaxis, yaxis, zaxis]))


def _from_zaxis(values: np.ndarray, convention: OrientationConvention) -> np.ndarray:
    zaxis, norm = normalize_with_norm(values)
    if norm == 0.0 or not np.isfinite(norm):
        raise InvalidOrientationError("zaxis", "Z axis is zero")
    return quat_between_vectors(_Z_AXIS, zaxis)


_RESOLVERS = {
    OrientationAttribute.QUAT: _from_quat,
    OrientationAttribute.AXISANGLE: _from_axisangle,
    OrientationAttribute.EULER: _from_euler,
    OrientationAttribute.XYAXES: _from_xyaxes,
    OrientationAttribute.ZAXIS: _from_zaxis,
}


def present_orientation_attributes(attrib: Mapping[str, str]) -> list[str]:
    """Names of the orientation attributes present on a node, in document order."""
    return [name for name in attrib if name in ORIENTATION_ATTRIBUTES]


def resolve_orientation(
    attrib: Mapping[str, str],
    *,
    segment_like: bool,
    convention: OrientationConvention | None = None,
    sink: DiagnosticSink | None = None,
) -> np.ndarray:
    """
    Resolve the orientation of a node into a unit quaternion.

    At most one of ``quat``, ``axisangle``, ``euler``, ``xyaxes`` and ``zaxis`` may be
    present. Without any of them the orientation is the identity.

    Args:
        attrib: The element attributes.
        segment_like: Whether the enclosing shape is direction-sensitive (capsule, box).
            Direction-insensitive shapes still carry the rotation in their pose; a debug
            record notes that it does not change the shape.
        convention: Angle unit and Euler sequence in effect. Defaults to degrees and
            intrinsic XYZ.
        sink: Receiver of diagnostic records.

    Returns:
        The unit quaternion in ``(x, y, z, w)`` layout.

    Raises:
        MultipleOrientationsError: If more than one orientation attribute is present.
        InvalidOrientationError: If the payload does not describe a rotation.
        AttributeVectorError: If the payload is not the right number of numbers.
    """
    if convention is None:
        convention = OrientationConvention()
    if sink is None:
        sink = diagnostics.default_sink()

    present = present_orientation_attributes(attrib)
    if len(present) > 1:
        raise MultipleOrientationsError(present, [attrib[name] for name in present])
    if not present:
        return quat_identity()

    kind = OrientationAttribute(present[0])
    values = parse_vector(attrib[kind.value], kind.arity, attribute=kind.value)
    q = _RESOLVERS[kind](values, convention)

    if not segment_like:
        diagnostics.debug(
            sink,
            "Orientation does not change a direction-insensitive shape",
            attribute=kind.value,
            value=attrib[kind.value],
        )
    return q
