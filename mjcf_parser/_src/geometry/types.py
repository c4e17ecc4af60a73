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

"""Shape Types & Geometry Descriptors"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np
import warp as wp

from ..errors import InvalidGeometrySizeError
from ..math import quat_identity, quat_to_matrix, quat_to_wxyz

###
# Module interface
###

__all__ = [
    "BoxShape",
    "CapsuleShape",
    "GeomDescriptor",
    "GeomUserData",
    "PlaneShape",
    "Pose",
    "ShapeDescriptor",
    "ShapeType",
    "SphereShape",
    "Vec3",
    "Vec4",
]


Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


###
# Containers
###


class ShapeType(IntEnum):
    """
    An enumeration of the shape types a ``<geom>`` can resolve to.
    """

    PLANE = 0
    """The plane shape type. Its normal is the canonical +Z axis of the geom frame."""

    SPHERE = 1
    """The 1-parameter sphere shape type. Parameters: radius."""

    CAPSULE = 2
    """The 2-parameter capsule shape type. Parameters: radius, half-length. The segment runs along Z."""

    BOX = 3
    """The 3-parameter box shape type. Parameters: half-extents along X, Y and Z."""

    def __str__(self):
        return f"ShapeType.{self.name} ({self.value})"

    @property
    def num_params(self) -> int:
        """
        The number of parameters that describe the shape type.
        """
        if self.value == self.PLANE:
            return 0
        elif self.value == self.SPHERE:
            return 1
        elif self.value == self.CAPSULE:
            return 2
        elif self.value == self.BOX:
            return 3
        else:
            raise ValueError(f"Unknown shape type value: {self.value}")

    @property
    def segment_like(self) -> bool:
        """Whether the shape has a preferred direction and accepts ``fromto``."""
        return self.value in (self.CAPSULE, self.BOX)


def _check_dimension(attribute: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidGeometrySizeError(attribute, value)


class ShapeDescriptor(ABC):
    """Abstract base class for all shape descriptors."""

    @property
    @abstractmethod
    def type(self) -> ShapeType: ...

    @property
    def num_params(self) -> int:
        return self.type.num_params

    @property
    @abstractmethod
    def params(self) -> np.ndarray:
        """The shape dimensions packed into a 4-vector, zero padded."""

    def validate(self) -> None:
        """Raises :class:`InvalidGeometrySizeError` unless every dimension is finite and positive."""


###
# Primitive Shapes
###


@dataclass(frozen=True)
class PlaneShape(ShapeDescriptor):
    normal: Vec3 = (0.0, 0.0, 1.0)
    """Unit normal of the plane in the geom frame. Always +Z."""

    @property
    def type(self) -> ShapeType:
        return ShapeType.PLANE

    @property
    def params(self) -> np.ndarray:
        return np.array([*self.normal, 0.0], dtype=np.float64)


@dataclass(frozen=True)
class SphereShape(ShapeDescriptor):
    radius: float

    @property
    def type(self) -> ShapeType:
        return ShapeType.SPHERE

    @property
    def params(self) -> np.ndarray:
        return np.array([self.radius, 0.0, 0.0, 0.0], dtype=np.float64)

    def validate(self) -> None:
        _check_dimension("radius", self.radius)


@dataclass(frozen=True)
class CapsuleShape(ShapeDescriptor):
    radius: float
    half_length: float

    @property
    def type(self) -> ShapeType:
        return ShapeType.CAPSULE

    @property
    def params(self) -> np.ndarray:
        return np.array([self.radius, self.half_length, 0.0, 0.0], dtype=np.float64)

    def validate(self) -> None:
        _check_dimension("radius", self.radius)
        _check_dimension("half_length", self.half_length)


@dataclass(frozen=True)
class BoxShape(ShapeDescriptor):
    half_extents: Vec3

    @property
    def type(self) -> ShapeType:
        return ShapeType.BOX

    @property
    def params(self) -> np.ndarray:
        return np.array([*self.half_extents, 0.0], dtype=np.float64)

    def validate(self) -> None:
        for axis, value in zip("xyz", self.half_extents, strict=True):
            _check_dimension(f"half_extents.{axis}", value)


###
# Poses
###


@dataclass(frozen=True)
class Pose:
    """
    A rigid transform placing a shape in the scene frame.

    The orientation is a unit quaternion in Warp layout ``(x, y, z, w)``.
    """

    translation: Vec3 = (0.0, 0.0, 0.0)
    orientation: Vec4 = (0.0, 0.0, 0.0, 1.0)

    @classmethod
    def identity(cls) -> Pose:
        return cls()

    @classmethod
    def from_arrays(cls, translation: np.ndarray, orientation: np.ndarray) -> Pose:
        return cls(
            translation=tuple(float(v) for v in translation),
            orientation=tuple(float(v) for v in orientation),
        )

    @property
    def quat_wxyz(self) -> Vec4:
        """The orientation in MJCF layout ``(w, x, y, z)``."""
        return tuple(float(v) for v in quat_to_wxyz(np.asarray(self.orientation)))

    def matrix(self) -> np.ndarray:
        """The pose as a 4x4 homogeneous transformation matrix."""
        m = np.eye(4, dtype=np.float64)
        m[:3, :3] = quat_to_matrix(np.asarray(self.orientation, dtype=np.float64))
        m[:3, 3] = self.translation
        return m

    @property
    def transform(self) -> wp.transform:
        """The pose as a single precision :class:`warp.transform` for the physics engine."""
        return wp.transform(wp.vec3(*self.translation), wp.quat(*self.orientation))

    @property
    def is_identity(self) -> bool:
        return self.translation == (0.0, 0.0, 0.0) and np.allclose(self.orientation, quat_identity())


###
# Geometry
###


@dataclass(frozen=True)
class GeomUserData:
    """
    Engine-side contact and render parameters attached to every geometry.

    These are defaults only; the MJCF ``friction`` and ``rgba`` attributes are not applied.
    """

    torsional_friction: float = 0.005
    rolling_friction: float = 0.0001
    rgba: Vec4 = (0.5, 0.5, 0.5, 1.0)


@dataclass(frozen=True)
class GeomDescriptor:
    """
    The canonical, engine-agnostic result of resolving one ``<geom>`` element.
    """

    name: str
    """Explicit ``name`` attribute, or the geom's zero-based index in the scene."""

    shape: ShapeDescriptor
    pose: Pose = field(default_factory=Pose)
    user_data: GeomUserData = field(default_factory=GeomUserData)

    @property
    def type(self) -> ShapeType:
        return self.shape.type
