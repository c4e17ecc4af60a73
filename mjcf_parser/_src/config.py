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

"""
Provides types for holding parser configurations.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .errors import MjcfParseError

###
# Module interface
###

__all__ = [
    "DEFAULT_MODEL_NAME",
    "OrientationConvention",
    "ParserConfig",
]


DEFAULT_MODEL_NAME = "MuJoCo Model"
"""Scene name used when the ``mujoco`` root has no ``model`` attribute."""


###
# Types
###


@dataclass
class ParserConfig:
    """
    A data container to hold host-side parser configurations.
    """

    model_name: str = DEFAULT_MODEL_NAME
    """
    Scene name used when the document does not provide one.\n
    Defaults to `"MuJoCo Model"`.
    """

    angle: str = "degree"
    """
    Unit of angles in `axisangle` and `euler` attributes, `"degree"` or `"radian"`.\n
    A `<compiler angle="...">` element in the document takes precedence.\n
    Defaults to `"degree"`.
    """

    euler_seq: str = "xyz"
    """
    Axis sequence applied by the `euler` attribute. Lower-case letters denote
    intrinsic rotations (rotating axes), upper-case letters extrinsic rotations (fixed axes).\n
    A `<compiler eulerseq="...">` element in the document takes precedence.\n
    Defaults to `"xyz"`.
    """

    def __post_init__(self) -> None:
        """
        Performs validation checks on the configuration values after initialization.
        """
        self.check_values()

    def check_values(self) -> None:
        """
        Checks the validity of the configuration values.

        Raises:
            ValueError: If `angle` or `euler_seq` hold unsupported values.
        """
        if self.angle.lower() not in ("degree", "radian"):
            raise ValueError(f"Invalid angle unit '{self.angle}'. Must be 'degree' or 'radian'.")
        OrientationConvention.check_euler_seq(self.euler_seq)


@dataclass(frozen=True)
class OrientationConvention:
    """
    Angle conventions in effect for one document.
    """

    use_degrees: bool = True
    """Whether `axisangle` and `euler` angles are given in degrees."""

    euler_seq: str = "xyz"
    """Euler axis sequence, see :attr:`ParserConfig.euler_seq`."""

    @staticmethod
    def check_euler_seq(euler_seq: str) -> None:
        if len(euler_seq) != 3 or any(c not in "xyzXYZ" for c in euler_seq):
            raise ValueError(f"Invalid euler sequence '{euler_seq}'. Must be three letters out of 'xyzXYZ'.")
        if not (euler_seq.islower() or euler_seq.isupper()):
            raise ValueError(f"Invalid euler sequence '{euler_seq}'. Cannot mix intrinsic and extrinsic axes.")
        lower = euler_seq.lower()
        if lower[0] == lower[1] or lower[1] == lower[2]:
            raise ValueError(f"Invalid euler sequence '{euler_seq}'. Consecutive axes must differ.")

    @property
    def intrinsic(self) -> bool:
        return self.euler_seq.islower()

    @property
    def axes(self) -> tuple[int, int, int]:
        """Axis indices of the Euler sequence, 0 for X, 1 for Y, 2 for Z."""
        return tuple("xyz".index(c) for c in self.euler_seq.lower())

    @classmethod
    def from_config(cls, config: ParserConfig) -> OrientationConvention:
        return cls(use_degrees=config.angle.lower() == "degree", euler_seq=config.euler_seq)

    @classmethod
    def from_document(cls, root: ET.Element, config: ParserConfig) -> OrientationConvention:
        """
        Resolve the convention for a document, letting its `<compiler>` element
        override the configured defaults.
        """
        angle = config.angle
        euler_seq = config.euler_seq
        compiler = root.find("compiler")
        if compiler is not None:
            angle = compiler.attrib.get("angle", angle)
            euler_seq = compiler.attrib.get("eulerseq", euler_seq)
        if angle.lower() not in ("degree", "radian"):
            raise MjcfParseError(f"Invalid compiler angle unit '{angle}'")
        try:
            cls.check_euler_seq(euler_seq)
        except ValueError as e:
            raise MjcfParseError(f"Invalid compiler eulerseq: {e}") from e
        return cls(use_degrees=angle.lower() == "degree", euler_seq=euler_seq)
