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

from collections.abc import Mapping
from typing import NamedTuple

import numpy as np

from ..errors import MultiplePositionsError
from ..geometry.types import ShapeType
from .attributes import parse_vector, parse_vector_attribute

__all__ = [
    "PositionResult",
    "parse_fromto",
    "resolve_position",
]


class PositionResult(NamedTuple):
    """The translation of a geom, and the half-length of its segment if given by ``fromto``."""

    translation: np.ndarray
    segment_half_length: float | None = None


def parse_fromto(text: str) -> tuple[np.ndarray, np.ndarray]:
    """Split a ``fromto`` attribute into its two endpoints."""
    fromto = parse_vector(text, 6, attribute="fromto")
    return fromto[:3], fromto[3:]


def resolve_position(attrib: Mapping[str, str], shape_type: ShapeType) -> PositionResult:
    """
    Resolve the translation of a geom of the given shape type.

    Planes and spheres only honor ``pos``. Capsules and boxes additionally accept
    ``fromto``, a segment from point A to point B: the translation is then the
    midpoint and the segment half-length is half the distance from A to B.

    Raises:
        MultiplePositionsError: If both ``pos`` and ``fromto`` are given to a capsule or box.
        AttributeVectorError: If ``pos`` or ``fromto`` is malformed.
    """
    origin = (0.0, 0.0, 0.0)

    if not shape_type.segment_like or "fromto" not in attrib:
        return PositionResult(parse_vector_attribute(attrib, "pos", 3, default=origin))

    if "pos" in attrib:
        raise MultiplePositionsError(("pos", "fromto"), (attrib["pos"], attrib["fromto"]))

    start, end = parse_fromto(attrib["fromto"])
    center = start + 0.5 * (end - start)
    half_length = 0.5 * float(np.linalg.norm(end - start))
    return PositionResult(center, half_length)
