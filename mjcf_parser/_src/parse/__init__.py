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

"""Resolution of MJCF elements into geometry descriptors."""

from .attributes import count_values, parse_number, parse_vector, parse_vector_attribute, split_values
from .audit import GEOM_ATTRIBUTE_SUPPORT, UNSUPPORTED_GEOM_ATTRIBUTES, audit_attributes
from .geom import GeomKind, parse_geom
from .orientation import ORIENTATION_ATTRIBUTES, OrientationAttribute, resolve_orientation
from .position import PositionResult, resolve_position
from .worldbody import GeomNamer, WorldbodyChild, explicit_geom_names, parse_worldbody

__all__ = [
    "GEOM_ATTRIBUTE_SUPPORT",
    "ORIENTATION_ATTRIBUTES",
    "UNSUPPORTED_GEOM_ATTRIBUTES",
    "GeomKind",
    "GeomNamer",
    "OrientationAttribute",
    "PositionResult",
    "WorldbodyChild",
    "audit_attributes",
    "count_values",
    "explicit_geom_names",
    "parse_geom",
    "parse_number",
    "parse_vector",
    "parse_vector_attribute",
    "parse_worldbody",
    "resolve_orientation",
    "resolve_position",
    "split_values",
]
