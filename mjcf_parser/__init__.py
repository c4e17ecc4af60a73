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

# ==================================================================================
# model
# ==================================================================================
from ._src.config import DEFAULT_MODEL_NAME, ParserConfig
from ._src.model import MjcfModel, ShapeBuilder, parse_mjcf_file, parse_mjcf_string
from ._version import __version__

__all__ = [
    "DEFAULT_MODEL_NAME",
    "MjcfModel",
    "ParserConfig",
    "ShapeBuilder",
    "__version__",
    "parse_mjcf_file",
    "parse_mjcf_string",
]

# ==================================================================================
# geometry
# ==================================================================================
from ._src.geometry import (  # noqa: E402
    BoxShape,
    CapsuleShape,
    GeomDescriptor,
    GeomUserData,
    PlaneShape,
    Pose,
    ShapeType,
    SphereShape,
)

__all__ += [
    "BoxShape",
    "CapsuleShape",
    "GeomDescriptor",
    "GeomUserData",
    "PlaneShape",
    "Pose",
    "ShapeType",
    "SphereShape",
]

# ==================================================================================
# errors
# ==================================================================================
from ._src.errors import MjcfParseError  # noqa: E402

__all__ += [
    "MjcfParseError",
]

# ==================================================================================
# submodule APIs
# ==================================================================================
from . import diagnostics, errors, geometry, math, parse, utils  # noqa: E402

__all__ += [
    "diagnostics",
    "errors",
    "geometry",
    "math",
    "parse",
    "utils",
]
