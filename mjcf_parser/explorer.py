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
Command-line explorer that loads an MJCF file and lists the geometry it resolves to.

Usage::

    mjcf-explorer path/to/model.xml --log-level debug
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import numpy as np

from ._src.errors import MjcfParseError
from ._src.geometry.types import GeomDescriptor
from ._src.model import MjcfModel, parse_mjcf_file
from ._src.utils import logger as msg

__all__ = [
    "create_parser",
    "describe_geom",
    "describe_model",
    "main",
]


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mjcf-explorer", description="Load an MJCF model and list its geometry")
    parser.add_argument("model_file", type=str, help="Path to the MJCF model file")
    parser.add_argument(
        "-l",
        "--log-level",
        type=msg.parse_log_level,
        default=msg.LogLevel.WARNING,
        help="Log level: trace, debug, info, warn, error or critical",
    )
    return parser


def describe_geom(geom: GeomDescriptor) -> str:
    """Render one geometry descriptor as a single line."""
    params = np.array2string(geom.shape.params[: geom.shape.num_params], precision=4, separator=", ")
    translation = np.array2string(np.asarray(geom.pose.translation), precision=4, separator=", ")
    orientation = np.array2string(np.asarray(geom.pose.orientation), precision=4, separator=", ")
    return f"{geom.name}: {geom.type.name.lower()} params={params} pos={translation} quat_xyzw={orientation}"


def describe_model(model: MjcfModel) -> list[str]:
    lines = [f"Model: {model.name}", f"Geoms: {len(model.geoms)}"]
    lines.extend(f"  {describe_geom(geom)}" for geom in model.geoms)
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    msg.set_log_level(args.log_level)

    try:
        model = parse_mjcf_file(args.model_file)
    except OSError as e:
        print(f"error: cannot read '{args.model_file}': {e}", file=sys.stderr)
        return 1
    except MjcfParseError as e:
        print(f"error: failed to parse '{args.model_file}': {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    for line in describe_model(model):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
