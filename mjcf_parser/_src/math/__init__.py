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

"""Host-side rotation helpers in double precision.

Quaternions use the Warp layout ``(x, y, z, w)`` throughout, so they can be
handed to :class:`warp.quat` without reordering. This is also the scalar-last
layout of :class:`scipy.spatial.transform.Rotation`, which does the conversions.
MJCF itself writes quaternions as ``(w, x, y, z)``; see :func:`quat_from_wxyz`.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy.spatial.transform import Rotation


def normalize_with_norm(x: Sequence[float] | np.ndarray) -> tuple[np.ndarray, float]:
    """Normalize a vector and return both the normalized vector and the original norm.

    A zero or non-finite norm leaves the vector unchanged and reports the norm as-is,
    so callers can reject degenerate input.
    """
    v = np.asarray(x, dtype=np.float64)
    norm = float(np.linalg.norm(v))
    if norm == 0.0 or not np.isfinite(norm):
        return v, norm
    return v / norm, norm


def quat_identity() -> np.ndarray:
    return np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float64)


def quat_from_wxyz(wxyz: Sequence[float] | np.ndarray) -> np.ndarray:
    """Reorder an MJCF ``(w, x, y, z)`` quaternion into ``(x, y, z, w)``."""
    w, x, y, z = (float(c) for c in wxyz)
    return np.array([x, y, z, w], dtype=np.float64)


def quat_to_wxyz(q: np.ndarray) -> np.ndarray:
    return np.array([q[3], q[0], q[1], q[2]], dtype=np.float64)


def quat_mul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Composition ``a * b`` (apply ``b`` first, then ``a``)."""
    return (Rotation.from_quat(a) * Rotation.from_quat(b)).as_quat()


def quat_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians about the unit vector ``axis``."""
    return Rotation.from_rotvec(angle * np.asarray(axis, dtype=np.float64)).as_quat()


def quat_from_euler(
    angles: Sequence[float] | np.ndarray, i: int, j: int, k: int, intrinsic: bool = True
) -> np.ndarray:
    """Convert Euler angles to a quaternion.

    Args:
        angles: The three rotation angles [rad], in sequence order.
        i, j, k: Axis indices (0 for X, 1 for Y, 2 for Z) of the sequence.
        intrinsic: If True, each rotation is about the axes rotated by the previous
            ones (``q = q_i * q_j * q_k``). Otherwise all rotations are about the
            fixed frame axes (``q = q_k * q_j * q_i``).

    Returns:
        The unit quaternion in ``(x, y, z, w)`` layout.
    """
    # scipy spells intrinsic sequences in upper case and extrinsic ones in lower case
    seq = "".join("xyz"[axis] for axis in (i, j, k))
    if intrinsic:
        seq = seq.upper()
    return Rotation.from_euler(seq, np.asarray(angles, dtype=np.float64)).as_quat()


def quat_from_matrix(m: np.ndarray) -> np.ndarray:
    """Convert a proper rotation matrix to a unit quaternion."""
    return Rotation.from_matrix(np.asarray(m, dtype=np.float64)).as_quat()


def quat_to_matrix(q: np.ndarray) -> np.ndarray:
    """Convert a unit quaternion to a 3x3 rotation matrix."""
    return Rotation.from_quat(q).as_matrix()


def quat_rotate(q: np.ndarray, v: Sequence[float] | np.ndarray) -> np.ndarray:
    return Rotation.from_quat(q).apply(np.asarray(v, dtype=np.float64))


def quat_between_vectors(from_vec: np.ndarray, to_vec: np.ndarray, eps: float = 1.0e-9) -> np.ndarray:
    """Minimal rotation taking the unit vector ``from_vec`` onto the unit vector ``to_vec``.

    The anti-parallel case has no unique minimal rotation; a half turn about a
    deterministic axis orthogonal to ``from_vec`` is returned.
    """
    d = float(np.dot(from_vec, to_vec))

    if d >= 1.0 - eps:
        return quat_identity()

    if d <= -1.0 + eps:
        # Prefer cross with X, fallback to Y if nearly parallel.
        helper = np.array([1.0, 0.0, 0.0]) if abs(from_vec[0]) < 0.9 else np.array([0.0, 1.0, 0.0])
        axis, _ = normalize_with_norm(np.cross(from_vec, helper))
        return quat_from_axis_angle(axis, np.pi)

    axis, sin_angle = normalize_with_norm(np.cross(from_vec, to_vec))
    return quat_from_axis_angle(axis, float(np.arctan2(sin_angle, d)))


__all__ = [
    "normalize_with_norm",
    "quat_between_vectors",
    "quat_from_axis_angle",
    "quat_from_euler",
    "quat_from_matrix",
    "quat_from_wxyz",
    "quat_identity",
    "quat_mul",
    "quat_rotate",
    "quat_to_matrix",
    "quat_to_wxyz",
]
