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

import unittest

import numpy as np

from mjcf_parser._src.config import OrientationConvention
from mjcf_parser.diagnostics import DiagnosticCollector, DiagnosticLevel
from mjcf_parser.errors import InvalidOrientationError, MultipleOrientationsError, TooFewValuesError
from mjcf_parser.math import quat_rotate, quat_to_matrix
from mjcf_parser.parse import resolve_orientation

SQRT_HALF = np.sqrt(0.5)


def resolve(attrib, segment_like=True, convention=None, sink=None):
    if sink is None:
        sink = DiagnosticCollector()
    return resolve_orientation(attrib, segment_like=segment_like, convention=convention, sink=sink)


class TestResolveOrientation(unittest.TestCase):
    def assert_quat_close(self, actual, expected, atol=1e-9):
        """Compare two unit quaternions up to the sign ambiguity ``q ~ -q``."""
        actual = np.asarray(actual)
        expected = np.asarray(expected)
        if np.dot(actual, expected) < 0.0:
            actual = -actual
        np.testing.assert_allclose(actual, expected, atol=atol)

    def test_absent_is_identity(self):
        np.testing.assert_array_equal(resolve({}), [0.0, 0.0, 0.0, 1.0])
        np.testing.assert_array_equal(resolve({"pos": "1 2 3", "size": "1"}), [0.0, 0.0, 0.0, 1.0])

    def test_quat_is_wxyz_and_normalized(self):
        self.assert_quat_close(resolve({"quat": "1 0 0 0"}), [0.0, 0.0, 0.0, 1.0])
        self.assert_quat_close(resolve({"quat": "2 0 0 0"}), [0.0, 0.0, 0.0, 1.0])
        self.assert_quat_close(resolve({"quat": "1 1 0 0"}), [SQRT_HALF, 0.0, 0.0, SQRT_HALF])

    def test_quat_zero_is_rejected(self):
        with self.assertRaises(InvalidOrientationError) as cm:
            resolve({"quat": "0 0 0 0"})
        self.assertEqual(cm.exception.attribute, "quat")

    def test_axisangle_degrees(self):
        q = resolve({"axisangle": "0 0 1 90"})
        self.assert_quat_close(q, [0.0, 0.0, SQRT_HALF, SQRT_HALF])
        np.testing.assert_allclose(quat_rotate(q, [1.0, 0.0, 0.0]), [0.0, 1.0, 0.0], atol=1e-12)

    def test_axisangle_axis_is_normalized(self):
        self.assert_quat_close(resolve({"axisangle": "0 0 5 90"}), [0.0, 0.0, SQRT_HALF, SQRT_HALF])

    def test_axisangle_radians(self):
        convention = OrientationConvention(use_degrees=False)
        q = resolve({"axisangle": f"0 0 1 {0.5 * np.pi}"}, convention=convention)
        self.assert_quat_close(q, [0.0, 0.0, SQRT_HALF, SQRT_HALF])

    def test_axisangle_zero_axis(self):
        with self.assertRaises(InvalidOrientationError):
            resolve({"axisangle": "0 0 0 90"})

    def test_euler_about_x(self):
        self.assert_quat_close(resolve({"euler": "90 0 0"}), [SQRT_HALF, 0.0, 0.0, SQRT_HALF])

    def test_euler_is_intrinsic_xyz_by_default(self):
        # Intrinsic x then y: R = Rx(90) @ Ry(90)
        m = quat_to_matrix(resolve({"euler": "90 90 0"}))
        expected = np.array([[0.0, 0.0, 1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
        np.testing.assert_allclose(m, expected, atol=1e-12)

    def test_euler_extrinsic_sequence(self):
        # Extrinsic X then Y: R = Ry(90) @ Rx(90)
        convention = OrientationConvention(euler_seq="XYZ")
        m = quat_to_matrix(resolve({"euler": "90 90 0"}, convention=convention))
        expected = np.array([[0.0, 1.0, 0.0], [0.0, 0.0, -1.0], [-1.0, 0.0, 0.0]])
        np.testing.assert_allclose(m, expected, atol=1e-12)

    def test_euler_custom_sequence(self):
        convention = OrientationConvention(euler_seq="zyx")
        q = resolve({"euler": "90 0 0"}, convention=convention)
        self.assert_quat_close(q, [0.0, 0.0, SQRT_HALF, SQRT_HALF])

    def test_xyaxes(self):
        q = resolve({"xyaxes": "0 1 0 -1 0 0"})
        self.assert_quat_close(q, [0.0, 0.0, SQRT_HALF, SQRT_HALF])

    def test_xyaxes_orthonormalizes_y(self):
        self.assert_quat_close(resolve({"xyaxes": "2 0 0 1 1 0"}), [0.0, 0.0, 0.0, 1.0])

    def test_xyaxes_parallel_axes(self):
        with self.assertRaises(InvalidOrientationError) as cm:
            resolve({"xyaxes": "1 0 0 2 0 0"})
        self.assertEqual(cm.exception.attribute, "xyaxes")

    def test_zaxis(self):
        self.assert_quat_close(resolve({"zaxis": "0 0 1"}), [0.0, 0.0, 0.0, 1.0])
        for zaxis in ("1 0 0", "0 -2 0", "1 1 1", "0 0 -1"):
            target = np.array([float(v) for v in zaxis.split()])
            target /= np.linalg.norm(target)
            q = resolve({"zaxis": zaxis})
            np.testing.assert_allclose(quat_rotate(q, [0.0, 0.0, 1.0]), target, atol=1e-12)

    def test_zaxis_zero(self):
        with self.assertRaises(InvalidOrientationError):
            resolve({"zaxis": "0 0 0"})

    def test_multiple_orientations(self):
        with self.assertRaises(MultipleOrientationsError) as cm:
            resolve({"quat": "1 0 0 0", "euler": "0 0 0"})
        self.assertEqual(cm.exception.attributes, ("quat", "euler"))

        with self.assertRaises(MultipleOrientationsError) as cm:
            resolve({"zaxis": "0 0 1", "axisangle": "0 0 1 0", "xyaxes": "1 0 0 0 1 0"})
        self.assertEqual(cm.exception.attributes, ("zaxis", "axisangle", "xyaxes"))

    def test_payload_arity(self):
        with self.assertRaises(TooFewValuesError) as cm:
            resolve({"quat": "1 0 0"})
        self.assertEqual(cm.exception.attribute, "quat")

    def test_direction_insensitive_shape_is_noted(self):
        sink = DiagnosticCollector()
        q = resolve({"euler": "0 0 90"}, segment_like=False, sink=sink)
        self.assert_quat_close(q, [0.0, 0.0, SQRT_HALF, SQRT_HALF])
        self.assertEqual(len(sink), 1)
        self.assertEqual(sink.records[0].level, DiagnosticLevel.DEBUG)
        self.assertEqual(sink.records[0].attributes["attribute"], "euler")

        sink = DiagnosticCollector()
        resolve({"euler": "0 0 90"}, segment_like=True, sink=sink)
        self.assertEqual(len(sink), 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
