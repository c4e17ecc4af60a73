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

from mjcf_parser.errors import MultiplePositionsError, TooFewValuesError
from mjcf_parser.geometry import ShapeType
from mjcf_parser.parse import resolve_position


class TestResolvePosition(unittest.TestCase):
    def test_default_is_origin(self):
        for shape_type in ShapeType:
            result = resolve_position({}, shape_type)
            np.testing.assert_array_equal(result.translation, [0.0, 0.0, 0.0])
            self.assertIsNone(result.segment_half_length)

    def test_pos(self):
        result = resolve_position({"pos": "1 -2 3.5"}, ShapeType.SPHERE)
        np.testing.assert_array_equal(result.translation, [1.0, -2.0, 3.5])

    def test_capsule_fromto(self):
        result = resolve_position({"fromto": "0 0 0 0 0 2"}, ShapeType.CAPSULE)
        np.testing.assert_allclose(result.translation, [0.0, 0.0, 1.0])
        self.assertAlmostEqual(result.segment_half_length, 1.0)

    def test_box_fromto(self):
        result = resolve_position({"fromto": "1 1 1 4 5 1"}, ShapeType.BOX)
        np.testing.assert_allclose(result.translation, [2.5, 3.0, 1.0])
        self.assertAlmostEqual(result.segment_half_length, 2.5)

    def test_pos_and_fromto_conflict(self):
        for shape_type in (ShapeType.CAPSULE, ShapeType.BOX):
            with self.assertRaises(MultiplePositionsError) as cm:
                resolve_position({"pos": "0 0 0", "fromto": "0 0 0 0 0 1"}, shape_type)
            self.assertEqual(cm.exception.attributes, ("pos", "fromto"))

    def test_fromto_ignored_on_point_like_shapes(self):
        for shape_type in (ShapeType.PLANE, ShapeType.SPHERE):
            result = resolve_position({"pos": "0 0 3", "fromto": "0 0 0 0 0 1"}, shape_type)
            np.testing.assert_array_equal(result.translation, [0.0, 0.0, 3.0])
            self.assertIsNone(result.segment_half_length)

    def test_fromto_arity(self):
        with self.assertRaises(TooFewValuesError) as cm:
            resolve_position({"fromto": "0 0 0 1"}, ShapeType.CAPSULE)
        self.assertEqual(cm.exception.attribute, "fromto")
        self.assertEqual(cm.exception.expected, 6)


if __name__ == "__main__":
    unittest.main(verbosity=2)
