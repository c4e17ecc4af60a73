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
import xml.etree.ElementTree as ET

from mjcf_parser import ParserConfig
from mjcf_parser._src.config import OrientationConvention
from mjcf_parser.errors import MjcfParseError


class TestParserConfig(unittest.TestCase):
    def test_defaults(self):
        config = ParserConfig()
        self.assertEqual(config.model_name, "MuJoCo Model")
        self.assertEqual(config.angle, "degree")
        self.assertEqual(config.euler_seq, "xyz")

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            ParserConfig(angle="gradian")
        for euler_seq in ("xy", "xyzx", "abc", "xYz", "xxy", "XYY"):
            with self.assertRaises(ValueError):
                ParserConfig(euler_seq=euler_seq)

    def test_dimension_validation_is_not_configurable(self):
        with self.assertRaises(TypeError):
            ParserConfig(validate_dimensions=False)

    def test_check_values_after_mutation(self):
        config = ParserConfig()
        config.angle = "turns"
        with self.assertRaises(ValueError):
            config.check_values()


class TestOrientationConvention(unittest.TestCase):
    def test_axes(self):
        self.assertEqual(OrientationConvention().axes, (0, 1, 2))
        self.assertEqual(OrientationConvention(euler_seq="ZYX").axes, (2, 1, 0))
        self.assertTrue(OrientationConvention(euler_seq="zxz").intrinsic)
        self.assertFalse(OrientationConvention(euler_seq="ZXZ").intrinsic)

    def test_from_config(self):
        convention = OrientationConvention.from_config(ParserConfig(angle="radian", euler_seq="XYZ"))
        self.assertFalse(convention.use_degrees)
        self.assertEqual(convention.euler_seq, "XYZ")

    def test_repeated_consecutive_axes_in_document(self):
        root = ET.fromstring('<mujoco><compiler eulerseq="zzx"/></mujoco>')
        with self.assertRaises(MjcfParseError):
            OrientationConvention.from_document(root, ParserConfig())

    def test_document_overrides_config(self):
        root = ET.fromstring('<mujoco><compiler angle="radian" eulerseq="zyx"/></mujoco>')
        convention = OrientationConvention.from_document(root, ParserConfig())
        self.assertFalse(convention.use_degrees)
        self.assertEqual(convention.euler_seq, "zyx")

        root = ET.fromstring("<mujoco/>")
        convention = OrientationConvention.from_document(root, ParserConfig(angle="radian"))
        self.assertFalse(convention.use_degrees)
        self.assertEqual(convention.euler_seq, "xyz")

    def test_invalid_document_settings(self):
        root = ET.fromstring('<mujoco><compiler eulerseq="xq"/></mujoco>')
        with self.assertRaises(MjcfParseError):
            OrientationConvention.from_document(root, ParserConfig())


if __name__ == "__main__":
    unittest.main(verbosity=2)
