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

import logging
import threading
import unittest

from mjcf_parser._src.utils import logger as msg


class TestLogger(unittest.TestCase):
    def tearDown(self):
        msg.reset_log_level()

    def test_parse_log_level(self):
        self.assertEqual(msg.parse_log_level("trace"), msg.LogLevel.TRACE)
        self.assertEqual(msg.parse_log_level("DEBUG"), msg.LogLevel.DEBUG)
        self.assertEqual(msg.parse_log_level(" info "), msg.LogLevel.INFO)
        self.assertEqual(msg.parse_log_level("warn"), msg.LogLevel.WARNING)
        self.assertEqual(msg.parse_log_level("warning"), msg.LogLevel.WARNING)
        self.assertEqual(msg.parse_log_level("error"), msg.LogLevel.ERROR)
        self.assertEqual(msg.parse_log_level("critical"), msg.LogLevel.CRITICAL)

    def test_parse_unknown_log_level(self):
        with self.assertRaises(ValueError) as cm:
            msg.parse_log_level("verbose")
        self.assertIn("Unknown log level verbose", str(cm.exception))

    def test_trace_is_below_debug(self):
        self.assertLess(msg.LogLevel.TRACE, logging.DEBUG)

    def test_set_and_reset_log_level(self):
        logger = msg.get_default_logger()
        self.assertEqual(logger.name, msg.LOGGER_NAME)
        msg.set_log_level("debug")
        self.assertEqual(logger.level, logging.DEBUG)
        msg.set_log_level(msg.LogLevel.ERROR)
        self.assertEqual(logger.level, logging.ERROR)
        msg.reset_log_level()
        self.assertEqual(logger.level, logging.WARNING)

    def test_default_logger_is_shared(self):
        self.assertIs(msg.get_default_logger(), msg.get_default_logger())
        self.assertEqual(len(msg.get_default_logger().handlers), 1)

    def test_concurrent_first_use_attaches_one_handler(self):
        log = logging.getLogger(msg.LOGGER_NAME)
        saved_logger, saved_handlers = msg.LOGGER, list(log.handlers)
        self.addCleanup(setattr, msg, "LOGGER", saved_logger)
        self.addCleanup(setattr, log, "handlers", saved_handlers)
        msg.LOGGER = None
        log.handlers = []

        barrier = threading.Barrier(8)

        def first_use():
            barrier.wait()
            msg.get_default_logger()

        threads = [threading.Thread(target=first_use) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(log.handlers), 1)
        self.assertIsNotNone(msg.LOGGER)

    def test_helpers(self):
        msg.set_log_level("debug")
        with self.assertLogs(msg.LOGGER_NAME, level="DEBUG") as cm:
            msg.debug("d")
            msg.info("i")
            msg.warning("w")
            msg.error("e")
        self.assertEqual([r.levelname for r in cm.records], ["DEBUG", "INFO", "WARNING", "ERROR"])

    def test_header(self):
        msg.get_default_logger()
        record = logging.LogRecord(msg.LOGGER_NAME, logging.WARNING, __file__, 1, "hello", None, None)
        header = msg.Logger.HEADER
        try:
            msg.set_log_header("[TEST]")
            text = msg.LOGGER.format(record)
        finally:
            msg.set_log_header(header)
        self.assertIn("[TEST]", text)
        self.assertIn("hello", text)
        self.assertIn("[WARNING]", text)


if __name__ == "__main__":
    unittest.main(verbosity=2)
