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

from mjcf_parser._src import diagnostics as emit
from mjcf_parser.diagnostics import (
    Diagnostic,
    DiagnosticCollector,
    DiagnosticLevel,
    DiagnosticSink,
    LoggingSink,
    NullSink,
    default_sink,
)


class TestDiagnostic(unittest.TestCase):
    def test_str(self):
        self.assertEqual(str(Diagnostic(DiagnosticLevel.DEBUG, "Parsing worldbody tag")), "Parsing worldbody tag")
        record = Diagnostic(DiagnosticLevel.WARNING, "rgba attribute is currently unsupported", {"value": "1 0 0 1"})
        self.assertEqual(str(record), "rgba attribute is currently unsupported (value=1 0 0 1)")

    def test_levels_match_logging(self):
        self.assertEqual(DiagnosticLevel.DEBUG, logging.DEBUG)
        self.assertEqual(DiagnosticLevel.WARNING, logging.WARNING)
        self.assertEqual(DiagnosticLevel.ERROR, logging.ERROR)


class TestSinks(unittest.TestCase):
    def test_protocol(self):
        for sink in (NullSink(), LoggingSink(), DiagnosticCollector()):
            self.assertIsInstance(sink, DiagnosticSink)
        self.assertIsInstance(default_sink(), LoggingSink)

    def test_collector(self):
        sink = DiagnosticCollector()
        emit.debug(sink, "a")
        emit.warning(sink, "b", attribute="rgba")
        emit.error(sink, "c")
        self.assertEqual(len(sink), 3)
        self.assertEqual([r.message for r in sink.records], ["a", "b", "c"])
        self.assertEqual(sink.warnings[0].attributes, {"attribute": "rgba"})
        self.assertEqual(len(sink.filter(DiagnosticLevel.ERROR)), 1)
        sink.clear()
        self.assertEqual(len(sink), 0)

    def test_collector_records_are_a_snapshot(self):
        sink = DiagnosticCollector()
        emit.debug(sink, "a")
        records = sink.records
        emit.debug(sink, "b")
        self.assertEqual(len(records), 1)

    def test_collector_forwarding(self):
        inner = DiagnosticCollector()
        outer = DiagnosticCollector(forward=inner)
        emit.warning(outer, "w")
        self.assertEqual(inner.records, outer.records)

    def test_collector_is_thread_safe(self):
        sink = DiagnosticCollector()

        def worker():
            for _ in range(500):
                emit.debug(sink, "x")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(sink), 4000)

    def test_logging_sink(self):
        logger = logging.getLogger("mjcf_parser.tests.diagnostics")
        sink = LoggingSink(logger)
        with self.assertLogs(logger, level="DEBUG") as cm:
            emit.warning(sink, "rgba attribute is currently unsupported", attribute="rgba", geom="g")
            emit.debug(sink, "Parsing geom tag")
        self.assertEqual(len(cm.records), 2)
        self.assertEqual(cm.records[0].levelno, logging.WARNING)
        self.assertEqual(cm.records[0].getMessage(), "rgba attribute is currently unsupported (attribute=rgba, geom=g)")
        self.assertEqual(cm.records[0].mjcf_attributes, {"attribute": "rgba", "geom": "g"})
        self.assertEqual(cm.records[1].levelno, logging.DEBUG)

    def test_logging_sink_respects_level(self):
        logger = logging.getLogger("mjcf_parser.tests.diagnostics.level")
        logger.setLevel(logging.ERROR)
        sink = LoggingSink(logger)
        with self.assertLogs(logger, level="ERROR") as cm:
            emit.warning(sink, "dropped")
            emit.error(sink, "kept")
        self.assertEqual([r.getMessage() for r in cm.records], ["kept"])

    def test_null_sink(self):
        NullSink().emit(Diagnostic(DiagnosticLevel.ERROR, "ignored"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
