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
Structured diagnostics emitted while parsing.

Diagnostics report conditions that do not abort parsing, such as unsupported
attributes or ignored tags. Every parsing entry point receives the sink
explicitly, so tests can capture records without touching global state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

from .utils import logger as msg

###
# Module interface
###

__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticLevel",
    "DiagnosticSink",
    "LoggingSink",
    "NullSink",
    "default_sink",
]


###
# Types
###


class DiagnosticLevel(IntEnum):
    """Severity of a diagnostic record, aligned with :mod:`logging` levels."""

    DEBUG = logging.DEBUG
    WARNING = logging.WARNING
    ERROR = logging.ERROR


@dataclass(frozen=True)
class Diagnostic:
    """A single structured diagnostic record."""

    level: DiagnosticLevel
    """Severity of the record."""

    message: str
    """Human readable message."""

    attributes: Mapping[str, Any] = field(default_factory=dict)
    """Structured context, e.g. the tag or attribute name that triggered the record."""

    def __str__(self) -> str:
        if not self.attributes:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.attributes.items())
        return f"{self.message} ({context})"


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receiver of diagnostic records. Emitting never returns a value."""

    def emit(self, record: Diagnostic) -> None: ...


###
# Sinks
###


class NullSink:
    """Discards every record."""

    def emit(self, record: Diagnostic) -> None:
        pass


class LoggingSink:
    """Forwards diagnostics to a :class:`logging.Logger`.

    The record attributes are rendered into the message and also passed through
    ``extra={"mjcf_attributes": ...}`` for structured handlers.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger if logger is not None else msg.get_default_logger()

    def emit(self, record: Diagnostic) -> None:
        if not self.logger.isEnabledFor(record.level):
            return
        self.logger.log(record.level, str(record), extra={"mjcf_attributes": dict(record.attributes)})


class DiagnosticCollector:
    """Thread-safe, append-only in-memory sink.

    Optionally forwards every record to another sink after storing it.
    """

    def __init__(self, forward: DiagnosticSink | None = None):
        self._lock = threading.Lock()
        self._records: list[Diagnostic] = []
        self._forward = forward

    def emit(self, record: Diagnostic) -> None:
        with self._lock:
            self._records.append(record)
        if self._forward is not None:
            self._forward.emit(record)

    @property
    def records(self) -> list[Diagnostic]:
        """A snapshot of the collected records, in emission order."""
        with self._lock:
            return list(self._records)

    def filter(self, level: DiagnosticLevel) -> list[Diagnostic]:
        """Returns the collected records with exactly the given level."""
        return [record for record in self.records if record.level == level]

    @property
    def warnings(self) -> list[Diagnostic]:
        return self.filter(DiagnosticLevel.WARNING)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def default_sink() -> DiagnosticSink:
    """The sink used when a caller does not provide one: the package logger."""
    return LoggingSink()


###
# Emitters
###


def debug(sink: DiagnosticSink, message: str, **attributes: Any) -> None:
    sink.emit(Diagnostic(DiagnosticLevel.DEBUG, message, attributes))


def warning(sink: DiagnosticSink, message: str, **attributes: Any) -> None:
    sink.emit(Diagnostic(DiagnosticLevel.WARNING, message, attributes))


def error(sink: DiagnosticSink, message: str, **attributes: Any) -> None:
    sink.emit(Diagnostic(DiagnosticLevel.ERROR, message, attributes))
