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

"""Exception types raised while parsing MJCF documents.

Every exception derives from :class:`MjcfParseError`, itself a :class:`ValueError`,
and carries the structured context (tag, attribute, offending value) needed to
render a precise message without re-parsing the document.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "AttributeVectorError",
    "DuplicateGeomNameError",
    "GeomError",
    "InvalidGeometrySizeError",
    "InvalidGeometryTypeError",
    "InvalidOrientationError",
    "MalformedDocumentError",
    "MissingRequiredTagError",
    "MjcfParseError",
    "MultipleOrientationsError",
    "MultiplePositionsError",
    "RequiredAttributeMissingError",
    "TooFewValuesError",
    "TooManyValuesError",
    "UnsupportedGeometryTypeError",
    "ValueParseFailureError",
    "WorldBodyHasAttributesError",
    "WorldBodyInvalidChildrenError",
]


class MjcfParseError(ValueError):
    """Base class of every error raised by the parser.

    Attributes:
        geom: Name of the ``<geom>`` being resolved when the error was raised, if any.
        geom_index: Zero-based index of that geom in the scene.
    """

    geom: str | None = None
    geom_index: int | None = None

    def attach_geom(self, name: str, index: int) -> MjcfParseError:
        """Record the geom that failed. Returns the error itself so it can be re-raised."""
        self.geom = name
        self.geom_index = index
        return self

    def __str__(self) -> str:
        message = super().__str__()
        if self.geom is None:
            return message
        return f"{message} (geom '{self.geom}' at index {self.geom_index})"


###
# Document structure
###


class MalformedDocumentError(MjcfParseError):
    """The input text is not well-formed XML."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed XML document: {reason}")
        self.reason = reason


class MissingRequiredTagError(MjcfParseError):
    """A structurally required tag is absent, e.g. the ``mujoco`` root."""

    def __init__(self, tag_name: str):
        super().__init__(f"Missing required tag <{tag_name}>")
        self.tag_name = tag_name


class WorldBodyHasAttributesError(MjcfParseError):
    def __init__(self, attributes: Sequence[str]):
        super().__init__(f"worldbody tag has attributes: {', '.join(attributes)}")
        self.attributes = tuple(attributes)


class WorldBodyInvalidChildrenError(MjcfParseError):
    """``inertial``, ``joint`` and ``freejoint`` are only legal inside a ``body``."""

    def __init__(self, tag_name: str):
        super().__init__(f"worldbody has invalid child <{tag_name}>")
        self.tag_name = tag_name


###
# Numeric attribute payloads
###


class AttributeVectorError(MjcfParseError):
    """A whitespace-separated numeric attribute could not be parsed.

    Attributes:
        attribute: Name of the attribute that held the text, when known.
        text: The raw attribute text.
    """

    def __init__(self, message: str, text: str, attribute: str | None = None):
        prefix = f'Bad values for attribute "{attribute}": ' if attribute else "Bad attribute values: "
        super().__init__(prefix + message)
        self.text = text
        self.attribute = attribute


class TooFewValuesError(AttributeVectorError):
    def __init__(self, text: str, expected: int, found: int, attribute: str | None = None):
        super().__init__(f"expected {expected} values, found only {found} in '{text}'", text, attribute)
        self.expected = expected
        self.found = found


class TooManyValuesError(AttributeVectorError):
    def __init__(self, text: str, expected: int, found: int, attribute: str | None = None):
        super().__init__(f"expected {expected} values, found {found} in '{text}'", text, attribute)
        self.expected = expected
        self.found = found


class ValueParseFailureError(AttributeVectorError):
    def __init__(self, text: str, token: str, position: int, attribute: str | None = None):
        super().__init__(f"could not parse '{token}' at position {position} as a number", text, attribute)
        self.token = token
        self.position = position


###
# Geometry
###


def _render(attributes: Sequence[str], values: Sequence[str]) -> str:
    if not values:
        return ", ".join(attributes)
    return ", ".join(f'{name}="{value}"' for name, value in zip(attributes, values, strict=True))


class GeomError(MjcfParseError):
    """Base class of errors raised while resolving a ``<geom>`` element."""


class InvalidGeometryTypeError(GeomError):
    """The ``type`` value is not recognized by the format at all."""

    def __init__(self, geom_type: str):
        super().__init__(f"Invalid shape type {geom_type}")
        self.geom_type = geom_type


class UnsupportedGeometryTypeError(GeomError):
    """The ``type`` value is defined by the format but not implemented."""

    def __init__(self, geom_type: str):
        super().__init__(f"Geom type {geom_type} is not currently supported")
        self.geom_type = geom_type


class RequiredAttributeMissingError(GeomError):
    def __init__(self, attribute: str):
        super().__init__(f'Required attribute "{attribute}" missing')
        self.attribute = attribute


class MultiplePositionsError(GeomError):
    def __init__(self, attributes: Sequence[str] = ("pos", "fromto"), values: Sequence[str] = ()):
        super().__init__(f"Multiple positions specified: {_render(attributes, values)}")
        self.attributes = tuple(attributes)
        self.values = tuple(values)


class MultipleOrientationsError(GeomError):
    def __init__(self, attributes: Sequence[str], values: Sequence[str] = ()):
        super().__init__(f"Multiple orientations specified: {_render(attributes, values)}")
        self.attributes = tuple(attributes)
        self.values = tuple(values)


class DuplicateGeomNameError(GeomError):
    """Two geoms of one scene carry the same ``name``."""

    def __init__(self, name: str):
        super().__init__(f"Repeated geom name '{name}'")
        self.name = name


class InvalidOrientationError(GeomError):
    """An orientation payload parsed but does not describe a rotation."""

    def __init__(self, attribute: str, reason: str):
        super().__init__(f'Failed to parse orientation "{attribute}". Reason: {reason}')
        self.attribute = attribute
        self.reason = reason


class InvalidGeometrySizeError(GeomError):
    """A shape dimension is non-finite or not strictly positive."""

    def __init__(self, attribute: str, value: float):
        super().__init__(f"Shape dimension {attribute} must be finite and positive, got {value}")
        self.attribute = attribute
        self.value = value
