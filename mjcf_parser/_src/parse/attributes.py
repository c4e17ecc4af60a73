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

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

import numpy as np

from ..errors import TooFewValuesError, TooManyValuesError, ValueParseFailureError

__all__ = [
    "count_values",
    "parse_number",
    "parse_vector",
    "parse_vector_attribute",
    "split_values",
]

# XML whitespace only: a no-break space or other Unicode space is part of a token.
_SEPARATOR = re.compile(r"[ \t\n\r]+")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


def split_values(text: str) -> list[str]:
    """Split an attribute value on runs of XML whitespace (space, tab, CR, LF)."""
    text = text.strip(" \t\n\r")
    if not text:
        return []
    return _SEPARATOR.split(text)


def parse_number(token: str) -> float:
    """
    Parse one decimal number token.

    Only ASCII digits, an optional sign, fraction and exponent, and ``inf``/``nan`` are
    accepted. Digit group underscores and non-ASCII digits are rejected, although
    :class:`float` would take them.

    Raises:
        ValueError: If the token is not a number.
    """
    if _NUMBER.fullmatch(token) is None:
        raise ValueError(f"could not convert string to float: {token!r}")
    return float(token)


def parse_vector(text: str, arity: int, *, attribute: str | None = None) -> np.ndarray:
    """
    Parse a whitespace-separated numeric attribute into a fixed-length vector.
    For example, "1.0 2.0 3.0" with ``arity=3`` is parsed as ``array([1.0, 2.0, 3.0])``.

    Unlike the lenient parsing of many MJCF loaders, the number of values must match
    exactly: short input is never padded and long input is never truncated.

    Args:
        text: The attribute text.
        arity: The required number of values.
        attribute: Name of the attribute, recorded on any raised error.

    Returns:
        A float64 array of length ``arity``.

    Raises:
        TooFewValuesError: If fewer than ``arity`` tokens are present.
        TooManyValuesError: If more than ``arity`` tokens are present.
        ValueParseFailureError: If a token is not a number.
    """
    if arity < 1:
        raise ValueError(f"Vector arity must be positive, got {arity}")

    tokens = split_values(text)
    if len(tokens) < arity:
        raise TooFewValuesError(text, arity, len(tokens), attribute=attribute)
    if len(tokens) > arity:
        raise TooManyValuesError(text, arity, len(tokens), attribute=attribute)

    out = np.empty(arity, dtype=np.float64)
    for position, token in enumerate(tokens):
        try:
            out[position] = parse_number(token)
        except ValueError as e:
            raise ValueParseFailureError(text, token, position, attribute=attribute) from e
    return out


def parse_vector_attribute(
    attrib: Mapping[str, str],
    name: str,
    arity: int,
    default: Sequence[float] | None = None,
) -> np.ndarray | None:
    """
    Parse the attribute ``name`` of an element's attribute mapping.

    Args:
        attrib: The element attributes, e.g. ``element.attrib``.
        name: The attribute to read.
        arity: The required number of values.
        default: Returned (as a new array) if the attribute is absent.

    Returns:
        The parsed vector, the default, or ``None`` if absent without default.
    """
    text = attrib.get(name)
    if text is None:
        if default is None:
            return None
        return np.array(default, dtype=np.float64)
    return parse_vector(text, arity, attribute=name)


def count_values(attrib: Mapping[str, str], name: str) -> int:
    """Number of whitespace-separated tokens in an attribute, 0 if absent."""
    text = attrib.get(name)
    return 0 if text is None else len(split_values(text))
