# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value type handling for Trie.

A Trie holds values of a single type, fixed when the trie is created.
Values are converted to that type before an insertion touches any node,
so a rejected value leaves the trie unchanged.

Conversion rules:
    - ``None`` or ``object``: any value is accepted unchanged
    - an instance of the value type is accepted unchanged
    - numbers convert between numeric types only when no information is
      lost (``1`` -> ``1.0``, ``2.0`` -> ``2``, but not ``2.5`` -> ``int``)
    - ``bool`` never converts to or from other numbers
    - anything else raises ValueConversionError
"""

from __future__ import annotations

import logging
import numbers
from typing import Any, Iterable

from .exceptions import ValueConversionError

logger = logging.getLogger(__name__)


def convert_value(value: Any, value_type: type | None) -> Any:
    """Return ``value`` represented as ``value_type``.

    Args:
        value: The value to convert.
        value_type: Target type, or None to accept any value.

    Returns:
        The value itself, or its lossless numeric conversion.

    Raises:
        ValueConversionError: If the value cannot be represented.
    """
    if value_type is None or value_type is object:
        return value
    if isinstance(value, value_type):
        return value

    if (
        isinstance(value, numbers.Number)
        and issubclass(value_type, numbers.Number)
        and not isinstance(value, bool)
        and value_type is not bool
    ):
        try:
            converted = value_type(value)
        except (TypeError, ValueError, OverflowError):
            pass
        else:
            if converted == value:
                return converted

    logger.debug("Rejected %r for value type %s", value, value_type.__name__)
    raise ValueConversionError(
        f"cannot convert {value!r} ({type(value).__name__}) "
        f"to {value_type.__name__}"
    )


def infer_value_type(values: Iterable[Any]) -> type:
    """Return the exact type shared by all ``values``.

    Falls back to ``object`` for mixed types or an empty iterable.
    """
    found: type | None = None
    for value in values:
        if found is None:
            found = type(value)
        elif type(value) is not found:
            return object
    return object if found is None else found
