"""Input shapes shared by conversion and validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

# Values parsed as JSON text before any shape check
JSON_TEXT: tuple[type, ...] = (str, bytes, bytearray, memoryview)

# Raw model output: JSON text or an already-parsed object
RawInput: TypeAlias = str | bytes | bytearray | memoryview | Mapping[str, Any]


def is_absent(value: Any) -> bool:
    """Whether a required field counts as missing.

    ``None``, ``False``, ``0`` and ``""`` are missing. Objects and arrays count
    as present even when empty; their contents are checked downstream.

    >>> [is_absent(v) for v in (None, "", False, 0, {}, [], "x")]
    [True, True, True, True, False, False, False]
    """
    if isinstance(value, (Mapping, list)):
        return False
    return not value
