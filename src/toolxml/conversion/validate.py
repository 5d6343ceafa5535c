"""Shallow structural validation of a raw tool response.

Checks the top-level shape only and reports every problem found, in order. It
does not look inside tool invocations, so a valid report is not a promise that
``convert`` succeeds: ``{"tool": "search_files"}`` without a ``regex`` passes
here and fails conversion. Use it as a cheap pre-flight filter.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import orjson

from .inputs import JSON_TEXT, is_absent
from ..schema.models import RESPONSE_TYPES


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of validate_structure: valid iff errors is empty."""
    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid


def validate_structure(raw: Any) -> ValidationReport:
    """Check a response (JSON text or parsed mapping) against the expected top-level shape."""
    if isinstance(raw, JSON_TEXT):
        try:
            raw = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            return ValidationReport((f"JSON parsing error: {e}",))

    if not isinstance(raw, Mapping):
        return ValidationReport(("Response must be an object",))

    errors: list[str] = []
    response_type = raw.get("response_type")
    if is_absent(response_type):
        errors.append("Missing required field: response_type")
    elif response_type not in RESPONSE_TYPES:
        errors.append(f"Invalid response_type: {response_type}")

    if response_type == "single_tool":
        single = raw.get("single_tool")
        if is_absent(single):
            errors.append("single_tool field is required for single_tool response_type")
        elif not isinstance(single, Mapping) or is_absent(single.get("tool_use")):
            errors.append("tool_use field is required in single_tool")

    elif response_type == "multiple_tools":
        multiple = raw.get("multiple_tools")
        if is_absent(multiple):
            errors.append("multiple_tools field is required for multiple_tools response_type")
        elif not isinstance(multiple, Mapping) or not isinstance(multiple.get("tools"), list):
            errors.append("tools field must be an array in multiple_tools")
        elif not multiple["tools"]:
            errors.append("tools array cannot be empty")

    elif response_type == "text_only" and is_absent(raw.get("text_response")):
        errors.append("text_response field is required for text_only response_type")

    return ValidationReport(tuple(errors))
