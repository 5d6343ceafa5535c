"""Conversion of structured tool responses into tool markup.

Entry point for callers holding raw model output:

    >>> from toolxml import convert
    >>> result = convert('{"response_type": "text_only", "text_response": "Done."}')
    >>> result.success, result.xml
    (True, 'Done.')

The orchestrator resolves the input once (text or mapping), reads the
side-channel fields, branches on ``response_type`` and hands tool invocations
to the dispatcher. Every failure comes back as a ConversionResult with
``success=False``; ``convert`` never raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import orjson
from pydantic import BaseModel, ConfigDict

from .dispatch import dispatch, dispatch_many
from .inputs import JSON_TEXT, RawInput, is_absent
from ..foundation.errors import ConversionError, EncodeResult, Err, ErrorCode, Ok, Result
from ..observability import get_logger

log = get_logger("toolxml.converter")


class ConversionResult(BaseModel):
    """Envelope returned by convert.

    Attributes:
        success: Whether markup (or passthrough text) was produced
        xml: Tool markup, or the plain text of a text_only response
        error: Operator-facing failure description
        code: Failure classification (PARSE_ERROR, SHAPE_ERROR, CONVERSION_ERROR)
        reasoning: Model's stated reason for the tool choice, for diagnostics
        thinking: Model's internal commentary, for diagnostics
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    xml: str | None = None
    error: str | None = None
    code: ErrorCode | None = None
    reasoning: str | None = None
    thinking: str | None = None

    @classmethod
    def failure(cls, error: ConversionError, *, reasoning: str | None = None, thinking: str | None = None) -> ConversionResult:
        return cls(success=False, error=error.message, code=error.code, reasoning=reasoning, thinking=thinking)

    def to_result(self) -> EncodeResult:
        """View as Result: Ok(xml) on success, Err(ConversionError) otherwise."""
        if self.success:
            return Ok(self.xml or "")
        return Err(ConversionError.create(self.error or "Conversion failed", self.code or ErrorCode.UNKNOWN))

    def xml_or(self, fallback: str) -> str:
        """Markup on success, else fallback (typically the raw model output passed through as text)."""
        return (self.xml or "") if self.success else fallback


# ─────────────────────────────────────────────────────────────────────────────
# Input Resolution
# ─────────────────────────────────────────────────────────────────────────────


def load_input(raw: Any) -> Result[Mapping[str, Any], ConversionError]:
    """Resolve text or a parsed value into the response mapping."""
    if isinstance(raw, JSON_TEXT):
        try:
            raw = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            return Err(ConversionError.create(f"Failed to parse JSON string: {e}", ErrorCode.PARSE_ERROR))
    if not isinstance(raw, Mapping):
        return Err(ConversionError.create("Invalid input: expected object or JSON string", ErrorCode.SHAPE_ERROR))
    return Ok(raw)


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _section(response: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = response.get(key)
    return value if isinstance(value, Mapping) else {}


def _reasoning(response: Mapping[str, Any]) -> str | None:
    return _text(_section(response, "single_tool").get("reasoning")) or _text(
        _section(response, "multiple_tools").get("reasoning")
    )


# ─────────────────────────────────────────────────────────────────────────────
# Orchestration
# ─────────────────────────────────────────────────────────────────────────────


def _encode(response: Mapping[str, Any]) -> EncodeResult:
    """Branch on response_type and encode. text_only yields its text untouched."""
    match response.get("response_type"):
        case "text_only":
            return Ok(_text(response.get("text_response")) or "")
        case "single_tool":
            tool_use = _section(response, "single_tool").get("tool_use")
            if is_absent(tool_use):
                return Err(ConversionError.create("Single tool response missing tool_use", ErrorCode.SHAPE_ERROR))
            return dispatch(tool_use)
        case "multiple_tools":
            tools = _section(response, "multiple_tools").get("tools")
            if not isinstance(tools, list) or not tools:
                return Err(ConversionError.create("Multiple tools response missing tools array", ErrorCode.SHAPE_ERROR))
            return dispatch_many(tools)
        case other:
            return Err(ConversionError.create(f"Unknown response_type: {other}", ErrorCode.SHAPE_ERROR))


def _convert(raw: Any) -> ConversionResult:
    loaded = load_input(raw)
    if loaded.is_err():
        return ConversionResult.failure(loaded.unwrap_err())

    response = loaded.unwrap()
    thinking = _text(response.get("thinking"))
    is_text = response.get("response_type") == "text_only"
    reasoning = None if is_text else _reasoning(response)

    return _encode(response).match(
        ok=lambda xml: ConversionResult(success=True, xml=xml, reasoning=reasoning, thinking=thinking),
        err=lambda e: ConversionResult.failure(e, reasoning=reasoning, thinking=thinking),
    )


def convert(raw: RawInput) -> ConversionResult:
    """Convert a structured tool response into tool markup.

    Args:
        raw: JSON text (str/bytes) or a parsed mapping

    Returns:
        ConversionResult; failures carry ``error`` and ``code`` instead of raising.
    """
    try:
        result = _convert(raw)
    except Exception as e:  # noqa: BLE001 - convert() must never raise
        log.exception("conversion crashed", error=str(e))
        error = ConversionError.from_exception(e, "Conversion error")
        return ConversionResult.failure(error)

    if not result.success:
        log.debug("conversion failed", code=str(result.code), error=result.error)
    return result


def debug_structure(raw: RawInput) -> str:
    """Pretty-print the parsed input (2-space indent) for diagnostics."""
    if isinstance(raw, JSON_TEXT):
        try:
            raw = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            return f"Error parsing JSON: {e}"
    try:
        return orjson.dumps(raw, option=orjson.OPT_INDENT_2).decode()
    except TypeError as e:
        return f"Error serializing structure: {e}"
