"""Encoder dispatch over the closed set of tool kinds.

``encode_tool`` handles already-validated models. ``dispatch`` is the boundary
for untrusted mappings: it rejects unknown ``tool`` tags and invalid arguments
as ``Err`` values instead of raising, so callers never need a try/except.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from .encoders import (
    encode_apply_diff,
    encode_fetch_instructions,
    encode_list_code_definition_names,
    encode_list_files,
    encode_read_file,
    encode_search_files,
    encode_write_to_file,
)
from ..foundation.errors import ConversionError, EncodeResult, Err, ErrorCode, Ok, Result, traverse
from ..schema.models import (
    TOOL_MODELS,
    ApplyDiff,
    FetchInstructions,
    ListCodeDefinitionNames,
    ListFiles,
    ReadFile,
    SearchFiles,
    ToolUse,
    WriteToFile,
)

TOOL_SEPARATOR = "\n\n"

_ENCODERS: dict[type[BaseModel], Callable[[Any], str]] = {
    ReadFile: encode_read_file,
    SearchFiles: encode_search_files,
    ListFiles: encode_list_files,
    ListCodeDefinitionNames: encode_list_code_definition_names,
    WriteToFile: encode_write_to_file,
    ApplyDiff: encode_apply_diff,
    FetchInstructions: encode_fetch_instructions,
}


def encode_tool(tool: ToolUse) -> str:
    """Encode a validated tool model. Raises TypeError for anything outside ToolUse."""
    if (encoder := _ENCODERS.get(type(tool))) is None:
        raise TypeError(f"Not a tool invocation model: {type(tool).__name__}")
    return encoder(tool)


def encode_tools(tools: Iterable[ToolUse]) -> str:
    """Encode validated models in order, separated by a blank line."""
    return TOOL_SEPARATOR.join(encode_tool(t) for t in tools)


def _describe_validation(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in exc.errors()
    )


def parse_tool(raw: Any) -> Result[ToolUse, ConversionError]:
    """Validate one raw tool invocation into its model.

    Unknown or missing ``tool`` tags are SHAPE_ERROR; bad arguments for a known
    tag are CONVERSION_ERROR naming the offending fields.
    """
    if isinstance(raw, BaseModel) and type(raw) in _ENCODERS:
        return Ok(raw)
    if not isinstance(raw, Mapping):
        return Err(ConversionError.create(
            f"Tool invocation must be an object, got {type(raw).__name__}", ErrorCode.SHAPE_ERROR,
        ))

    tag = raw.get("tool")
    if not isinstance(tag, str) or (model := TOOL_MODELS.get(tag)) is None:
        return Err(ConversionError.create(f"Unknown tool type: {tag}", ErrorCode.SHAPE_ERROR))

    try:
        return Ok(model.model_validate(raw))
    except ValidationError as e:
        return Err(ConversionError.create(
            f"Invalid {tag} invocation: {_describe_validation(e)}",
            ErrorCode.CONVERSION_ERROR,
            tool=tag,
            details=str(e),
        ))


def dispatch(raw: Any) -> EncodeResult:
    """Validate and encode one raw tool invocation."""
    return parse_tool(raw).map(encode_tool)


def _dispatch_at(item: tuple[int, Any]) -> EncodeResult:
    index, raw = item
    return dispatch(raw).map_err(lambda e: e.model_copy(update={"message": f"tools[{index}]: {e.message}"}))


def dispatch_many(raws: Iterable[Any]) -> EncodeResult:
    """Validate and encode invocations in order. Fails on the first bad entry, naming its index."""
    return traverse(enumerate(raws), _dispatch_at).map(TOOL_SEPARATOR.join)
