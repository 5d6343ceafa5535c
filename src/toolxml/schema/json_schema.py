"""JSON-schema artifact for constraining upstream model output.

The schema is derived from the pydantic models in ``toolxml.schema.models`` and
post-processed for providers that do not resolve references:

- ``$ref`` entries are inlined from ``$defs``
- ``title`` metadata and ``default: null`` are stripped
- nullable ``anyOf`` (``X | None``) collapses to ``X``
- discriminator mappings are dropped (they point at removed ``$defs``)

Built lazily on first request and cached per limit pair.

Example:
    >>> from toolxml.schema import response_format, tools_json_schema
    >>> schema = tools_json_schema()
    >>> schema["required"]
    ['response_type']
    >>> response_format()["json_schema"]["name"]
    'structured_output'
"""

from __future__ import annotations

import copy
from functools import lru_cache
from typing import Any

from .models import ToolsResponse

JsonSchema = dict[str, Any]

_DEFS_PREFIX = "#/$defs/"


def _resolve_ref(node: JsonSchema, defs: JsonSchema) -> JsonSchema:
    """Replace a ``$ref`` node by its definition, keeping sibling keys (e.g. description)."""
    ref = node["$ref"]
    if not ref.startswith(_DEFS_PREFIX) or (target := defs.get(ref[len(_DEFS_PREFIX):])) is None:
        raise KeyError(f"Unresolvable schema reference: {ref}")
    siblings = {k: v for k, v in node.items() if k != "$ref"}
    return {**target, **siblings}


def _collapse_nullable(node: JsonSchema) -> JsonSchema:
    """``{"anyOf": [X, {"type": "null"}]}`` -> X (with the outer node's metadata)."""
    options = node.get("anyOf")
    if not isinstance(options, list):
        return node
    non_null = [o for o in options if o.get("type") != "null"]
    if len(non_null) == len(options):
        return node
    outer = {k: v for k, v in node.items() if k not in ("anyOf", "default")}
    if len(non_null) == 1:
        return {**non_null[0], **outer}
    return {"anyOf": non_null, **outer}


def _clean(node: Any, defs: JsonSchema) -> Any:
    """Recursively inline references and strip pydantic metadata."""
    if isinstance(node, list):
        return [_clean(item, defs) for item in node]
    if not isinstance(node, dict):
        return node

    while True:
        if "$ref" in node:
            node = _resolve_ref(node, defs)
        elif (collapsed := _collapse_nullable(node)) is not node:
            node = collapsed
        else:
            break

    cleaned: JsonSchema = {}
    for key, value in node.items():
        if key in ("title", "$defs"):
            continue
        if key == "properties":
            # Property names are data here, not schema keywords
            cleaned[key] = {name: _clean(prop, defs) for name, prop in value.items()}
        elif key == "discriminator":
            cleaned[key] = {"propertyName": value["propertyName"]}
        else:
            cleaned[key] = _clean(value, defs)

    if "oneOf" in cleaned and "discriminator" in cleaned:
        cleaned.setdefault("type", "object")
    return cleaned


def _apply_limits(defs: JsonSchema, max_tools: int, max_files: int) -> None:
    """Advertise item limits on the ``tools`` array and the ``read_file`` file array."""
    tools = defs["MultipleTools"]["properties"]["tools"]
    tools.update(minItems=1, maxItems=max_tools)
    tools["description"] = f"Array of tool uses (1-{max_tools} tools)"

    file_field = defs["ReadFileArgs"]["properties"]["file"]
    for option in file_field.get("anyOf", ()):
        if option.get("type") == "array":
            option.update(minItems=1, maxItems=max_files)
    file_field["description"] = f"Single file object or array of file objects (max {max_files} files)"


@lru_cache(maxsize=8)
def _build(max_tools: int, max_files: int) -> JsonSchema:
    raw = copy.deepcopy(ToolsResponse.model_json_schema())
    defs = raw.get("$defs", {})
    _apply_limits(defs, max_tools, max_files)
    return _clean(raw, defs)


def tools_json_schema(*, max_tools: int | None = None, max_files: int | None = None) -> JsonSchema:
    """Get the JSON schema describing a structured tool response.

    Args:
        max_tools: Max entries in ``multiple_tools.tools`` (default from settings)
        max_files: Max files in one ``read_file`` call (default from settings)

    Returns:
        A fresh copy of the schema; callers may mutate it freely.
    """
    if max_tools is None or max_files is None:
        from toolxml.foundation.config import get_settings
        limits = get_settings().schema_limits
        max_tools = limits.max_tools if max_tools is None else max_tools
        max_files = limits.max_files if max_files is None else max_files
    return copy.deepcopy(_build(max_tools, max_files))


def response_format(name: str = "structured_output", *, strict: bool = True, **limits: int) -> JsonSchema:
    """Wrap the schema in the OpenAI-compatible ``response_format`` envelope.

    Args:
        name: Schema name sent to the provider
        strict: Ask the provider to adhere to the schema exactly
        **limits: Forwarded to tools_json_schema (max_tools, max_files)
    """
    return {
        "type": "json_schema",
        "json_schema": {"name": name, "schema": tools_json_schema(**limits), "strict": strict},
    }


def clear_schema_cache() -> None:
    """Drop cached schemas (e.g. after changing TOOLXML_SCHEMA_* settings in tests)."""
    _build.cache_clear()
