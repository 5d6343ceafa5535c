"""Per-tool markup encoders.

Each encoder is a pure function from a validated tool model to the tag format
read by the downstream command parser. Text fields are escaped; booleans and
integers are written as literals. Optional tags are emitted only when the field
carries a value (``None`` and empty strings are skipped; ``recursive=False`` is
still written).
"""

from __future__ import annotations

from .escape import escape_xml
from ..schema.models import (
    ApplyDiff,
    FetchInstructions,
    ListCodeDefinitionNames,
    ListFiles,
    ReadFile,
    SearchFiles,
    WriteToFile,
)


def _tag(name: str, text: str) -> str:
    return f"<{name}>{escape_xml(text)}</{name}>"


def _block(name: str, text: str) -> str:
    """Tag whose escaped body sits on its own line."""
    return f"<{name}>\n{escape_xml(text)}\n</{name}>"


def _wrap(name: str, lines: list[str]) -> str:
    return "\n".join((f"<{name}>", *lines, f"</{name}>"))


def encode_read_file(tool: ReadFile) -> str:
    lines = ["<args>"]
    for ref in tool.args.files:
        lines.append("  <file>")
        lines.append(f"    {_tag('path', ref.path)}")
        if ref.line_range:
            lines.append(f"    {_tag('line_range', ref.line_range)}")
        lines.append("  </file>")
    lines.append("</args>")
    return _wrap("read_file", lines)


def encode_search_files(tool: SearchFiles) -> str:
    lines = [_tag("path", tool.path), _tag("regex", tool.regex)]
    if tool.file_pattern:
        lines.append(_tag("file_pattern", tool.file_pattern))
    return _wrap("search_files", lines)


def encode_list_files(tool: ListFiles) -> str:
    lines = [_tag("path", tool.path)]
    if tool.recursive is not None:
        lines.append(f"<recursive>{'true' if tool.recursive else 'false'}</recursive>")
    return _wrap("list_files", lines)


def encode_list_code_definition_names(tool: ListCodeDefinitionNames) -> str:
    return _wrap("list_code_definition_names", [_tag("path", tool.path)])


def encode_write_to_file(tool: WriteToFile) -> str:
    return _wrap("write_to_file", [
        _tag("path", tool.path),
        _block("content", tool.content),
        f"<line_count>{tool.line_count}</line_count>",
    ])


def encode_apply_diff(tool: ApplyDiff) -> str:
    return _wrap("apply_diff", [_tag("path", tool.path), _block("diff", tool.diff)])


def encode_fetch_instructions(tool: FetchInstructions) -> str:
    return _wrap("fetch_instructions", [_tag("task", tool.task)])
