"""Pydantic models for structured tool responses.

Each tool kind is a frozen model with a Literal ``tool`` tag; ``ToolUse`` is the
closed union over them, discriminated on ``tool``. Models check required keys
and JSON types only (``line_count`` must be a real integer, not a boolean).
Item limits (tools, files), the line_count minimum and the fetch_instructions
task enum appear only in the schema artifact, never as validation during
conversion.

Example:
    >>> from toolxml.schema import TOOL_USE_ADAPTER
    >>> TOOL_USE_ADAPTER.validate_python({"tool": "list_files", "path": "src"})
    ListFiles(tool='list_files', path='src', recursive=None)
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter

ResponseType = Literal["single_tool", "multiple_tools", "text_only"]

TASKS: tuple[str, ...] = ("create_mcp_server", "create_mode")
RESPONSE_TYPES: tuple[str, ...] = ("single_tool", "multiple_tools", "text_only")


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


# ─────────────────────────────────────────────────────────────────────────────
# Tool Invocations
# ─────────────────────────────────────────────────────────────────────────────


class FileRef(_Frozen):
    """A file to read, optionally restricted to a line range."""

    path: str = Field(..., description="File path (relative to workspace directory)")
    line_range: str | None = Field(default=None, description="Line range in format 'start-end' (1-based, inclusive)")


class ReadFileArgs(_Frozen):
    file: FileRef | list[FileRef] = Field(
        ...,
        description="Single file object or array of file objects",
    )

    @property
    def files(self) -> tuple[FileRef, ...]:
        """Files in input order, a single FileRef normalized to one entry."""
        return (self.file,) if isinstance(self.file, FileRef) else tuple(self.file)


class ReadFile(_Frozen):
    tool: Literal["read_file"]
    args: ReadFileArgs


class SearchFiles(_Frozen):
    tool: Literal["search_files"]
    path: str = Field(..., description="Directory path to search (relative to workspace directory)")
    regex: str = Field(..., description="Regular expression pattern (Rust regex syntax)")
    file_pattern: str | None = Field(default=None, description="Glob pattern to filter files (e.g., '*.ts')")


class ListFiles(_Frozen):
    tool: Literal["list_files"]
    path: str = Field(..., description="Directory path to list (relative to workspace directory)")
    recursive: bool | None = Field(default=None, description="Whether to list files recursively")


class ListCodeDefinitionNames(_Frozen):
    tool: Literal["list_code_definition_names"]
    path: str = Field(..., description="File or directory path to analyze (relative to workspace directory)")


class WriteToFile(_Frozen):
    tool: Literal["write_to_file"]
    path: str = Field(..., description="File path to write to (relative to workspace directory)")
    content: str = Field(..., description="Complete content to write to the file")
    line_count: StrictInt = Field(..., description="Total number of lines in the file", json_schema_extra={"minimum": 1})


class ApplyDiff(_Frozen):
    tool: Literal["apply_diff"]
    path: str = Field(..., description="File path to modify (relative to workspace directory)")
    diff: str = Field(..., description="Search/replace diff block with SEARCH and REPLACE sections")


class FetchInstructions(_Frozen):
    tool: Literal["fetch_instructions"]
    task: str = Field(..., description="Task to get instructions for", json_schema_extra={"enum": list(TASKS)})


ToolUse = Annotated[
    Union[ReadFile, SearchFiles, ListFiles, ListCodeDefinitionNames, WriteToFile, ApplyDiff, FetchInstructions],
    Field(discriminator="tool"),
]

# Tag -> model, in declaration order
TOOL_MODELS: dict[str, type[BaseModel]] = {
    "read_file": ReadFile,
    "search_files": SearchFiles,
    "list_files": ListFiles,
    "list_code_definition_names": ListCodeDefinitionNames,
    "write_to_file": WriteToFile,
    "apply_diff": ApplyDiff,
    "fetch_instructions": FetchInstructions,
}
TOOL_NAMES: tuple[str, ...] = tuple(TOOL_MODELS)

TOOL_USE_ADAPTER: TypeAdapter[Any] = TypeAdapter(ToolUse)


# ─────────────────────────────────────────────────────────────────────────────
# Responses
# ─────────────────────────────────────────────────────────────────────────────


class SingleTool(_Frozen):
    tool_use: ToolUse
    reasoning: str | None = Field(default=None, description="Optional reasoning about why this tool is being used")


class MultipleTools(_Frozen):
    tools: list[ToolUse] = Field(
        ...,
        description="Array of tool uses",
    )
    reasoning: str | None = Field(default=None, description="Optional reasoning about the tool selection")


class ToolsResponse(_Frozen):
    """Complete structured response: one tool, several tools, or plain text."""

    response_type: ResponseType = Field(..., description="Type of response")
    single_tool: SingleTool | None = None
    multiple_tools: MultipleTools | None = None
    text_response: str | None = Field(default=None, description="Plain text response when no tools are needed")
    thinking: str | None = Field(default=None, description="Internal reasoning (similar to Claude's thinking)")
