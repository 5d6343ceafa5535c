"""Tool response models and the JSON-schema artifact derived from them."""

from .json_schema import JsonSchema, clear_schema_cache, response_format, tools_json_schema
from .models import (
    RESPONSE_TYPES,
    TASKS,
    TOOL_MODELS,
    TOOL_NAMES,
    TOOL_USE_ADAPTER,
    ApplyDiff,
    FetchInstructions,
    FileRef,
    ListCodeDefinitionNames,
    ListFiles,
    MultipleTools,
    ReadFile,
    ReadFileArgs,
    SearchFiles,
    SingleTool,
    ToolsResponse,
    ToolUse,
    WriteToFile,
)

__all__ = [
    # Models
    "FileRef", "ReadFileArgs", "ReadFile", "SearchFiles", "ListFiles", "ListCodeDefinitionNames",
    "WriteToFile", "ApplyDiff", "FetchInstructions", "ToolUse", "SingleTool", "MultipleTools", "ToolsResponse",
    # Catalogs
    "TOOL_MODELS", "TOOL_NAMES", "TOOL_USE_ADAPTER", "TASKS", "RESPONSE_TYPES",
    # Schema artifact
    "JsonSchema", "tools_json_schema", "response_format", "clear_schema_cache",
]
