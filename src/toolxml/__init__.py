"""toolxml - Structured tool responses to tool-invocation markup.

Bridges models that emit schema-constrained JSON (e.g. local models driven
through an OpenAI-compatible ``response_format``) and agents that parse XML-like
tool tags from free text.

Quick Start:
    >>> from toolxml import convert
    >>>
    >>> result = convert({
    ...     "response_type": "single_tool",
    ...     "single_tool": {"tool_use": {"tool": "list_files", "path": "src", "recursive": True}},
    ... })
    >>> print(result.xml)
    <list_files>
    <path>src</path>
    <recursive>true</recursive>
    </list_files>

Constraining the Model:
    >>> from toolxml import response_format
    >>> request = {"model": "qwen2.5-coder", "messages": [...], "response_format": response_format()}

Pre-flight Check and Fallback:
    >>> from toolxml import validate_structure
    >>> report = validate_structure(raw_output)
    >>> text = convert(raw_output).xml_or(raw_output) if report.valid else raw_output

Batch:
    >>> from toolxml import convert_many
    >>> results = convert_many(outputs, max_workers=4)
    >>> results.success_rate
    1.0

Configuration (environment):
    TOOLXML_LOG_LEVEL=DEBUG  TOOLXML_LOG_FORMAT=json
    TOOLXML_BATCH_MAX_WORKERS=4  TOOLXML_SCHEMA_MAX_TOOLS=3
"""

from __future__ import annotations

__version__ = "0.1.0"

# Conversion
from .conversion import (
    BatchResult,
    ConversionResult,
    ValidationReport,
    convert,
    convert_many,
    debug_structure,
    dispatch,
    encode_tool,
    escape_xml,
    validate_structure,
)

# Errors
from .foundation.errors import ConversionError, ConversionException, EncodeResult, Err, ErrorCode, Ok, Result

# Configuration
from .foundation.config import ToolxmlSettings, clear_settings_cache, get_settings

# Logging
from .observability import configure_from_settings, configure_logging, get_logger

# Models and schema
from .schema import (
    TOOL_NAMES,
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
    response_format,
    tools_json_schema,
)

__all__ = [
    "__version__",
    # Conversion
    "convert", "ConversionResult", "convert_many", "BatchResult", "validate_structure", "ValidationReport",
    "debug_structure", "dispatch", "encode_tool", "escape_xml",
    # Errors
    "ErrorCode", "ConversionError", "ConversionException", "Result", "Ok", "Err", "EncodeResult",
    # Configuration
    "ToolxmlSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging", "configure_from_settings", "get_logger",
    # Models and schema
    "FileRef", "ReadFileArgs", "ReadFile", "SearchFiles", "ListFiles", "ListCodeDefinitionNames",
    "WriteToFile", "ApplyDiff", "FetchInstructions", "ToolUse", "SingleTool", "MultipleTools", "ToolsResponse",
    "TOOL_NAMES", "tools_json_schema", "response_format",
]
