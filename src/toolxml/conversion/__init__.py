"""Conversion of structured tool responses into tool markup.

- escape_xml: Markup-significant character escaping
- encode_*: One pure encoder per tool kind
- dispatch/dispatch_many: Untrusted tool mappings -> Result[str, ConversionError]
- convert: Full response -> ConversionResult (never raises)
- validate_structure: Shallow pre-flight shape check
- convert_many: Independent batch conversion
"""

from .batch import BatchResult, convert_many
from .converter import ConversionResult, convert, debug_structure, load_input
from .dispatch import TOOL_SEPARATOR, dispatch, dispatch_many, encode_tool, encode_tools, parse_tool
from .encoders import (
    encode_apply_diff,
    encode_fetch_instructions,
    encode_list_code_definition_names,
    encode_list_files,
    encode_read_file,
    encode_search_files,
    encode_write_to_file,
)
from .escape import escape_xml
from .inputs import JSON_TEXT, RawInput, is_absent
from .validate import ValidationReport, validate_structure

__all__ = [
    # Orchestration
    "convert", "ConversionResult", "load_input", "debug_structure",
    # Inputs
    "RawInput", "JSON_TEXT", "is_absent",
    # Batch
    "convert_many", "BatchResult",
    # Validation
    "validate_structure", "ValidationReport",
    # Dispatch
    "dispatch", "dispatch_many", "parse_tool", "encode_tool", "encode_tools", "TOOL_SEPARATOR",
    # Encoders
    "encode_read_file", "encode_search_files", "encode_list_files", "encode_list_code_definition_names",
    "encode_write_to_file", "encode_apply_diff", "encode_fetch_instructions",
    "escape_xml",
]
