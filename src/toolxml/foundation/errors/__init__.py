"""Unified error handling for toolxml.

- ErrorCode: PARSE_ERROR / SHAPE_ERROR / CONVERSION_ERROR taxonomy
- ConversionError/ConversionException: Structured errors and exceptions
- Result/Ok/Err: Railway-style error values threaded through encoders
"""

from .errors import ConversionError, ConversionException, ErrorCode
from .result import EncodeResult, Err, Ok, Result, collect_results, traverse

__all__ = [
    "ErrorCode", "ConversionError", "ConversionException",
    "Result", "Ok", "Err", "EncodeResult",
    "traverse", "collect_results",
]
