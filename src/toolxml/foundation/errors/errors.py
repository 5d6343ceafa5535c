"""Standardized error handling for conversions.

Provides error codes and structured error values for callers that log or
display conversion failures. Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ErrorCode(StrEnum):
    """Error taxonomy for conversion failures.

    PARSE_ERROR: input text is not well-formed JSON.
    SHAPE_ERROR: a required top-level field is missing or a discriminant is unknown.
    CONVERSION_ERROR: anything else raised while encoding.
    """
    PARSE_ERROR = "PARSE_ERROR"
    SHAPE_ERROR = "SHAPE_ERROR"
    CONVERSION_ERROR = "CONVERSION_ERROR"
    UNKNOWN = "UNKNOWN"


class ConversionError(BaseModel):
    """Structured error for a failed conversion.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error classification
        tool: Tool kind being encoded when the failure happened, if any
        details: Optional detailed information (e.g., validation report)
    """

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
        json_schema_extra={
            "title": "Conversion Error",
            "examples": [{"message": "Unknown tool type: run_shell", "code": "SHAPE_ERROR"}],
        },
    )

    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Error classification")
    tool: str | None = Field(default=None, description="Tool kind, when known")
    details: str | None = Field(default=None, repr=False)

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | Exception) -> str:
        """Accept Exception objects and extract message."""
        return str(v) if isinstance(v, Exception) else v

    @computed_field
    @property
    def is_input_error(self) -> bool:
        """Whether the failure is caused by the input rather than the converter."""
        return self.code in (ErrorCode.PARSE_ERROR, ErrorCode.SHAPE_ERROR)

    @classmethod
    def create(
        cls,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        *,
        tool: str | None = None,
        details: str | None = None,
    ) -> Self:
        """Factory method for construction."""
        return cls(message=message, code=code, tool=tool, details=details)

    @classmethod
    def from_exception(
        cls,
        exc: Exception,
        context: str = "",
        code: ErrorCode = ErrorCode.CONVERSION_ERROR,
        *,
        include_trace: bool = True,
    ) -> Self:
        """Create from an unexpected exception, keeping the traceback as details."""
        return cls(
            message=f"{context}: {exc}" if context else (str(exc) or type(exc).__name__),
            code=code,
            details=traceback.format_exc() if include_trace else None,
        )

    def render(self) -> str:
        """Format error for operator display."""
        where = f" ({self.tool})" if self.tool else ""
        parts = [f"**Conversion Error{where} [{self.code}]:** {self.message}"]
        if self.details:
            parts.append(f"\n\nDetails:\n```\n{self.details}\n```")
        return "".join(parts)

    __str__ = render


class ConversionException(Exception):
    """Exception wrapping a ConversionError for raising."""

    __slots__ = ("error",)

    def __init__(self, error: ConversionError) -> None:
        self.error = error
        super().__init__(error.message)

    @classmethod
    def create(cls, message: str, code: ErrorCode = ErrorCode.UNKNOWN, *, tool: str | None = None) -> Self:
        """Create conversion exception."""
        return cls(ConversionError(message=message, code=code, tool=tool))
