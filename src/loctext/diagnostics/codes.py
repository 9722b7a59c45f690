"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (text table, unknown ids)
        2000-2999: Resolution notices (locale fallback)
        3000-3999: Syntax errors and warnings (parser)
        5000-5999: Validation warnings (linter-style checks)
    """

    # Lookup errors (1000-1999)
    TEXT_NOT_FOUND = 1001
    DUPLICATE_TEXT_ID = 1002

    # Resolution notices (2000-2999)
    LOCALE_FALLBACK_FIRST = 2001

    # Syntax errors (3000-3999)
    # 3001-3002 are fatal by default; 3003-3010 are line-local and recoverable.
    MALFORMED_PRAGMA = 3001
    MISSING_HEADER = 3002
    EMPTY_TEXT_ID = 3003
    MISSING_LOCALE_ASSIGN = 3004
    VALUE_NOT_QUOTED = 3005
    EMPTY_LOCALE_CODE = 3006
    NO_LOCALE_DATA = 3007
    DUPLICATE_LOCALE = 3008
    DUPLICATE_PRAGMA = 3009
    TRAILING_VALUE_TEXT = 3010

    # Validation warnings (5000-5999)
    VALIDATION_CRITICAL_PARSE_ERROR = 5001
    VALIDATION_PARSE_ERROR = 5002
    VALIDATION_DUPLICATE_ID = 5003
    VALIDATION_UNKNOWN_LOCALE = 5004
    VALIDATION_MISSING_DEFAULT_LOCALE = 5005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Attributes:
        line: Line number (1-indexed, counts blank and comment lines)
        column: Column number (1-indexed, in characters)
    """

    line: int
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If line or column is less than 1 (both are 1-indexed).
        """
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Used both for fatal parse errors (carried by TextParseError) and for
    recoverable warnings (returned in ParseResult.warnings).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for non-syntax diagnostics)
        hint: Suggestion for fixing the problem
        source_line: Raw text of the offending line
        text_id: Text identifier involved, when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_line: str | None = None
    text_id: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def line(self) -> int | None:
        """1-based line number, or None when the diagnostic has no span."""
        return self.span.line if self.span is not None else None

    @property
    def column(self) -> int | None:
        """1-based column number, or None when the diagnostic has no span."""
        return self.span.column if self.span is not None else None

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MALFORMED_PRAGMA]: Invalid pragma: expected 2 tokens, got 1
              --> line 2, column 1
               |
               | #pragma OnlyKey
              = help: Write pragmas as '#pragma <key> <value>'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
