"""Diagnostic system for loctext errors.

Provides structured error diagnostics with codes, line/column spans and hints.
Fatal problems are raised as exceptions carrying a Diagnostic; recoverable
ones are returned as warning-severity Diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DuplicateTextIdError,
    LocaleDefinitionError,
    LocTextError,
    TextParseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateTextIdError",
    "ErrorTemplate",
    "LocTextError",
    "LocaleDefinitionError",
    "OutputFormat",
    "SourceSpan",
    "TextParseError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
