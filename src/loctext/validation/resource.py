"""Localization text validation.

Provides standalone validation for text sources without building a
TextTable. Useful for CI pipelines and linters that should report every
problem in a file instead of stopping at the first one.

Architecture:
    - validate_text(): Main entry point, orchestrates validation passes
    - _convert_parse_warnings(): Pass 1 - Parser diagnostics to errors/warnings
    - _check_duplicate_ids(): Pass 2 - Ids defined more than once
    - _check_locales(): Pass 3 - Unknown locale codes, missing default locale

Python 3.13+.
"""

import logging
from collections import Counter

from loctext.constants import DEFAULT_LOCALE
from loctext.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    TextParseError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from loctext.locale_utils import is_known_locale
from loctext.syntax.parser import TextParser
from loctext.syntax.records import TextRecord

__all__ = ["validate_text"]

logger = logging.getLogger(__name__)

# Parser diagnostics that do not drop any data are reported as warnings.
_NON_DESTRUCTIVE_CODES: dict[DiagnosticCode, str] = {
    DiagnosticCode.DUPLICATE_LOCALE: "duplicate-locale",
    DiagnosticCode.DUPLICATE_PRAGMA: "duplicate-pragma",
}


def _convert_parse_warnings(
    diagnostics: tuple[Diagnostic, ...],
) -> tuple[list[ValidationError], list[ValidationWarning]]:
    """Split parser diagnostics into skipped-line errors and plain warnings."""
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []

    for diagnostic in diagnostics:
        code = _NON_DESTRUCTIVE_CODES.get(diagnostic.code)
        if code is not None:
            warnings.append(
                ValidationWarning(
                    code=code,
                    message=diagnostic.message,
                    context=diagnostic.text_id,
                    line=diagnostic.line,
                )
            )
            continue
        errors.append(
            ValidationError(
                code="parse-error",
                message=diagnostic.message,
                content=diagnostic.source_line or "",
                line=diagnostic.line,
                column=diagnostic.column,
            )
        )

    return errors, warnings


def _check_duplicate_ids(records: tuple[TextRecord, ...]) -> list[ValidationWarning]:
    """Report every id that occurs more than once."""
    counts = Counter(record.id for record in records)
    return [
        ValidationWarning(
            code="duplicate-id",
            message=f"Text id '{text_id}' is defined {count} times",
            context=text_id,
        )
        for text_id, count in counts.items()
        if count > 1
    ]


def _check_locales(
    records: tuple[TextRecord, ...], default_locale: str
) -> list[ValidationWarning]:
    """Report unknown locale codes and records missing the default locale."""
    warnings: list[ValidationWarning] = []

    usage = Counter(locale for record in records for locale in record.locales)
    for locale, count in usage.items():
        if not is_known_locale(locale):
            warnings.append(
                ValidationWarning(
                    code="unknown-locale",
                    message=f"Locale code '{locale}' is not a known locale ({count} use(s))",
                    context=locale,
                )
            )

    for record in records:
        if default_locale not in record.locales:
            warnings.append(
                ValidationWarning(
                    code="missing-default-locale",
                    message=f"Text id '{record.id}' has no '{default_locale}' value",
                    context=record.id,
                )
            )

    return warnings


def validate_text(
    source: str,
    *,
    parser: TextParser | None = None,
    default_locale: str = DEFAULT_LOCALE,
) -> ValidationResult:
    """Validate localization source text.

    Never raises for format problems: a fatal parse error becomes a single
    "critical-parse-error" entry.

    Args:
        source: Localization source text
        parser: Configured parser (default: TextParser())
        default_locale: Locale every record is expected to define

    Returns:
        ValidationResult with parse errors and table warnings

    Example:
        >>> result = validate_text('A => en="a"\\nA => en="b"')
        >>> [w.code for w in result.warnings]
        ['duplicate-id']
    """
    if parser is None:
        parser = TextParser()

    try:
        result = parser.parse(source)
    except TextParseError as e:
        logger.error("Critical validation error: %s", e.reason)
        error = ValidationError(
            code="critical-parse-error",
            message=e.reason,
            content=e.line_text,
            line=e.line,
            column=e.column,
        )
        return ValidationResult(errors=(error,), warnings=())

    errors, parse_warnings = _convert_parse_warnings(result.warnings)
    warnings = (
        parse_warnings
        + _check_duplicate_ids(result.records)
        + _check_locales(result.records, default_locale)
    )

    logger.debug("Validated text: %d errors, %d warnings", len(errors), len(warnings))

    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
