"""Validation result types for localization text sources.

Consolidates feedback from validate_text():
- Parse-level: fatal and line-local parse problems (errors)
- Table-level: duplicate ids, unknown or missing locales (warnings)

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# Maximum content length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured syntax error from text validation.

    Attributes:
        code: Error code (e.g., "parse-error", "critical-parse-error")
        message: Human-readable error message
        content: The offending source line
        line: Line number where error occurred (1-indexed, optional)
        column: Column number where error occurred (1-indexed, optional)

    Security Note:
        The `content` field holds raw localized text. Use format(sanitize=True)
        to truncate or redact it before logging in shared environments.
    """

    code: str
    message: str
    content: str
    line: int | None = None
    column: int | None = None

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
    ) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate content to prevent information leakage.
            redact_content: If True (and sanitize=True), completely redact
                           content instead of truncating.

        Returns:
            Formatted error string with optional content sanitization.
        """
        if sanitize:
            if redact_content:
                content_display = "[content redacted]"
            elif len(self.content) > _SANITIZE_MAX_CONTENT_LENGTH:
                content_display = self.content[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."
            else:
                content_display = self.content
        else:
            content_display = self.content

        location = ""
        if self.line is not None:
            location = f" at line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"

        return f"[{self.code}]{location}: {self.message} (content: {content_display!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured semantic warning from text validation.

    Attributes:
        code: Warning code (e.g., "duplicate-id", "unknown-locale")
        message: Human-readable warning message
        context: Additional context (e.g., the duplicate ID name)
        line: Line number where the entry starts (1-indexed, optional)
    """

    code: str
    message: str
    context: str | None = None
    line: int | None = None

    def format(self) -> str:
        """Format warning as a single human-readable line."""
        location = f" at line {self.line}" if self.line is not None else ""
        context = f" ({self.context})" if self.context else ""
        return f"[{self.code}]{location}: {self.message}{context}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Unified validation result.

    Immutable result object for thread-safe validation feedback.
    Warnings do not affect validity.

    Attributes:
        errors: Parse errors (fatal or line-local)
        warnings: Table-level warnings

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
        include_warnings: bool = True,
    ) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate error content.
            redact_content: If True (and sanitize=True), redact error content.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                lines.append(f"  {error.format(sanitize=sanitize, redact_content=redact_content)}")

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                lines.append(f"  {warning.format()}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
