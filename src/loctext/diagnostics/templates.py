"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def malformed_pragma(
        line: int, column: int, source_line: str, token_count: int
    ) -> Diagnostic:
        """Pragma line does not have exactly two tokens after '#pragma'.

        Args:
            line: 1-based line number
            column: 1-based column of the '#' marker
            source_line: Raw line text
            token_count: Number of whitespace-separated tokens found

        Returns:
            Diagnostic for MALFORMED_PRAGMA
        """
        msg = f"Invalid pragma: expected 2 tokens after '#pragma', got {token_count}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_PRAGMA,
            message=msg,
            span=SourceSpan(line=line, column=column),
            hint="Write pragmas as '#pragma <key> <value>' with no spaces inside key or value",
            source_line=source_line,
        )

    @staticmethod
    def glued_pragma(line: int, column: int, source_line: str) -> Diagnostic:
        """'#pragma' is immediately followed by a non-whitespace character.

        Returns:
            Diagnostic for MALFORMED_PRAGMA
        """
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_PRAGMA,
            message="Invalid pragma: '#pragma' must be followed by whitespace",
            span=SourceSpan(line=line, column=column),
            hint="Separate the key from '#pragma' with a space or tab",
            source_line=source_line,
        )

    @staticmethod
    def missing_header(line: int, source_line: str, *, fatal: bool) -> Diagnostic:
        """Data line without the '=>' separator.

        Args:
            line: 1-based line number
            source_line: Raw line text
            fatal: True when the parser aborts on this error

        Returns:
            Diagnostic for MISSING_HEADER
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_HEADER,
            message="Missing '=>' between text id and locale definitions",
            span=SourceSpan(line=line),
            hint="Write entries as 'TEXT_ID => en=\"value\"'",
            source_line=source_line,
            severity="error" if fatal else "warning",
        )

    @staticmethod
    def empty_text_id(line: int, source_line: str) -> Diagnostic:
        """Header separator present but nothing before it."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_TEXT_ID,
            message="Empty text id before '=>'",
            span=SourceSpan(line=line),
            hint="Every entry needs an identifier to be looked up by",
            source_line=source_line,
            severity="warning",
        )

    @staticmethod
    def missing_locale_assign(segment: str) -> Diagnostic:
        """Locale definition segment without '='.

        Args:
            segment: The offending 'locale=value' segment

        Returns:
            Diagnostic for MISSING_LOCALE_ASSIGN
        """
        msg = f"Locale definition {segment!r} has no '='"
        return Diagnostic(
            code=DiagnosticCode.MISSING_LOCALE_ASSIGN,
            message=msg,
            hint="Write locale definitions as 'en=\"value\"'",
            severity="warning",
        )

    @staticmethod
    def value_not_quoted(locale: str) -> Diagnostic:
        """Locale value has no quote character at all."""
        msg = f"Value for locale '{locale}' is not properly quoted"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_QUOTED,
            message=msg,
            hint='Surround the value with double quotes: en="value"',
            severity="warning",
        )

    @staticmethod
    def empty_locale_code(segment: str) -> Diagnostic:
        """Nothing before '=' in a locale definition."""
        msg = f"Locale definition {segment!r} has an empty locale code"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LOCALE_CODE,
            message=msg,
            severity="warning",
        )

    @staticmethod
    def in_line(diagnostic: Diagnostic, line: int, source_line: str, text_id: str) -> Diagnostic:
        """Attach line context to a segment-level diagnostic.

        Args:
            diagnostic: Diagnostic produced while decoding one segment
            line: 1-based line number
            source_line: Raw line text
            text_id: Identifier of the entry being parsed

        Returns:
            Copy of the diagnostic with span, source line and text id set
        """
        return Diagnostic(
            code=diagnostic.code,
            message=f"{diagnostic.message} (text id '{text_id}')",
            span=SourceSpan(line=line),
            hint=diagnostic.hint,
            source_line=source_line,
            text_id=text_id,
            severity="warning",
        )

    @staticmethod
    def no_locale_data(line: int, source_line: str, text_id: str) -> Diagnostic:
        """Header parsed but zero locale definitions decoded."""
        msg = f"No locale data found for text id '{text_id}'"
        return Diagnostic(
            code=DiagnosticCode.NO_LOCALE_DATA,
            message=msg,
            span=SourceSpan(line=line),
            source_line=source_line,
            text_id=text_id,
            severity="warning",
        )

    @staticmethod
    def duplicate_locale(line: int, source_line: str, text_id: str, locale: str) -> Diagnostic:
        """Same locale code defined twice on one line."""
        msg = f"Locale '{locale}' defined more than once for text id '{text_id}'; last value wins"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LOCALE,
            message=msg,
            span=SourceSpan(line=line),
            source_line=source_line,
            text_id=text_id,
            severity="warning",
        )

    @staticmethod
    def trailing_value_text(
        line: int, source_line: str, text_id: str, locale: str, trailing: str
    ) -> Diagnostic:
        """Text after the closing quote of a value was dropped."""
        msg = (
            f"Text after the closing quote of locale '{locale}' was ignored: {trailing!r} "
            f"(text id '{text_id}')"
        )
        return Diagnostic(
            code=DiagnosticCode.TRAILING_VALUE_TEXT,
            message=msg,
            span=SourceSpan(line=line),
            hint='Escape quotes inside values as \\" and close every value before the next comma',
            source_line=source_line,
            text_id=text_id,
            severity="warning",
        )

    @staticmethod
    def duplicate_pragma(
        line: int, column: int, source_line: str, key: str, *, fatal: bool
    ) -> Diagnostic:
        """Pragma key already defined earlier in the same source."""
        msg = f"Pragma '{key}' defined more than once"
        if not fatal:
            msg += "; last value wins"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_PRAGMA,
            message=msg,
            span=SourceSpan(line=line, column=column),
            source_line=source_line,
            severity="error" if fatal else "warning",
        )

    @staticmethod
    def duplicate_text_id(text_id: str) -> Diagnostic:
        """Text id already present in a TextTable."""
        msg = f"Text id '{text_id}' is not unique"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_TEXT_ID,
            message=msg,
            hint="Rename one of the entries or remove the existing one first",
            text_id=text_id,
        )

    @staticmethod
    def text_not_found(text_id: str) -> Diagnostic:
        """Lookup of an unknown text id."""
        msg = f"Text id '{text_id}' not found"
        return Diagnostic(
            code=DiagnosticCode.TEXT_NOT_FOUND,
            message=msg,
            text_id=text_id,
            severity="warning",
        )

    @staticmethod
    def locale_fallback_first(text_id: str, requested: str, default: str, used: str) -> Diagnostic:
        """Neither requested nor default locale exists; first entry used."""
        msg = (
            f"Text id '{text_id}' has neither '{requested}' nor default '{default}'; "
            f"falling back to first locale '{used}'"
        )
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FALLBACK_FIRST,
            message=msg,
            text_id=text_id,
            severity="warning",
        )
