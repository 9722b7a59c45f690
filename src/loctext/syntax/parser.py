"""Localization text parser.

Orchestrates the line pipeline and accumulates records::

    iter_lines -> classify_line -> parse_pragma            -> PragmaTable
                                -> split_header
                                   -> split_locale_defs
                                      -> decode_locale_def -> TextRecord

Error model:
    - Fatal (TextParseError, parse aborted): malformed pragma line; missing
      '=>' or duplicate pragma key when the policy is RAISE.
    - Line-local (warning Diagnostic, line skipped): missing '=>' under the
      default SKIP policy, empty text id, undecodable locale definition,
      no locale data.
    - Line-local (warning Diagnostic, record kept): duplicate locale code,
      text after a closing quote (the rest of that segment is dropped).
    - Silent: unknown escapes, unterminated quoted values.

Security:
    Includes configurable input size limit to prevent unbounded memory
    allocation from extremely large sources.

Thread Safety:
    TextParser holds configuration only. All parse state is local to the
    parse() call, so one instance may be shared across threads.
"""

import logging

from loctext.constants import MAX_SOURCE_SIZE
from loctext.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    LocaleDefinitionError,
    TextParseError,
)
from loctext.enums import DuplicatePragmaPolicy, LineKind, MissingHeaderPolicy
from loctext.syntax.entry import (
    decode_locale_def,
    split_header,
    split_locale_defs,
    trailing_value_text,
)
from loctext.syntax.lines import SourceLine, classify_line, iter_lines, marker_column, parse_pragma
from loctext.syntax.records import ParseResult, PragmaTable, TextRecord

__all__ = ["TextParser"]

logger = logging.getLogger(__name__)


class TextParser:
    """Parser for the 'TEXT_ID => locale="value", ...' format.

    Attributes:
        missing_header: Policy for data lines without '=>' (default: SKIP)
        duplicate_pragma: Policy for repeated pragma keys (default: OVERWRITE)
        max_source_size: Maximum source size in characters (default: 10 MiB)

    Example:
        >>> parser = TextParser()
        >>> result = parser.parse('#pragma Mode strict\\nHELLO => en="Hello"')
        >>> result.records[0].locales
        {'en': 'Hello'}
        >>> result.pragmas
        {'Mode': 'strict'}
    """

    __slots__ = ("_duplicate_pragma", "_max_source_size", "_missing_header")

    def __init__(
        self,
        *,
        missing_header: MissingHeaderPolicy = MissingHeaderPolicy.SKIP,
        duplicate_pragma: DuplicatePragmaPolicy = DuplicatePragmaPolicy.OVERWRITE,
        max_source_size: int | None = None,
    ) -> None:
        """Initialize parser with error policies and size limit.

        Args:
            missing_header: SKIP logs and drops the line, RAISE aborts.
            duplicate_pragma: OVERWRITE keeps the last value, RAISE aborts.
            max_source_size: Maximum source size in characters.
                            Set to 0 to disable the limit (not recommended).
        """
        self._missing_header = MissingHeaderPolicy(missing_header)
        self._duplicate_pragma = DuplicatePragmaPolicy(duplicate_pragma)
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def missing_header(self) -> MissingHeaderPolicy:
        """Policy for data lines without '=>'."""
        return self._missing_header

    @property
    def duplicate_pragma(self) -> DuplicatePragmaPolicy:
        """Policy for repeated pragma keys."""
        return self._duplicate_pragma

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> ParseResult:
        """Parse source text into records and pragmas.

        Args:
            source: Entire localization source (newline-delimited)

        Returns:
            ParseResult with records in file order, the pragma table and
            any recoverable warnings.

        Raises:
            ValueError: If source exceeds max_source_size
            TextParseError: On a fatal format error
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in TextParser constructor to increase limit."
            )
            raise ValueError(msg)

        records: list[TextRecord] = []
        pragmas: PragmaTable = {}
        warnings: list[Diagnostic] = []

        for line in iter_lines(source):
            match classify_line(line.text):
                case LineKind.COMMENT | LineKind.BLANK:
                    continue
                case LineKind.PRAGMA:
                    self._add_pragma(line, pragmas, warnings)
                case LineKind.DATA:
                    record = self._parse_entry(line, warnings)
                    if record is not None:
                        records.append(record)

        logger.debug(
            "Parsed %d record(s), %d pragma(s), %d warning(s)",
            len(records),
            len(pragmas),
            len(warnings),
        )
        return ParseResult(records=tuple(records), pragmas=pragmas, warnings=tuple(warnings))

    def _add_pragma(
        self, line: SourceLine, pragmas: PragmaTable, warnings: list[Diagnostic]
    ) -> None:
        """Parse a directive line into the pragma table."""
        key, value = parse_pragma(line)

        if key in pragmas:
            fatal = self._duplicate_pragma is DuplicatePragmaPolicy.RAISE
            diagnostic = ErrorTemplate.duplicate_pragma(
                line.number, marker_column(line.text), line.text, key, fatal=fatal
            )
            if fatal:
                raise TextParseError(diagnostic)
            self._warn(diagnostic, warnings)

        pragmas[key] = value

    def _parse_entry(self, line: SourceLine, warnings: list[Diagnostic]) -> TextRecord | None:
        """Parse one data line; return None if the line is skipped."""
        header = split_header(line.text)
        if header is None:
            fatal = self._missing_header is MissingHeaderPolicy.RAISE
            diagnostic = ErrorTemplate.missing_header(line.number, line.text, fatal=fatal)
            if fatal:
                raise TextParseError(diagnostic)
            self._warn(diagnostic, warnings)
            return None

        text_id, tail = header
        if not text_id:
            self._warn(ErrorTemplate.empty_text_id(line.number, line.text), warnings)
            return None

        locales: dict[str, str] = {}
        for segment in split_locale_defs(tail):
            try:
                locale, value = decode_locale_def(segment)
            except LocaleDefinitionError as e:
                assert e.diagnostic is not None  # Type narrowing: always built from a template
                self._warn(
                    ErrorTemplate.in_line(e.diagnostic, line.number, line.text, text_id),
                    warnings,
                )
                return None

            trailing = trailing_value_text(segment)
            if trailing:
                self._warn(
                    ErrorTemplate.trailing_value_text(
                        line.number, line.text, text_id, locale, trailing
                    ),
                    warnings,
                )

            if locale in locales:
                self._warn(
                    ErrorTemplate.duplicate_locale(line.number, line.text, text_id, locale),
                    warnings,
                )
            locales[locale] = value

        if not locales:
            self._warn(ErrorTemplate.no_locale_data(line.number, line.text, text_id), warnings)
            return None

        return TextRecord(text_id, locales)

    @staticmethod
    def _warn(diagnostic: Diagnostic, warnings: list[Diagnostic]) -> None:
        """Record a recoverable problem and log it."""
        logger.warning("Line %s: %s", diagnostic.line, diagnostic.message)
        warnings.append(diagnostic)
