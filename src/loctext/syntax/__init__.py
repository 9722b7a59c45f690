"""Localization text syntax package.

Provides the record model, line-level tokenizer, parser and serializer.
Separate from runtime so tooling (converters, linters) can use it without
the resolver.

Python 3.13+.
"""

from .entry import (
    decode_locale_def,
    decode_quoted_value,
    split_header,
    split_locale_defs,
    trailing_value_text,
)
from .lines import SourceLine, classify_line, iter_lines, parse_pragma
from .parser import TextParser
from .records import ParseResult, PragmaTable, TextRecord
from .serializer import SerializationValidationError, TextSerializer, escape_value, serialize

__all__ = [
    "ParseResult",
    "PragmaTable",
    "SerializationValidationError",
    "SourceLine",
    "TextParser",
    "TextRecord",
    "TextSerializer",
    "classify_line",
    "decode_locale_def",
    "decode_quoted_value",
    "escape_value",
    "iter_lines",
    "parse",
    "parse_pragma",
    "parse_text",
    "serialize",
    "split_header",
    "split_locale_defs",
    "trailing_value_text",
]


def parse(source: str) -> ParseResult:
    """Parse source with a default-configured TextParser.

    Args:
        source: Localization source text

    Returns:
        ParseResult with records, pragmas and warnings
    """
    return TextParser().parse(source)


def parse_text(source: str) -> tuple[list[TextRecord], PragmaTable]:
    """Parse source into (records, pragmas), discarding warnings.

    Warnings are still logged. Use TextParser.parse() to inspect them.

    Raises:
        TextParseError: On a fatal format error
    """
    result = parse(source)
    return list(result.records), dict(result.pragmas)
