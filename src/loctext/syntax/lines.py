"""Line splitting and directive recognition.

First stage of the parse pipeline: cut the source into numbered lines and
classify each one as blank, comment, pragma directive or data before any
entry parsing happens.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter, the
      trailing \\r is whitespace and is trimmed with the tokens)
    - CR-only (Classic Mac, \\r): NOT supported

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from typing import NamedTuple

from loctext.constants import COMMENT_CHAR, LINE_DELIMITER, PRAGMA_MARKER
from loctext.diagnostics import ErrorTemplate, TextParseError
from loctext.enums import LineKind

__all__ = ["SourceLine", "classify_line", "iter_lines", "marker_column", "parse_pragma"]


class SourceLine(NamedTuple):
    """A raw line and its 1-based position in the source."""

    number: int
    text: str


def iter_lines(source: str) -> Iterator[SourceLine]:
    """Yield the non-blank lines of source with their 1-based numbers.

    Blank lines are skipped but still counted, so numbers always match the
    position in the original input.

    Example:
        >>> list(iter_lines("a\\n\\n  \\nb"))
        [SourceLine(number=1, text='a'), SourceLine(number=4, text='b')]
    """
    for index, text in enumerate(source.split(LINE_DELIMITER)):
        if text.strip():
            yield SourceLine(index + 1, text)


def classify_line(text: str) -> LineKind:
    """Classify a raw line by its first non-whitespace characters.

    Args:
        text: Raw line text (may have leading whitespace)

    Returns:
        LineKind.BLANK, COMMENT, PRAGMA or DATA

    Note:
        A '#' that is not followed by 'pragma' does not start a directive;
        such a line is treated as data.
    """
    stripped = text.lstrip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith(COMMENT_CHAR):
        return LineKind.COMMENT
    if stripped.startswith(PRAGMA_MARKER):
        return LineKind.PRAGMA
    return LineKind.DATA


def marker_column(text: str) -> int:
    """1-based column of the first non-whitespace character."""
    return len(text) - len(text.lstrip()) + 1


def parse_pragma(line: SourceLine) -> tuple[str, str]:
    """Extract key and value from a '#pragma <key> <value>' line.

    Key and value are separated by any run of whitespace (space, tab,
    vertical tab). Exactly two tokens must follow the 'pragma' word.

    Args:
        line: A line classified as LineKind.PRAGMA

    Returns:
        (key, value) tuple

    Raises:
        TextParseError: If the token count is not 2 or '#pragma' is glued
            to the following text. Carries the line number and the column
            of the '#' marker.

    Example:
        >>> parse_pragma(SourceLine(1, "#pragma ReplaceTMPInvalidChars true"))
        ('ReplaceTMPInvalidChars', 'true')
    """
    column = marker_column(line.text)
    tail = line.text.lstrip()[len(PRAGMA_MARKER) :]

    if tail and not tail[0].isspace():
        raise TextParseError(ErrorTemplate.glued_pragma(line.number, column, line.text))

    tokens = tail.split()
    if len(tokens) != 2:
        raise TextParseError(
            ErrorTemplate.malformed_pragma(line.number, column, line.text, len(tokens))
        )

    return tokens[0], tokens[1]
