"""Entry line parsing: header, locale definitions and quoted values.

A data line has the shape::

    TEXT_ID => en="Hello, \\"friend\\"", tr="Merhaba"

Parsing is split into three small steps, each usable on its own:

    split_header()        TEXT_ID | en="Hello, \\"friend\\"", tr="Merhaba"
    split_locale_defs()   en="Hello, \\"friend\\""  |  tr="Merhaba"
    decode_locale_def()   ("en", 'Hello, "friend"')

Text after a closing quote is discarded; trailing_value_text() reports it
so the parser can warn.

Escape sequences inside quoted values:
    \\"  -> "        \\\\  -> \\
    \\n  -> LF       \\t  -> TAB
    \\x  -> x        (any other character: backslash dropped, lenient)

Python 3.13+. Zero external dependencies.
"""

from loctext.constants import (
    ESCAPE_CHAR,
    HEADER_SEPARATOR,
    LOCALE_ASSIGN,
    LOCALE_SEPARATOR,
    QUOTE_CHAR,
)
from loctext.diagnostics import ErrorTemplate, LocaleDefinitionError

__all__ = [
    "decode_locale_def",
    "decode_quoted_value",
    "split_header",
    "split_locale_defs",
    "trailing_value_text",
]

_ESCAPE_SEQUENCES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
}


def split_header(text: str) -> tuple[str, str] | None:
    """Split a data line on the first '=>' into (text_id, locale_tail).

    Both parts are stripped of surrounding whitespace.

    Args:
        text: Raw data line

    Returns:
        (text_id, locale_tail), or None if the line has no '=>'

    Example:
        >>> split_header('  KEY   =>  en="x"  ')
        ('KEY', 'en="x"')
        >>> split_header('no separator here') is None
        True
    """
    text_id, separator, tail = text.partition(HEADER_SEPARATOR)
    if not separator:
        return None
    return text_id.strip(), tail.strip()


def split_locale_defs(tail: str) -> list[str]:
    """Split the locale tail into 'locale="value"' segments.

    Commas separate segments only outside quoted values. Backslash escapes
    are honoured while scanning, so an escaped quote never closes a value.
    Empty and whitespace-only segments (trailing or doubled commas) are
    dropped.

    Args:
        tail: Text after '=>'

    Returns:
        Non-empty raw segments in source order

    Example:
        >>> split_locale_defs('en="a, b", tr="c",')
        ['en="a, b"', ' tr="c"']
    """
    segments: list[str] = []
    start = 0
    in_quotes = False
    in_escape = False

    for index, char in enumerate(tail):
        if in_escape:
            in_escape = False
        elif char == ESCAPE_CHAR:
            in_escape = True
        elif char == QUOTE_CHAR:
            in_quotes = not in_quotes
        elif char == LOCALE_SEPARATOR and not in_quotes:
            segments.append(tail[start:index])
            start = index + 1

    segments.append(tail[start:])
    return [segment for segment in segments if segment.strip()]


def _scan_quoted_value(raw: str) -> tuple[str, int]:
    """Decode raw and return (value, end).

    end is the index just past the closing quote, or len(raw) when the
    value is unterminated.
    """
    started = False
    in_escape = False
    buffer: list[str] = []

    for index, char in enumerate(raw):
        if char == ESCAPE_CHAR:
            if in_escape:
                buffer.append(ESCAPE_CHAR)
                in_escape = False
            else:
                in_escape = True
            continue

        if char == QUOTE_CHAR:
            if in_escape:
                buffer.append(QUOTE_CHAR)
                in_escape = False
                continue
            if not buffer and not started:
                started = True
                continue
            return "".join(buffer), index + 1

        if in_escape:
            # Unknown escapes keep the character and lose the backslash.
            buffer.append(_ESCAPE_SEQUENCES.get(char, char))
            in_escape = False
            continue

        buffer.append(char)

    return "".join(buffer), len(raw)


def decode_quoted_value(raw: str) -> str:
    """Decode one quoted, escaped value.

    Single left-to-right scan. The first unescaped quote seen while nothing
    has been decoded yet opens the value; the next unescaped quote closes it
    and anything after it is ignored. A missing closing quote is tolerated:
    whatever was decoded up to the end is returned.

    Args:
        raw: Value text after 'locale=', surrounding whitespace stripped

    Returns:
        Decoded value

    Example:
        >>> decode_quoted_value(r'"a\\"b\\\\c\\nd\\te"')
        'a"b\\\\c\\nd\\te'
    """
    return _scan_quoted_value(raw)[0]


def decode_locale_def(segment: str) -> tuple[str, str]:
    """Decode one 'locale="value"' segment into (locale, value).

    Args:
        segment: Raw segment produced by split_locale_defs()

    Returns:
        (locale_code, decoded_value)

    Raises:
        LocaleDefinitionError: If the segment has no '=', the locale code is
            empty, or the value contains no quote character at all.
    """
    locale, separator, raw_value = segment.partition(LOCALE_ASSIGN)
    if not separator:
        raise LocaleDefinitionError(ErrorTemplate.missing_locale_assign(segment.strip()))

    locale = locale.strip()
    raw_value = raw_value.strip()

    if not locale:
        raise LocaleDefinitionError(ErrorTemplate.empty_locale_code(segment.strip()))
    if QUOTE_CHAR not in raw_value:
        raise LocaleDefinitionError(ErrorTemplate.value_not_quoted(locale))

    return locale, decode_quoted_value(raw_value)


def trailing_value_text(segment: str) -> str:
    """Return the text after a segment's closing quote, stripped.

    The decoder discards this text. Non-empty output usually means an
    unescaped quote inside the value cut it short, taking any following
    locale definitions with it.

    Example:
        >>> trailing_value_text('en="a"b", tr="c"')
        'b", tr="c"'
        >>> trailing_value_text('en="unterminated')
        ''
    """
    raw_value = segment.partition(LOCALE_ASSIGN)[2].strip()
    _, end = _scan_quoted_value(raw_value)
    return raw_value[end:].strip()
