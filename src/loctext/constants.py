"""Shared constants for loctext.

Single source of truth for the format's tokens and the library's limits.
Kept dependency-free so both the syntax and runtime packages can import it
without cycles.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Tokens
    "COMMENT_CHAR",
    "PRAGMA_CHAR",
    "PRAGMA_WORD",
    "PRAGMA_MARKER",
    "HEADER_SEPARATOR",
    "LOCALE_SEPARATOR",
    "LOCALE_ASSIGN",
    "QUOTE_CHAR",
    "ESCAPE_CHAR",
    "LINE_DELIMITER",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Fallback strings
    "FALLBACK_MISSING_TEXT",
]

# ============================================================================
# FORMAT TOKENS
# ============================================================================

COMMENT_CHAR: str = ";"
PRAGMA_CHAR: str = "#"
PRAGMA_WORD: str = "pragma"
PRAGMA_MARKER: str = PRAGMA_CHAR + PRAGMA_WORD
HEADER_SEPARATOR: str = "=>"
LOCALE_SEPARATOR: str = ","
LOCALE_ASSIGN: str = "="
QUOTE_CHAR: str = '"'
ESCAPE_CHAR: str = "\\"

# Only LF splits lines. A trailing CR from CRLF input is whitespace and is
# stripped wherever a token is trimmed.
LINE_DELIMITER: str = "\n"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Process-wide default locale used by the resolver when the caller does not
# pass one. Two-letter ISO 639-1 code, matching what the format stores.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source size in characters accepted by TextParser (10 MiB).
# 0 disables the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by TextTable.lookup() for an unknown text id: "{id} (no-locale)".
FALLBACK_MISSING_TEXT: str = "{id} (no-locale)"
