"""loctext - parser, serializer and resolver for localization text tables.

Reads and writes a flat text format storing, for each text id, one value
per locale::

    ; comment
    #pragma ReplaceTMPInvalidChars true
    GREETING => en="Hello, \\"friend\\"", tr="Merhaba"

Public API:
    TextRecord - One entry: id plus ordered locale -> value mapping
    TextParser - Configurable parser returning records, pragmas and warnings
    TextTable - Id-unique collection with lookup and save support
    parse_text - Parse source into (records, pragmas)
    serialize_text - Serialize records (and pragmas) back to source
    resolve - Pick a record's text for a locale with fallbacks
    ResolutionContext - Explicit current/default locale pair

Exceptions:
    LocTextError - Base exception class
    TextParseError - Fatal format errors (line and column attached)
    DuplicateTextIdError - Id collision inside a TextTable

Submodules:
    loctext.syntax - Line tokenizer, parser, serializer, record model
    loctext.runtime - Locale resolver and locale providers
    loctext.localization - TextTable and resource loaders
    loctext.validation - Linter-style validation of sources
    loctext.diagnostics - Error types, codes and formatting
"""

from .diagnostics import DuplicateTextIdError, LocTextError, TextParseError
from .localization import TextTable
from .runtime import ResolutionContext, resolve
from .syntax import ParseResult, PragmaTable, TextParser, TextRecord, parse_text
from .syntax import serialize as serialize_text

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("loctext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Encoding expected for stored text files
__recommended_encoding__ = "UTF-8"

__all__ = [
    "DuplicateTextIdError",
    "LocTextError",
    "ParseResult",
    "PragmaTable",
    "ResolutionContext",
    "TextParseError",
    "TextParser",
    "TextRecord",
    "TextTable",
    "__recommended_encoding__",
    "__version__",
    "parse_text",
    "resolve",
    "serialize_text",
]
