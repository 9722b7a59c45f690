"""Enumerations for loctext type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LineKind(StrEnum):
    """Classification of one raw source line.

    StrEnum provides automatic string conversion: str(LineKind.DATA) == "data"
    """

    BLANK = "blank"
    """Empty or whitespace-only line (ignored)"""

    COMMENT = "comment"
    """Comment line: ; anything"""

    PRAGMA = "pragma"
    """Directive line: #pragma key value"""

    DATA = "data"
    """Entry line: ID => en="value", tr="deger" """


class MissingHeaderPolicy(StrEnum):
    """What the parser does with a data line that has no '=>' separator."""

    SKIP = "skip"
    """Log a warning, drop the line, keep parsing (default)"""

    RAISE = "raise"
    """Abort the whole parse with TextParseError"""


class DuplicatePragmaPolicy(StrEnum):
    """What the parser does when a pragma key is defined twice."""

    OVERWRITE = "overwrite"
    """Last definition wins, a warning is recorded (default)"""

    RAISE = "raise"
    """Abort the whole parse with TextParseError"""


__all__ = [
    "DuplicatePragmaPolicy",
    "LineKind",
    "MissingHeaderPolicy",
]
