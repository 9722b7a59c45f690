"""Hypothesis strategies for text records, values and pragma tables.

Event-Emitting Strategies (HypoFuzz-Optimized):
- escaped_values: Emits value_escapes=none|some|heavy
- text_records: Emits record_locales=N
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from loctext.syntax.records import TextRecord

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

# Locale codes seen in real tables: bare ISO 639-1 plus a few regional forms.
LOCALE_POOL = [
    "en", "tr", "de", "fr", "es", "it", "ja", "ko", "zh", "ru",
    "pt", "pt_BR", "en_US", "en_GB", "zh_Hans", "lv", "ar", "pl",
]

# Printable ASCII plus the four characters that need escaping.
VALUE_ALPHABET = "".join(chr(c) for c in range(0x20, 0x7F)) + "\n\t"

_ESCAPABLE = frozenset('"\\\n\t')

_ID_FIRST_CHARS = string.ascii_letters + "_"
_ID_REST_CHARS = string.ascii_letters + string.digits + "_.-"

_PRAGMA_CHARS = string.ascii_letters + string.digits + "_.-"


@st.composite
def text_ids(draw: DrawFn) -> str:
    """Generate identifiers like GREETING, menu.play, Title_2."""
    first = draw(st.sampled_from(_ID_FIRST_CHARS))
    rest = draw(st.text(alphabet=_ID_REST_CHARS, max_size=24))
    return first + rest


locale_codes = st.sampled_from(LOCALE_POOL)


@st.composite
def escaped_values(draw: DrawFn) -> str:
    """Generate values drawn from printable ASCII, quotes, backslashes, LF and TAB.

    Events emitted:
    - value_escapes=none|some|heavy
    """
    value = draw(st.text(alphabet=VALUE_ALPHABET, max_size=60))
    escapes = sum(1 for c in value if c in _ESCAPABLE)
    event(
        "value_escapes="
        + ("none" if escapes == 0 else "some" if escapes < 5 else "heavy")
    )
    return value


@st.composite
def text_records(draw: DrawFn, min_locales: int = 1, max_locales: int = 5) -> TextRecord:
    """Generate a record with unique locale codes in random order.

    Events emitted:
    - record_locales=N
    """
    locales = draw(
        st.lists(locale_codes, min_size=min_locales, max_size=max_locales, unique=True)
    )
    values = [draw(escaped_values()) for _ in locales]
    event(f"record_locales={len(locales)}")
    return TextRecord(draw(text_ids()), dict(zip(locales, values, strict=True)))


record_lists = st.lists(text_records(), max_size=12)

pragma_tokens = st.text(alphabet=_PRAGMA_CHARS, min_size=1, max_size=16)

pragma_tables = st.dictionaries(pragma_tokens, pragma_tokens, max_size=4)
