"""Hypothesis strategies for loctext property-based testing.

Usage:
    from tests.strategies import text_records, escaped_values, pragma_tables

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - escaped_values, text_records
"""

from .records import (
    LOCALE_POOL,
    VALUE_ALPHABET,
    escaped_values,
    locale_codes,
    pragma_tables,
    pragma_tokens,
    record_lists,
    text_ids,
    text_records,
)

__all__ = [
    "LOCALE_POOL",
    "VALUE_ALPHABET",
    "escaped_values",
    "locale_codes",
    "pragma_tables",
    "pragma_tokens",
    "record_lists",
    "text_ids",
    "text_records",
]
