"""Validation utilities for localization text.

Python 3.13+.
"""

from loctext.validation.resource import validate_text

__all__ = [
    "validate_text",
]
