"""Runtime lookup of parsed text records.

Python 3.13+.
"""

from .resolver import LocaleProvider, ResolutionContext, SystemLocaleProvider, resolve

__all__ = [
    "LocaleProvider",
    "ResolutionContext",
    "SystemLocaleProvider",
    "resolve",
]
