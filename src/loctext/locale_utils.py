"""Locale utilities backed by Babel.

Locale codes in the text format are free-form strings matched exactly by the
resolver. These helpers sit at the edges: detecting the process locale,
reducing it to the short language code the format customarily stores, and
checking whether a stored code is a locale Babel knows.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "is_known_locale",
    "language_code",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel recognizes locale_code.

    Example:
        >>> is_known_locale("tr")
        True
        >>> is_known_locale("xx_NOPE")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    if not locale_code:
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def language_code(locale_code: str) -> str:
    """Reduce a locale code to its language subtag.

    Uses Babel when the code is known; otherwise falls back to the text
    before the first '_' or '-', lowercased.

    Example:
        >>> language_code("tr_TR")
        'tr'
        >>> language_code("pt-BR")
        'pt'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        return get_babel_locale(locale_code).language
    except (UnknownLocaleError, ValueError, TypeError):
        return normalize_locale(locale_code).split("_")[0].lower()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            if "." in system_locale:
                system_locale = system_locale.split(".")[0]
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"
