"""Locale resolution for parsed text records.

Fallback chain, applied in order:
    1. requested locale, if the record has it
    2. default locale, if the record has it
    3. first locale in insertion order (logged as a last-resort fallback)
    4. "" for a record with no locales

The resolver keeps no state. The "current locale" lives in an explicit
ResolutionContext owned by the caller; nothing here reads or writes
process-wide settings.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from loctext.constants import DEFAULT_LOCALE
from loctext.diagnostics import ErrorTemplate
from loctext.locale_utils import get_system_locale, language_code

if TYPE_CHECKING:
    from loctext.syntax.records import TextRecord

__all__ = [
    "LocaleProvider",
    "ResolutionContext",
    "SystemLocaleProvider",
    "resolve",
]

logger = logging.getLogger(__name__)


def resolve(
    record: TextRecord,
    requested_locale: str,
    default_locale: str = DEFAULT_LOCALE,
) -> str:
    """Return the record's text for requested_locale, with fallbacks.

    Pure and total: never raises for any record.

    Args:
        record: Parsed or hand-built record
        requested_locale: Locale code to look up (exact match)
        default_locale: Locale code tried second (default: "en")

    Returns:
        Resolved text, or "" if the record has no locales

    Example:
        >>> resolve(TextRecord("HI", {"tr": "merhaba"}), "en")
        'merhaba'
    """
    locales = record.locales
    if not locales:
        return ""
    if requested_locale in locales:
        return locales[requested_locale]
    if default_locale in locales:
        return locales[default_locale]

    first_locale, first_value = next(iter(locales.items()))
    diagnostic = ErrorTemplate.locale_fallback_first(
        record.id, requested_locale, default_locale, first_locale
    )
    logger.warning("%s", diagnostic.message)
    return first_value


class LocaleProvider(Protocol):
    """Supplies the locale code the host is currently using.

    Example:
        >>> class Fixed:
        ...     def current_locale(self) -> str:
        ...         return "tr"
        >>> ResolutionContext.from_provider(Fixed()).current_locale
        'tr'
    """

    def current_locale(self) -> str:
        """Return the current locale code (e.g., 'en', 'tr')."""
        ...


class SystemLocaleProvider:
    """LocaleProvider backed by the operating system locale.

    Reports only the language subtag ('tr_TR.UTF-8' -> 'tr'), which is what
    text files customarily use as locale keys.
    """

    __slots__ = ()

    def current_locale(self) -> str:
        """Detect the process locale and reduce it to its language code."""
        return language_code(get_system_locale())


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    """Explicit locale settings for resolving records.

    Immutable value object. Pass it where resolution happens instead of
    relying on global state; build a new one to switch locales.

    Attributes:
        current_locale: Locale requested first
        default_locale: Locale tried when current_locale is missing
    """

    current_locale: str
    default_locale: str = DEFAULT_LOCALE

    @classmethod
    def from_provider(
        cls, provider: LocaleProvider, default_locale: str = DEFAULT_LOCALE
    ) -> ResolutionContext:
        """Capture the provider's current locale into a new context."""
        return cls(current_locale=provider.current_locale(), default_locale=default_locale)

    def resolve(self, record: TextRecord) -> str:
        """Resolve record with this context's locales."""
        return resolve(record, self.current_locale, self.default_locale)
