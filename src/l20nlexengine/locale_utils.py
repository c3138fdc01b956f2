"""Locale utilities for BCP-47 to POSIX conversion and CLDR plural data.

Centralizes locale format normalization and the cached Babel lookups used
by resource validation. Babel is an optional dependency; it is imported
lazily so that parsing never requires it.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "BabelImportError",
    "get_babel_locale",
    "get_plural_categories",
    "normalize_locale",
]

# CLDR's implicit fallback category; Babel omits it from PluralRule.tags.
_DEFAULT_PLURAL_CATEGORY = "other"


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides installation guidance to users.
    """

    def __init__(self) -> None:
        super().__init__(
            "Babel is required for locale-aware validation. "
            "Install with: pip install l20nlexengine[babel]"
        )


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
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
        BabelImportError: If Babel is not installed

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    try:
        from babel import Locale  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def get_plural_categories(locale_code: str) -> frozenset[str]:
    """Get the CLDR plural categories a locale distinguishes.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Category names, always including "other"

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
        BabelImportError: If Babel is not installed

    Examples:
        >>> sorted(get_plural_categories("en"))
        ['one', 'other']
        >>> sorted(get_plural_categories("ja"))
        ['other']
    """
    plural_rule = get_babel_locale(locale_code).plural_form
    return frozenset(plural_rule.tags) | {_DEFAULT_PLURAL_CATEGORY}
