"""Locale switching and message translation."""

from .locale import (
    available_locales,
    current_locale,
    default_locale,
    resolve_locale,
    use_locale,
)
from .translator import load_catalog, t, translate

__all__ = [
    "available_locales",
    "current_locale",
    "default_locale",
    "resolve_locale",
    "use_locale",
    "load_catalog",
    "t",
    "translate",
]
