"""Request-scoped active locale.

The active locale lives in a ContextVar so concurrent requests never observe
each other's locale. ``use_locale`` is the only way code should switch it: the
previous value is restored with the saved token on every exit path.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from loguru import logger

from src.storefront.core.errors import InvalidLocaleError
from src.storefront.runtime.context import get_config

_active_locale: ContextVar[str | None] = ContextVar("active_locale", default=None)


def default_locale() -> str:
    return get_config().i18n.default_locale


def current_locale() -> str:
    """Return the active locale, falling back to the configured default."""
    return _active_locale.get() or default_locale()


def available_locales() -> list[str]:
    return list(get_config().i18n.available_locales)


def resolve_locale(requested: str | None) -> str:
    """Pick the locale a request should run under.

    The explicit ``requested`` value wins when present; otherwise the
    process-wide default applies.

    Raises:
        InvalidLocaleError: ``requested`` is not an available locale and
            enforcement is enabled.
    """
    if not requested:
        return default_locale()

    i18n = get_config().i18n
    if i18n.enforce_available_locales and requested not in i18n.available_locales:
        raise InvalidLocaleError(requested)
    return requested


@contextmanager
def use_locale(locale: str) -> Iterator[str]:
    """Make ``locale`` active for the duration of the block."""
    token = _active_locale.set(locale)
    logger.debug("Switched locale to {}", locale)
    try:
        yield locale
    finally:
        _active_locale.reset(token)
