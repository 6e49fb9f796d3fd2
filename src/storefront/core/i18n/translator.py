"""YAML message catalogs and lookup in the active locale."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from src.storefront.core.i18n.locale import current_locale, default_locale

LOCALES_DIR = Path(__file__).parent / "locales"


@lru_cache(maxsize=32)
def load_catalog(locale: str) -> dict[str, Any]:
    """Load the catalog for ``locale``; an unknown locale yields an empty catalog.

    Catalog files are named ``<locale>.yaml`` and nest every message under a
    top-level key equal to the locale.
    """
    path = LOCALES_DIR / f"{locale}.yaml"
    if not path.exists():
        logger.debug("No message catalog for locale {}", locale)
        return {}

    with open(path, encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    return loaded.get(locale, {})


def _lookup(catalog: dict[str, Any], key: str) -> str | None:
    node: Any = catalog
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(key: str, *, in_locale: str | None = None, **params: Any) -> str:
    """Translate a dotted message key.

    Looks the key up in ``in_locale`` (the active locale when omitted), then in
    the default locale, and finally returns the key itself. ``{name}``
    placeholders are filled from ``params``.
    """
    locale = in_locale or current_locale()
    message = _lookup(load_catalog(locale), key)
    if message is None and locale != default_locale():
        message = _lookup(load_catalog(default_locale()), key)
    if message is None:
        logger.warning("Missing translation for {} in {}", key, locale)
        return key

    if params:
        try:
            return message.format(**params)
        except (KeyError, IndexError):
            logger.warning("Missing interpolation parameter for {}", key)
    return message


t = translate
