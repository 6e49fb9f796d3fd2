"""Unit tests for locale switching and translation."""

import asyncio

import pytest

from src.storefront.core.errors import InvalidLocaleError
from src.storefront.core.i18n import (
    available_locales,
    current_locale,
    load_catalog,
    resolve_locale,
    t,
    translate,
    use_locale,
)
from src.storefront.runtime.config.config_data import ConfigData
from src.storefront.runtime.context import with_context


def _config(**i18n) -> ConfigData:
    config = ConfigData()
    for name, value in i18n.items():
        setattr(config.i18n, name, value)
    return config


class TestResolveLocale:
    def test_missing_request_uses_default(self):
        assert resolve_locale(None) == "en"
        assert resolve_locale("") == "en"

    def test_available_locale_is_accepted(self):
        assert resolve_locale("es") == "es"

    def test_unavailable_locale_is_rejected(self):
        with pytest.raises(InvalidLocaleError) as exc_info:
            resolve_locale("fr")
        assert exc_info.value.locale == "fr"
        assert exc_info.value.status_code == 400

    def test_unavailable_locale_allowed_when_not_enforced(self):
        with with_context(_config(enforce_available_locales=False)):
            assert resolve_locale("fr") == "fr"

    def test_configured_default_is_used(self):
        with with_context(_config(default_locale="es")):
            assert resolve_locale(None) == "es"
            assert current_locale() == "es"

    def test_available_locales(self):
        assert available_locales() == ["en", "es"]


class TestUseLocale:
    def test_locale_active_inside_block_only(self):
        assert current_locale() == "en"
        with use_locale("es"):
            assert current_locale() == "es"
        assert current_locale() == "en"

    def test_locale_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with use_locale("es"):
                raise RuntimeError("handler failed")
        assert current_locale() == "en"

    def test_nested_blocks_restore_outer_locale(self):
        with use_locale("es"):
            with use_locale("en"):
                assert current_locale() == "en"
            assert current_locale() == "es"
        assert current_locale() == "en"

    @pytest.mark.asyncio
    async def test_concurrent_tasks_do_not_share_locale(self):
        """Each task observes only the locale it switched to."""
        seen: dict[str, str] = {}

        async def handle(locale: str) -> None:
            with use_locale(locale):
                await asyncio.sleep(0.01)
                seen[locale] = current_locale()

        await asyncio.gather(handle("es"), handle("en"))

        assert seen == {"es": "es", "en": "en"}
        assert current_locale() == "en"


class TestTranslate:
    def test_translates_in_active_locale(self):
        assert t("products.index.title") == "Products"
        with use_locale("es"):
            assert t("products.index.title") == "Productos"

    def test_explicit_locale_argument(self):
        assert translate("errors.blank", in_locale="es") == "no puede estar en blanco"

    def test_interpolation(self):
        assert t("errors.invalid_locale", locale="fr") == "fr is not an available locale."

    def test_locale_placeholder_does_not_select_catalog(self):
        """A ``locale`` parameter fills the placeholder of the active catalog."""
        with use_locale("es"):
            assert t("errors.invalid_locale", locale="xx") == "xx no es un idioma disponible."
        assert translate("errors.invalid_locale", in_locale="es", locale="de") == (
            "de no es un idioma disponible."
        )

    def test_missing_key_returns_key(self):
        assert t("products.does_not_exist") == "products.does_not_exist"

    def test_unknown_locale_falls_back_to_default(self):
        assert translate("products.index.title", in_locale="fr") == "Products"

    def test_catalogs_nest_under_locale(self):
        assert "products" in load_catalog("en")
        assert load_catalog("fr") == {}

    def test_catalogs_define_the_same_keys(self):
        def keys(node, prefix=""):
            for name, value in node.items():
                path = f"{prefix}{name}"
                if isinstance(value, dict):
                    yield from keys(value, f"{path}.")
                else:
                    yield path

        assert set(keys(load_catalog("en"))) == set(keys(load_catalog("es")))
