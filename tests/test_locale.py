import locale

import pytest

from leafcfg.common.enums import Language
from leafcfg.settings.defaults import DefaultsResolver
from leafcfg.settings.loader import ConfigLoader
from leafcfg.storage.explorer import MemoryExplorer
from leafcfg.system.locale import (
    FALLBACK_LANGUAGE_CODE,
    LocaleProvider,
    StaticLocale,
    SystemLocale,
)


@pytest.mark.parametrize(
    "reported, expected",
    [
        (("fr_CA", "UTF-8"), "fr-CA"),
        (("de_DE", "ISO8859-1"), "de-DE"),
        (("nl", None), "nl"),
        ((None, None), FALLBACK_LANGUAGE_CODE),
        (("C", "UTF-8"), FALLBACK_LANGUAGE_CODE),
    ],
)
def test_system_locale_code(
    monkeypatch: pytest.MonkeyPatch, reported: tuple[str | None, str | None], expected: str
) -> None:
    monkeypatch.setattr(locale, "getlocale", lambda *args: reported)
    assert SystemLocale().get_language_code() == expected


def test_static_locale() -> None:
    provider = StaticLocale("es-419")
    assert provider.get_language_code() == "es-419"
    assert isinstance(provider, LocaleProvider)
    assert isinstance(SystemLocale(), LocaleProvider)


def test_unparseable_locale_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(*args: object) -> tuple[str, str]:
        raise ValueError("unknown locale: xx_YY@weird")

    monkeypatch.setattr(locale, "getlocale", broken)
    assert SystemLocale().get_language_code() == FALLBACK_LANGUAGE_CODE


def test_unparseable_locale_still_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(*args: object) -> tuple[str, str]:
        raise ValueError("unknown locale: xx_YY@weird")

    monkeypatch.setattr(locale, "getlocale", broken)
    loader = ConfigLoader(MemoryExplorer(), DefaultsResolver(SystemLocale()))

    settings = loader.load()

    assert settings.language.value == Language.ENGLISH
    assert settings.explicit_fields() == []
