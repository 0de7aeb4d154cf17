import pytest

from leafcfg.common.enums import Language
from leafcfg.errors import FormatError
from leafcfg.settings.defaults import DefaultsResolver, map_language_code
from leafcfg.system.locale import StaticLocale


@pytest.mark.parametrize(
    "code, expected",
    [
        ("en-US", Language.ENGLISH),
        ("en-GB", Language.ENGLISH),
        ("fr", Language.FRENCH),
        ("fr-CA", Language.FRENCH),
        ("fr-FR", Language.FRENCH),
        ("de", Language.GERMAN),
        ("it", Language.ITALIAN),
        ("es", Language.SPANISH),
        ("es-419", Language.SPANISH),
        ("nl", Language.DUTCH),
        ("FR-ca", Language.FRENCH),
        ("ja", Language.ENGLISH),
        ("zh-TW", Language.ENGLISH),
        ("", Language.ENGLISH),
    ],
)
def test_map_language_code(code: str, expected: Language) -> None:
    assert map_language_code(code) == expected


def test_resolve_uses_constants_and_leaves_flags_unset() -> None:
    settings = DefaultsResolver(StaticLocale("fr-CA")).resolve()

    assert settings.language.value == Language.FRENCH
    assert settings.language.present is False
    assert settings.external_romfs.value is None
    assert settings.menu_item_size.value == 80
    assert settings.scrollbar_color.value is None
    assert settings.progressbar_color.value is None
    assert settings.ignore_required_fw_version is True
    assert settings.bookmarks == []
    assert settings.explicit_fields() == []


def test_resolve_with_seed_is_deterministic() -> None:
    resolver = DefaultsResolver(StaticLocale("de"), seed=5)
    assert resolver.resolve() == resolver.resolve()


def test_resolve_returns_independent_values() -> None:
    resolver = DefaultsResolver(StaticLocale("de"), seed=5)
    first = resolver.resolve()
    first.add_bookmark("A", "https://a.example")
    assert resolver.resolve().bookmarks == []


def test_language_from_code() -> None:
    assert Language.from_code("NL") == Language.DUTCH
    assert Language.DUTCH.code == "nl"
    with pytest.raises(FormatError):
        Language.from_code("tlh")
