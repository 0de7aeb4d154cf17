import pytest
from conftest import read_document

from leafcfg.common.enums import Language
from leafcfg.constants import DEFAULT_SETTINGS_PATH
from leafcfg.errors import StorageError
from leafcfg.settings.defaults import DefaultsResolver
from leafcfg.settings.loader import ConfigLoader
from leafcfg.settings.serializer import ConfigSerializer
from leafcfg.storage.explorer import ErrorSimulatingExplorer, MemoryExplorer
from leafcfg.ui.color import Color


def test_defaults_write_only_always_present_fields(
    serializer: ConfigSerializer, defaults: DefaultsResolver
) -> None:
    document = serializer.to_document(defaults.resolve())

    assert document == {
        "installs": {"ignoreRequiredFwVersion": True},
        "web": {"bookmarks": []},
    }


def test_save_deletes_then_writes(
    serializer: ConfigSerializer, explorer: MemoryExplorer, defaults: DefaultsResolver
) -> None:
    explorer.files[DEFAULT_SETTINGS_PATH] = b"stale"

    serializer.save(defaults.resolve())

    assert explorer.calls == [
        ("delete_file", DEFAULT_SETTINGS_PATH),
        ("write_file", DEFAULT_SETTINGS_PATH),
    ]
    assert read_document(explorer)["installs"] == {"ignoreRequiredFwVersion": True}


def test_output_uses_four_space_indent(
    serializer: ConfigSerializer, defaults: DefaultsResolver
) -> None:
    text = serializer.dumps(defaults.resolve())
    assert '\n    "installs": {\n        "ignoreRequiredFwVersion": true' in text


def test_sparse_save_and_reload(
    loader: ConfigLoader, serializer: ConfigSerializer, explorer: MemoryExplorer
) -> None:
    settings = loader.load()
    settings.language.override(Language.GERMAN)
    settings.set_external_romfs("/themes")
    settings.menu_item_size.override(120)
    settings.set_scheme_color("text", Color(r=250, g=250, b=250))
    settings.scrollbar_color.override(Color(r=1, g=2, b=3, a=4))
    settings.ignore_required_fw_version = False
    settings.add_bookmark("Docs", "https://docs.example")

    serializer.save(settings)
    reloaded = loader.load()

    assert reloaded == settings
    assert reloaded.progressbar_color.present is False


def test_unflagged_fields_are_absent_from_document(
    loader: ConfigLoader, serializer: ConfigSerializer, explorer: MemoryExplorer
) -> None:
    settings = loader.load()
    settings.progressbar_color.override(Color(r=9, g=9, b=9))

    serializer.save(settings)
    document = read_document(explorer)

    assert "general" not in document
    assert document["ui"] == {"progressBar": "#090909FF"}
    assert document["web"] == {"bookmarks": []}


def test_flagged_scheme_writes_all_four_colors(
    loader: ConfigLoader, serializer: ConfigSerializer, explorer: MemoryExplorer
) -> None:
    settings = loader.load()
    settings.set_scheme_color("base", Color(r=0x12, g=0x34, b=0x56))

    document = serializer.to_document(settings)

    assert set(document["ui"]) == {"background", "base", "baseFocus", "text"}
    assert document["ui"]["base"] == "#123456FF"


def test_cleared_field_is_not_written(
    loader: ConfigLoader, serializer: ConfigSerializer
) -> None:
    settings = loader.load()
    settings.menu_item_size.override(100)
    settings.menu_item_size.clear()

    assert "ui" not in serializer.to_document(settings)


def test_bookmarks_written_in_order(
    serializer: ConfigSerializer, defaults: DefaultsResolver
) -> None:
    settings = defaults.resolve()
    settings.add_bookmark("B", "https://b.example")
    settings.add_bookmark("A", "https://a.example")

    document = serializer.to_document(settings)

    assert document["web"]["bookmarks"] == [
        {"name": "B", "url": "https://b.example"},
        {"name": "A", "url": "https://a.example"},
    ]


@pytest.mark.parametrize("method", ["write_file", "delete_file"])
def test_storage_failure_is_storage_error(method: str, defaults: DefaultsResolver) -> None:
    explorer = ErrorSimulatingExplorer(fail_on_methods=[method])

    with pytest.raises(StorageError):
        ConfigSerializer(explorer).save(defaults.resolve())


def test_failed_write_after_delete_degrades_to_defaults(defaults: DefaultsResolver) -> None:
    explorer = ErrorSimulatingExplorer(
        files={DEFAULT_SETTINGS_PATH: b'{"ui": {"menuItemSize": 99}}'},
        fail_on_methods=["write_file"],
    )

    with pytest.raises(StorageError):
        ConfigSerializer(explorer).save(defaults.resolve())

    assert ConfigLoader(explorer, defaults).load() == defaults.resolve()
