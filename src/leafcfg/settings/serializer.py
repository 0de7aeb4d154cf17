"""Write settings back as a sparse JSON document."""

from __future__ import annotations

import json
from typing import Any

from leafcfg.constants import DEFAULT_SETTINGS_PATH, DOCUMENT_INDENT
from leafcfg.settings.loader import SCHEME_KEYS
from leafcfg.settings.models import Settings
from leafcfg.storage.explorer import Explorer
from leafcfg.ui.color import encode_color


class ConfigSerializer:
    """Persists Settings, keeping only what the user customized.

    Tracked fields are written only when their presence flag is set. The
    firmware policy flag and the bookmark list are always written.
    """

    def __init__(self, explorer: Explorer, path: str = DEFAULT_SETTINGS_PATH):
        """Initialize the serializer.

        Args:
            explorer: Storage receiving the settings document
            path: Device path of the settings document
        """
        self.explorer = explorer
        self.path = path

    @staticmethod
    def to_document(settings: Settings) -> dict[str, Any]:
        """Build the sparse document tree for a Settings value.

        Args:
            settings: Settings to convert

        Returns:
            JSON-compatible nested dictionary
        """
        general: dict[str, Any] = {}
        if settings.language.present:
            general["customLanguage"] = settings.language.value.code
        if settings.external_romfs.present and settings.external_romfs.value:
            general["externalRomFs"] = settings.external_romfs.value

        ui: dict[str, Any] = {}
        if settings.menu_item_size.present:
            ui["menuItemSize"] = settings.menu_item_size.value
        if settings.color_scheme.present:
            scheme = settings.color_scheme.value
            for field_name, key in SCHEME_KEYS.items():
                ui[key] = encode_color(getattr(scheme, field_name))
        if settings.scrollbar_color.present and settings.scrollbar_color.value:
            ui["scrollBar"] = encode_color(settings.scrollbar_color.value)
        if settings.progressbar_color.present and settings.progressbar_color.value:
            ui["progressBar"] = encode_color(settings.progressbar_color.value)

        document: dict[str, Any] = {}
        if general:
            document["general"] = general
        if ui:
            document["ui"] = ui
        document["installs"] = {"ignoreRequiredFwVersion": settings.ignore_required_fw_version}
        document["web"] = {
            "bookmarks": [{"name": bmk.name, "url": bmk.url} for bmk in settings.bookmarks]
        }
        return document

    def dumps(self, settings: Settings) -> str:
        """Render the sparse document as indented JSON text."""
        return json.dumps(self.to_document(settings), indent=DOCUMENT_INDENT)

    def save(self, settings: Settings) -> None:
        """Replace the stored document with the current settings.

        The old document is deleted before the new one is written. This is
        not atomic: a crash in between leaves no document at all.

        Args:
            settings: Settings to persist

        Raises:
            StorageError: If the delete or the write fails
        """
        data = self.dumps(settings).encode("utf-8")
        self.explorer.delete_file(self.path)
        self.explorer.write_file(self.path, data)
