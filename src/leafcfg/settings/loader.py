"""Load the effective settings: defaults overlaid with the stored document."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from leafcfg.common.enums import Language
from leafcfg.constants import DEFAULT_SETTINGS_PATH
from leafcfg.errors import FormatError, ParseError
from leafcfg.settings.defaults import DefaultsResolver
from leafcfg.settings.document import (
    GeneralSection,
    InstallsSection,
    SettingsDocument,
    UISection,
    WebSection,
    describe,
    error_location,
)
from leafcfg.settings.models import Settings
from leafcfg.storage.explorer import Explorer
from leafcfg.ui.color import Color

# Document keys of the four scheme colors, by ColorScheme field
SCHEME_KEYS: dict[str, str] = {
    "background": "background",
    "base": "base",
    "base_focus": "baseFocus",
    "text": "text",
}


def _decode(value: str, key: str) -> Color:
    try:
        return Color.from_hex(value)
    except FormatError as exc:
        raise FormatError(exc.message, key=key, original_error=exc) from exc


def parse_document(raw: bytes) -> SettingsDocument:
    """Parse and validate the raw bytes of a settings document.

    Args:
        raw: File contents

    Returns:
        The validated document

    Raises:
        ParseError: If the bytes are not well-formed JSON
        FormatError: If a recognized key holds the wrong JSON type
    """
    try:
        data: Any = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise ParseError(f"Settings document is not valid JSON: {exc}", exc) from exc

    if not isinstance(data, dict):
        raise FormatError(f"expected a JSON object at the top level, got {describe(data)}")

    try:
        return SettingsDocument.model_validate(data)
    except ValidationError as err:
        first = err.errors()[0]
        raise FormatError(
            first["msg"], key=error_location(first["loc"]), original_error=err
        ) from err


class ConfigLoader:
    """Builds the effective Settings value.

    The stored document is optional. Without one the defaults are returned
    untouched; with one, every key it supplies with a non-empty value
    replaces the default and sets the field's presence flag.

    Examples:
        loader = ConfigLoader(LocalExplorer(root), DefaultsResolver(SystemLocale()))
        settings = loader.load()
    """

    def __init__(
        self,
        explorer: Explorer,
        defaults: DefaultsResolver,
        path: str = DEFAULT_SETTINGS_PATH,
    ):
        """Initialize the loader.

        Args:
            explorer: Storage holding the settings document
            defaults: Source of the computed defaults
            path: Device path of the settings document
        """
        self.explorer = explorer
        self.defaults = defaults
        self.path = path

    def exists(self) -> bool:
        """Whether a settings document is currently stored."""
        return self.explorer.is_file(self.path)

    def load(self) -> Settings:
        """Load the effective settings.

        Returns:
            Defaults overlaid with the stored document, if there is one

        Raises:
            ParseError: If the document is not valid JSON
            FormatError: If a present value is malformed
            StorageError: If the document exists but cannot be read
        """
        settings = self.defaults.resolve()
        raw = self.explorer.read_file(self.path)
        if raw is None:
            return settings

        return self.overlay(settings, parse_document(raw))

    @classmethod
    def overlay(cls, settings: Settings, document: SettingsDocument) -> Settings:
        """Apply a validated document on top of a Settings value in place.

        Args:
            settings: Settings to update, usually fresh defaults
            document: Parsed settings document

        Returns:
            The same Settings value, for chaining

        Raises:
            FormatError: If a present value is malformed
        """
        if document.general is not None:
            cls._apply_general(settings, document.general)
        if document.ui is not None:
            cls._apply_ui(settings, document.ui)
        if document.installs is not None:
            cls._apply_installs(settings, document.installs)
        if document.web is not None:
            cls._apply_web(settings, document.web)
        return settings

    # ---- namespaces ----
    @staticmethod
    def _apply_general(settings: Settings, section: GeneralSection) -> None:
        if section.custom_language:
            try:
                language = Language.from_code(section.custom_language)
            except FormatError as exc:
                raise FormatError(
                    exc.message, key="general.customLanguage", original_error=exc
                ) from exc
            settings.language.override(language)

        if section.external_romfs:
            settings.set_external_romfs(section.external_romfs)

    @staticmethod
    def _apply_ui(settings: Settings, section: UISection) -> None:
        if section.menu_item_size is not None and section.menu_item_size > 0:
            settings.menu_item_size.override(section.menu_item_size)

        # Sub-colors override independently; any one of them flags the scheme
        for field_name, key in SCHEME_KEYS.items():
            value = getattr(section, field_name)
            if value:
                settings.set_scheme_color(field_name, _decode(value, f"ui.{key}"))

        if section.scroll_bar:
            settings.scrollbar_color.override(_decode(section.scroll_bar, "ui.scrollBar"))
        if section.progress_bar:
            settings.progressbar_color.override(
                _decode(section.progress_bar, "ui.progressBar")
            )

    @staticmethod
    def _apply_installs(settings: Settings, section: InstallsSection) -> None:
        if section.ignore_required_fw_version is not None:
            settings.ignore_required_fw_version = section.ignore_required_fw_version

    @staticmethod
    def _apply_web(settings: Settings, section: WebSection) -> None:
        for entry in section.bookmarks or []:
            settings.add_bookmark(entry.name or "", entry.url or "")
