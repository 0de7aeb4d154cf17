"""Schema of the persisted settings document.

The document is a namespaced JSON object. Every key is optional and unknown
namespaces or keys are ignored; recognized keys must carry the right JSON
type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

_ALIASED = ConfigDict(extra="ignore", populate_by_name=True)


class GeneralSection(BaseModel):
    model_config = _ALIASED

    custom_language: StrictStr | None = Field(None, alias="customLanguage")
    external_romfs: StrictStr | None = Field(None, alias="externalRomFs")


class UISection(BaseModel):
    model_config = _ALIASED

    menu_item_size: StrictInt | None = Field(None, alias="menuItemSize")
    background: StrictStr | None = None
    base: StrictStr | None = None
    base_focus: StrictStr | None = Field(None, alias="baseFocus")
    text: StrictStr | None = None
    scroll_bar: StrictStr | None = Field(None, alias="scrollBar")
    progress_bar: StrictStr | None = Field(None, alias="progressBar")


class InstallsSection(BaseModel):
    model_config = _ALIASED

    ignore_required_fw_version: StrictBool | None = Field(
        None, alias="ignoreRequiredFwVersion"
    )


class BookmarkEntry(BaseModel):
    model_config = _ALIASED

    name: StrictStr | None = None
    url: StrictStr | None = None


class WebSection(BaseModel):
    model_config = _ALIASED

    bookmarks: list[BookmarkEntry] | None = None


class SettingsDocument(BaseModel):
    """Top level of ``settings.json``."""

    model_config = _ALIASED

    general: GeneralSection | None = None
    ui: UISection | None = None
    installs: InstallsSection | None = None
    web: WebSection | None = None


def error_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a dotted document key.

    >>> error_location(("web", "bookmarks", 2, "url"))
    'web.bookmarks[2].url'
    """
    key = ""
    for part in loc:
        if isinstance(part, int):
            key += f"[{part}]"
        else:
            key += f".{part}" if key else str(part)
    return key


def describe(data: Any) -> str:
    """Short name of a JSON value's type for error messages."""
    if isinstance(data, dict):
        return "object"
    if isinstance(data, list):
        return "array"
    if isinstance(data, bool):
        return "boolean"
    if isinstance(data, (int, float)):
        return "number"
    if isinstance(data, str):
        return "string"
    return "null"
