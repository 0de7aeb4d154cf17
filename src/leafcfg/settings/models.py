"""Settings data model.

Every user-overridable field is wrapped in :class:`Tracked`, which pairs the
effective value with a presence flag. The flag records whether the value was
supplied explicitly (by the settings document or a setter) rather than
computed as a default, and decides what gets written back on save.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from leafcfg.common.enums import Language
from leafcfg.constants import DEFAULT_IGNORE_REQUIRED_FW_VERSION, DEFAULT_MENU_ITEM_SIZE
from leafcfg.storage.paths import normalize_device_path
from leafcfg.ui.color import Color, ColorScheme

T = TypeVar("T")


class Tracked(BaseModel, Generic[T]):
    """A setting value together with its presence flag."""

    model_config = ConfigDict(validate_assignment=True)

    value: T
    present: bool = False

    def override(self, value: T) -> None:
        """Replace the value and mark it as explicitly set."""
        self.value = value
        self.present = True

    def clear(self) -> None:
        """Drop the presence flag.

        The current value stays in place until the next load recomputes
        the default, but it is no longer saved.
        """
        self.present = False


class WebBookmark(BaseModel):
    """A named web page shortcut."""

    name: str
    url: str


class Settings(BaseModel):
    """Effective application settings.

    Built once by ``ConfigLoader.load()``, optionally changed through the
    setters below, and written back by ``ConfigSerializer.save()``.
    """

    language: Tracked[Language]
    external_romfs: Tracked[str | None] = Field(
        default_factory=lambda: Tracked[str | None](value=None)
    )
    menu_item_size: Tracked[PositiveInt] = Field(
        default_factory=lambda: Tracked[PositiveInt](value=DEFAULT_MENU_ITEM_SIZE)
    )
    color_scheme: Tracked[ColorScheme]
    scrollbar_color: Tracked[Color | None] = Field(
        default_factory=lambda: Tracked[Color | None](value=None)
    )
    progressbar_color: Tracked[Color | None] = Field(
        default_factory=lambda: Tracked[Color | None](value=None)
    )
    ignore_required_fw_version: bool = DEFAULT_IGNORE_REQUIRED_FW_VERSION
    bookmarks: list[WebBookmark] = Field(default_factory=list)

    # ---- setters ----
    def set_external_romfs(self, path: str) -> None:
        """Point resource lookups at a directory on the device.

        Args:
            path: Directory, with or without the ``sdmc:`` prefix
        """
        self.external_romfs.override(normalize_device_path(path))

    def set_scheme_color(self, name: str, color: Color) -> None:
        """Override one scheme color and flag the whole scheme.

        Args:
            name: One of ``background``, ``base``, ``base_focus``, ``text``
            color: New color
        """
        if name not in ColorScheme.model_fields:
            raise ValueError(f"Unknown scheme color: {name}")
        scheme = self.color_scheme.value.model_copy(update={name: color})
        self.color_scheme.override(scheme)

    def add_bookmark(self, name: str, url: str) -> bool:
        """Append a bookmark.

        Args:
            name: Display name
            url: Target URL

        Returns:
            False if either field is empty and nothing was added
        """
        if not name or not url:
            return False
        self.bookmarks.append(WebBookmark(name=name, url=url))
        return True

    def remove_bookmark(self, name: str) -> int:
        """Remove every bookmark with the given name.

        Returns:
            Number of bookmarks removed
        """
        kept = [bmk for bmk in self.bookmarks if bmk.name != name]
        removed = len(self.bookmarks) - len(kept)
        self.bookmarks = kept
        return removed

    # ---- queries ----
    def explicit_fields(self) -> list[str]:
        """Names of the tracked fields whose presence flag is set."""
        names: list[str] = []
        for name in type(self).model_fields:
            field = getattr(self, name)
            if isinstance(field, Tracked) and field.present:
                names.append(name)
        return names
