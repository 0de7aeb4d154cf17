"""Apply user-chosen colors to toolkit widgets."""

from __future__ import annotations

from typing import Protocol

from leafcfg.settings.models import Settings
from leafcfg.ui.color import Color


class ScrollableMenu(Protocol):
    """Any menu widget with a configurable scrollbar."""

    def set_scrollbar_color(self, color: Color) -> None: ...


class ProgressBar(Protocol):
    """Any progress bar widget with a configurable fill color."""

    def set_progress_color(self, color: Color) -> None: ...


def apply_scrollbar_color(settings: Settings, menu: ScrollableMenu) -> None:
    """Color the menu's scrollbar if the user picked a color, else do nothing."""
    if settings.scrollbar_color.present and settings.scrollbar_color.value is not None:
        menu.set_scrollbar_color(settings.scrollbar_color.value)


def apply_progressbar_color(settings: Settings, bar: ProgressBar) -> None:
    """Color the progress bar if the user picked a color, else do nothing."""
    if settings.progressbar_color.present and settings.progressbar_color.value is not None:
        bar.set_progress_color(settings.progressbar_color.value)
