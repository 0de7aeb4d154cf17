from unittest.mock import MagicMock

from leafcfg.settings.defaults import DefaultsResolver
from leafcfg.ui.color import Color
from leafcfg.ui.theme import apply_progressbar_color, apply_scrollbar_color


def test_apply_colors_is_noop_when_unset(defaults: DefaultsResolver) -> None:
    settings = defaults.resolve()
    menu = MagicMock()
    bar = MagicMock()

    apply_scrollbar_color(settings, menu)
    apply_progressbar_color(settings, bar)

    menu.set_scrollbar_color.assert_not_called()
    bar.set_progress_color.assert_not_called()


def test_apply_colors_when_set(defaults: DefaultsResolver) -> None:
    settings = defaults.resolve()
    scroll = Color(r=1, g=2, b=3)
    progress = Color(r=4, g=5, b=6, a=7)
    settings.scrollbar_color.override(scroll)
    settings.progressbar_color.override(progress)
    menu = MagicMock()
    bar = MagicMock()

    apply_scrollbar_color(settings, menu)
    apply_progressbar_color(settings, bar)

    menu.set_scrollbar_color.assert_called_once_with(scroll)
    bar.set_progress_color.assert_called_once_with(progress)
