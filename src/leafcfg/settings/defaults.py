"""Computed default settings."""

from __future__ import annotations

import random
from typing import Final

from pydantic import PositiveInt

from leafcfg.common.enums import Language
from leafcfg.constants import DEFAULT_IGNORE_REQUIRED_FW_VERSION, DEFAULT_MENU_ITEM_SIZE
from leafcfg.settings.models import Settings, Tracked
from leafcfg.system.locale import LocaleProvider
from leafcfg.ui.color import Color, ColorScheme, generate_random_scheme

# System language codes with a matching translation; anything else is English
LANGUAGE_CODE_MAP: Final[dict[str, Language]] = {
    "en-us": Language.ENGLISH,
    "en-gb": Language.ENGLISH,
    "fr": Language.FRENCH,
    "fr-ca": Language.FRENCH,
    "de": Language.GERMAN,
    "it": Language.ITALIAN,
    "es": Language.SPANISH,
    "es-419": Language.SPANISH,
    "nl": Language.DUTCH,
}


def map_language_code(code: str) -> Language:
    """Map a system language code onto a supported language.

    The full code is tried first, then its primary subtag, so ``fr-FR``
    resolves like ``fr``.

    Args:
        code: System language code (case-insensitive)

    Returns:
        The matching language, or English when nothing matches
    """
    key = code.strip().lower()
    if key in LANGUAGE_CODE_MAP:
        return LANGUAGE_CODE_MAP[key]
    return LANGUAGE_CODE_MAP.get(key.split("-")[0], Language.ENGLISH)


class DefaultsResolver:
    """Produces the settings used when nothing has been customized.

    - Language comes from the system locale
    - The color scheme is generated around a random hue
    - Menu item size, firmware policy and bookmarks are constants

    Every presence flag starts false: these are computed values, not user
    overrides.
    """

    def __init__(self, locale_provider: LocaleProvider, seed: int | None = None):
        """Initialize the resolver.

        Args:
            locale_provider: Source of the system language code
            seed: Fixed seed for the color scheme (default: random each time)
        """
        self.locale_provider = locale_provider
        self.seed = seed

    def resolve(self) -> Settings:
        """Build a fresh default Settings value."""
        language = map_language_code(self.locale_provider.get_language_code())
        scheme = generate_random_scheme(random.Random(self.seed))
        return Settings(
            language=Tracked[Language](value=language),
            external_romfs=Tracked[str | None](value=None),
            menu_item_size=Tracked[PositiveInt](value=DEFAULT_MENU_ITEM_SIZE),
            color_scheme=Tracked[ColorScheme](value=scheme),
            scrollbar_color=Tracked[Color | None](value=None),
            progressbar_color=Tracked[Color | None](value=None),
            ignore_required_fw_version=DEFAULT_IGNORE_REQUIRED_FW_VERSION,
            bookmarks=[],
        )
