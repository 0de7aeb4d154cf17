"""System locale query."""

from __future__ import annotations

import locale
import logging
from typing import Final, Protocol, runtime_checkable

logger: Final = logging.getLogger(__name__)

# Code reported when the host exposes no locale at all
FALLBACK_LANGUAGE_CODE: Final = "en-US"


@runtime_checkable
class LocaleProvider(Protocol):
    """Protocol for objects that report the system language."""

    def get_language_code(self) -> str:
        """Return the system language as a code such as ``en-US`` or ``fr``."""
        ...


class SystemLocale:
    """Language code of the host's configured locale.

    POSIX locale names such as ``fr_CA.UTF-8`` are reported as ``fr-CA``.
    """

    def get_language_code(self) -> str:
        try:
            name, _encoding = locale.getlocale()
        except ValueError as exc:
            logger.debug(
                "Unparseable host locale (%s), assuming %s", exc, FALLBACK_LANGUAGE_CODE
            )
            return FALLBACK_LANGUAGE_CODE
        if not name or name in ("C", "POSIX"):
            logger.debug("No usable host locale, assuming %s", FALLBACK_LANGUAGE_CODE)
            return FALLBACK_LANGUAGE_CODE
        code = name.split(".")[0].replace("_", "-")
        logger.debug("Host locale %s maps to language code %s", name, code)
        return code


class StaticLocale:
    """Locale provider that always reports the same code."""

    def __init__(self, code: str):
        self.code = code

    def get_language_code(self) -> str:
        return self.code
