from __future__ import annotations

from enum import Enum

from leafcfg.errors import FormatError


class Language(Enum):
    """Interface languages the application ships translations for.

    The value is the code stored in the settings document.
    """

    ENGLISH = "en"
    SPANISH = "es"
    GERMAN = "de"
    FRENCH = "fr"
    ITALIAN = "it"
    DUTCH = "nl"

    @property
    def code(self) -> str:
        """Code written to ``general.customLanguage``."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Language:
        """Look up a language by its document code.

        Args:
            code: Language code such as ``"fr"`` (case-insensitive)

        Returns:
            Matching Language member

        Raises:
            FormatError: If the code names no supported language
        """
        try:
            return cls(code.strip().lower())
        except ValueError as exc:
            supported = ", ".join(lang.value for lang in cls)
            raise FormatError(
                f"unsupported language {code!r} (expected one of: {supported})",
                original_error=exc,
            ) from exc
