"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from leafcfg.constants import DEFAULT_SDMC_ROOT, DEFAULT_SETTINGS_PATH
from leafcfg.resources import ResourcePathResolver
from leafcfg.settings.defaults import DefaultsResolver
from leafcfg.settings.loader import ConfigLoader
from leafcfg.settings.models import Settings
from leafcfg.settings.serializer import ConfigSerializer
from leafcfg.storage.explorer import LocalExplorer
from leafcfg.storage.paths import normalize_device_path
from leafcfg.system.locale import LocaleProvider, StaticLocale, SystemLocale

# Load environment variables from .env file(s)
load_dotenv()


class RuntimeEnvironment(BaseModel):
    """Where the settings live and how defaults are computed.

    Values come from ``LEAFCFG_*`` environment variables (or a ``.env``
    file) and fall back to the constants in :mod:`leafcfg.constants`.
    """

    ENV_VARS: ClassVar[dict[str, str]] = {
        "sdmc_root": "LEAFCFG_SDMC_ROOT",
        "language_code": "LEAFCFG_LANGUAGE",
        "settings_path": "LEAFCFG_SETTINGS_PATH",
        "seed": "LEAFCFG_SEED",
    }

    sdmc_root: Path = Field(
        Path(DEFAULT_SDMC_ROOT).expanduser(),
        description="Host directory backing the sdmc:/ device root",
    )
    language_code: str | None = Field(
        None, description="Fixed system language code; if null, the host locale is used"
    )
    settings_path: str = Field(
        DEFAULT_SETTINGS_PATH, description="Device path of the settings document"
    )
    seed: int | None = Field(None, description="Seed for the default color scheme")

    # ---- validators ----
    @field_validator("sdmc_root")
    @classmethod
    def expand_root(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("settings_path")
    @classmethod
    def normalize_settings_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("settings path cannot be empty")
        return normalize_device_path(v.strip())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RuntimeEnvironment:
        """Build the runtime configuration from environment variables.

        Args:
            environ: Variables to read (default: ``os.environ``)

        Returns:
            Validated RuntimeEnvironment

        Raises:
            RuntimeError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        data = {field: env[var] for field, var in cls.ENV_VARS.items() if env.get(var)}
        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid environment configuration:\n{err}") from err

    # ---- wiring ----
    def explorer(self) -> LocalExplorer:
        return LocalExplorer(self.sdmc_root)

    def locale_provider(self) -> LocaleProvider:
        if self.language_code:
            return StaticLocale(self.language_code)
        return SystemLocale()

    def loader(self) -> ConfigLoader:
        defaults = DefaultsResolver(self.locale_provider(), seed=self.seed)
        return ConfigLoader(self.explorer(), defaults, self.settings_path)

    def serializer(self) -> ConfigSerializer:
        return ConfigSerializer(self.explorer(), self.settings_path)

    def resource_resolver(self, settings: Settings) -> ResourcePathResolver:
        return ResourcePathResolver(settings, self.explorer())
