"""Settings management.

This package provides:
- Settings: The effective settings value with per-field presence flags
- DefaultsResolver: Computed defaults (system language, random scheme)
- ConfigLoader: Defaults overlaid with the stored settings document
- ConfigSerializer: Sparse write-back of customized settings
"""

from leafcfg.settings.defaults import DefaultsResolver
from leafcfg.settings.loader import ConfigLoader
from leafcfg.settings.models import Settings, Tracked, WebBookmark
from leafcfg.settings.serializer import ConfigSerializer

__all__ = [
    "ConfigLoader",
    "ConfigSerializer",
    "DefaultsResolver",
    "Settings",
    "Tracked",
    "WebBookmark",
]
