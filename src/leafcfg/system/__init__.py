# src/leafcfg/system/__init__.py
"""System module for host state queries."""

from leafcfg.system.locale import LocaleProvider, StaticLocale, SystemLocale

__all__ = ["LocaleProvider", "StaticLocale", "SystemLocale"]
