"""Shared enumerations."""

from leafcfg.common.enums import Language

__all__ = ["Language"]
