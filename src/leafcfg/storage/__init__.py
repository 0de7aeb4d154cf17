"""Storage package - device file access and path helpers."""

from leafcfg.storage.explorer import (
    ErrorSimulatingExplorer,
    Explorer,
    LocalExplorer,
    MemoryExplorer,
)
from leafcfg.storage.paths import normalize_device_path

__all__ = [
    "ErrorSimulatingExplorer",
    "Explorer",
    "LocalExplorer",
    "MemoryExplorer",
    "normalize_device_path",
]
