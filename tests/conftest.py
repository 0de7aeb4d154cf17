import json
from typing import Any

import pytest

from leafcfg.constants import DEFAULT_SETTINGS_PATH
from leafcfg.settings.defaults import DefaultsResolver
from leafcfg.settings.loader import ConfigLoader
from leafcfg.settings.serializer import ConfigSerializer
from leafcfg.storage.explorer import MemoryExplorer
from leafcfg.system.locale import StaticLocale


@pytest.fixture
def explorer() -> MemoryExplorer:
    return MemoryExplorer()


@pytest.fixture
def defaults() -> DefaultsResolver:
    # Fixed seed so the random color scheme is identical across resolves
    return DefaultsResolver(StaticLocale("en-US"), seed=1234)


@pytest.fixture
def loader(explorer: MemoryExplorer, defaults: DefaultsResolver) -> ConfigLoader:
    return ConfigLoader(explorer, defaults)


@pytest.fixture
def serializer(explorer: MemoryExplorer) -> ConfigSerializer:
    return ConfigSerializer(explorer)


def store_document(explorer: MemoryExplorer, document: Any) -> None:
    """Place a JSON document at the default settings path."""
    explorer.files[DEFAULT_SETTINGS_PATH] = json.dumps(document).encode("utf-8")


def read_document(explorer: MemoryExplorer) -> dict[str, Any]:
    """Parse the JSON document stored at the default settings path."""
    return json.loads(explorer.files[DEFAULT_SETTINGS_PATH])
