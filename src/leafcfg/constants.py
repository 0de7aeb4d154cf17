from typing import Final

# Device path prefixes
DEVICE_PREFIX: Final = "sdmc:"
BUNDLED_PREFIX: Final = "romfs:"

# Where the settings document lives on the device
DEFAULT_SETTINGS_PATH: Final = "sdmc:/switch/leafcfg/settings.json"

# Host directory standing in for the device's sdmc:/ root
DEFAULT_SDMC_ROOT: Final = "~/.local/share/leafcfg/sdmc"

# Fixed defaults
DEFAULT_MENU_ITEM_SIZE: Final = 80
DEFAULT_IGNORE_REQUIRED_FW_VERSION: Final = True

# Indentation of the written settings document
DOCUMENT_INDENT: Final = 4
