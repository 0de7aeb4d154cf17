"""leafcfg - layered settings for a device-resident homebrew tool."""

__version__ = "0.1.0"
