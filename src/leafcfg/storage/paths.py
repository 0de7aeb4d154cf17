"""Device path helpers."""

from __future__ import annotations

from leafcfg.constants import BUNDLED_PREFIX, DEVICE_PREFIX


def normalize_device_path(path: str) -> str:
    """Root a user-supplied path on the device prefix.

    Paths already starting with ``sdmc:/`` are returned unchanged. Anything
    else is prefixed with ``sdmc:`` and exactly one ``/``.

    Args:
        path: Path as typed by the user (``external``, ``/external`` or
            ``sdmc:/external``)

    Returns:
        Normalized device path

    Examples:
        >>> normalize_device_path("external")
        'sdmc:/external'
        >>> normalize_device_path("/external")
        'sdmc:/external'
    """
    if path.startswith(DEVICE_PREFIX + "/"):
        return path
    separator = "" if path.startswith("/") else "/"
    return f"{DEVICE_PREFIX}{separator}{path}"


def bundled_path(logical_path: str) -> str:
    """Path of a resource inside the application bundle."""
    return f"{BUNDLED_PREFIX}/{logical_path.lstrip('/')}"


def join_device_path(root: str, logical_path: str) -> str:
    """Join a device directory and a relative resource path with one ``/``."""
    return f"{root.rstrip('/')}/{logical_path.lstrip('/')}"
