"""Resource path resolution with user overrides."""

from __future__ import annotations

from leafcfg.settings.models import Settings
from leafcfg.storage.explorer import Explorer
from leafcfg.storage.paths import bundled_path, join_device_path


class ResourcePathResolver:
    """Chooses between bundled resources and user-supplied replacements.

    When the settings name an external resource directory and it contains
    the requested file, that file wins; otherwise the bundled copy is used.
    The override is checked on every call.
    """

    def __init__(self, settings: Settings, explorer: Explorer):
        """Initialize the resolver.

        Args:
            settings: Effective settings (read-only here)
            explorer: Storage the external directory lives on
        """
        self.settings = settings
        self.explorer = explorer

    def resolve(self, logical_path: str) -> str:
        """Return the path to load a resource from.

        Args:
            logical_path: Resource path relative to the resource root,
                e.g. ``"Logo.png"``

        Returns:
            ``<external_romfs>/<logical_path>`` if that file exists,
            else ``romfs:/<logical_path>``
        """
        root = self.settings.external_romfs
        if root.present and root.value:
            candidate = join_device_path(root.value, logical_path)
            if self.explorer.is_file(candidate):
                return candidate
        return bundled_path(logical_path)
