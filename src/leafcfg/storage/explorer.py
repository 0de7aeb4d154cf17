# src/leafcfg/storage/explorer.py
"""Storage explorer abstraction.

The settings core only needs four file operations on device paths
(``sdmc:/...``). :class:`Explorer` describes them; :class:`LocalExplorer`
maps device paths onto a host directory, and the in-memory variants are used
by tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from leafcfg.constants import DEVICE_PREFIX
from leafcfg.errors import StorageError

logger: Final = logging.getLogger(__name__)


@runtime_checkable
class Explorer(Protocol):
    """Protocol defining the file operations used on device storage."""

    def is_file(self, path: str) -> bool:
        """Return True if a regular file exists at the device path."""
        ...

    def read_file(self, path: str) -> bytes | None:
        """Read a whole file.

        Args:
            path: Device path

        Returns:
            File contents, or None if the file does not exist

        Raises:
            StorageError: If the file exists but cannot be read
        """
        ...

    def write_file(self, path: str, data: bytes) -> None:
        """Create or replace a file, creating parent directories.

        Raises:
            StorageError: If the write fails
        """
        ...

    def delete_file(self, path: str) -> None:
        """Delete a file; a missing file is not an error.

        Raises:
            StorageError: If the file exists but cannot be removed
        """
        ...


class LocalExplorer:
    """Explorer backed by a host directory standing in for ``sdmc:/``."""

    def __init__(self, root: Path):
        """Initialize with the host directory that backs the device root.

        Args:
            root: Host directory; ``sdmc:/a/b`` maps to ``root/a/b``
        """
        self.root = root.expanduser()

    def host_path(self, path: str) -> Path:
        """Translate a device path into a host path under :attr:`root`."""
        relative = path[len(DEVICE_PREFIX) :] if path.startswith(DEVICE_PREFIX) else path
        return self.root / relative.lstrip("/")

    def is_file(self, path: str) -> bool:
        return self.host_path(path).is_file()

    def read_file(self, path: str) -> bytes | None:
        host = self.host_path(path)
        try:
            data = host.read_bytes()
        except FileNotFoundError:
            logger.debug("No file at %s", host)
            return None
        except OSError as exc:
            raise StorageError("Unable to read file", path, exc) from exc
        logger.debug("Read %d bytes from %s", len(data), host)
        return data

    def write_file(self, path: str, data: bytes) -> None:
        host = self.host_path(path)
        try:
            host.parent.mkdir(parents=True, exist_ok=True)
            host.write_bytes(data)
        except OSError as exc:
            raise StorageError("Unable to write file", path, exc) from exc
        logger.debug("Wrote %d bytes to %s", len(data), host)

    def delete_file(self, path: str) -> None:
        host = self.host_path(path)
        try:
            host.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError("Unable to delete file", path, exc) from exc
        logger.debug("Deleted %s", host)


class MemoryExplorer:
    """In-memory Explorer for testing.

    Files live in :attr:`files`, keyed by device path. Writes and deletes
    are recorded in call order.
    """

    def __init__(self, files: dict[str, bytes] | None = None):
        self.files: dict[str, bytes] = dict(files or {})
        self.calls: list[tuple[str, str]] = []

    def is_file(self, path: str) -> bool:
        return path in self.files

    def read_file(self, path: str) -> bytes | None:
        return self.files.get(path)

    def write_file(self, path: str, data: bytes) -> None:
        self.calls.append(("write_file", path))
        self.files[path] = data

    def delete_file(self, path: str) -> None:
        self.calls.append(("delete_file", path))
        self.files.pop(path, None)

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.calls = []


class ErrorSimulatingExplorer(MemoryExplorer):
    """Memory explorer that can simulate storage failures."""

    def __init__(
        self,
        files: dict[str, bytes] | None = None,
        fail_on_methods: list[str] | None = None,
    ):
        """Initialize with optional methods that should fail.

        Args:
            files: Initial file contents keyed by device path
            fail_on_methods: Method names that should raise StorageError
        """
        super().__init__(files)
        self.fail_on_methods = fail_on_methods or []

    def _check(self, method: str, path: str) -> None:
        if method in self.fail_on_methods:
            raise StorageError("Simulated storage failure", path)

    def read_file(self, path: str) -> bytes | None:
        self._check("read_file", path)
        return super().read_file(path)

    def write_file(self, path: str, data: bytes) -> None:
        self._check("write_file", path)
        super().write_file(path, data)

    def delete_file(self, path: str) -> None:
        self._check("delete_file", path)
        super().delete_file(path)
