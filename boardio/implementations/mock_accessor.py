"""
Mock File Accessor Implementation

In-memory sysfs for development and testing without a board.

This is a "Test Double" (specifically, a "Fake" - it has working logic
but no kernel behind it). Reads follow the same rules as the real
accessor: first line only, stripped, and a missing or empty file raises
SysfsIOError instead of returning an empty value.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from boardio.errors import SysfsIOError
from boardio.interfaces.file_accessor_interface import FileAccessorInterface


class MockFileAccessor(FileAccessorInterface):
    """
    Simulated sysfs that stores attribute contents in a dict.

    Unlike real sysfs, writes are stored as-is unless a driver is
    modelled with on_write()/reject_writes() or a failure is simulated
    with fail_path().
    """

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self.logger = logging.getLogger(__name__)

        # Key: path, Value: raw file content
        self._files: Dict[str, str] = dict(files or {})

        # Paths that raise SysfsIOError on any access
        self._failing: Dict[str, str] = {}

        # Driver models: handler(old_content, written) -> new content
        self._write_handlers: Dict[str, Callable[[Optional[str], str], Optional[str]]] = {}

        # Writes in call order: (path, content)
        self.write_history: List[Tuple[str, str]] = []

        self.logger.info("Mock file accessor initialized (simulation mode)")

    def read_line(self, path: str) -> str:
        """Read first line of a simulated file"""
        self._check_failure(path)

        if path not in self._files:
            raise SysfsIOError(path, "Failed to read (No such file or directory)")

        content = self._files[path]
        if content == "":
            raise SysfsIOError(path, "Attribute is empty")

        value = content.splitlines()[0].strip()
        self.logger.debug(f"[MOCK] read {path} -> '{value}'")
        return value

    def write_line(self, path: str, content: str) -> None:
        """Overwrite a simulated file"""
        self._check_failure(path)

        handler = self._write_handlers.get(path)
        if handler is None:
            self._files[path] = content
        else:
            new_content = handler(self._files.get(path), content)
            if new_content is not None:
                self._files[path] = new_content

        self.write_history.append((path, content))
        self.logger.debug(f"[MOCK] write {path} <- '{content}'")

    def is_available(self) -> bool:
        """Mock accessor is simulated"""
        return False

    # =========================================================================
    # TESTING HELPER METHODS (not part of FileAccessorInterface)
    # =========================================================================

    def set_file(self, path: str, content: str) -> None:
        """Create or replace a simulated file as the kernel would"""
        self._files[path] = content

    def get_file(self, path: str) -> Optional[str]:
        """Raw content of a simulated file, or None if missing"""
        return self._files.get(path)

    def remove_file(self, path: str) -> None:
        """Simulate a device disappearing"""
        self._files.pop(path, None)

    def fail_path(self, path: str, reason: str = "Input/output error") -> None:
        """Make every access to path raise SysfsIOError"""
        self._failing[path] = reason

    def on_write(
        self,
        path: str,
        handler: Callable[[Optional[str], str], Optional[str]],
    ) -> None:
        """
        Model how a driver stores writes to path.

        handler(old_content, written) returns the new file content
        (None keeps the file unchanged).
        """
        self._write_handlers[path] = handler

    def reject_writes(self, path: str) -> None:
        """Simulate a driver that silently ignores writes (value unchanged)"""
        self.on_write(path, lambda old, written: old)

    def clear_failures(self) -> None:
        self._failing.clear()

    def _check_failure(self, path: str) -> None:
        if path in self._failing:
            raise SysfsIOError(path, f"Simulated failure ({self._failing[path]})")
