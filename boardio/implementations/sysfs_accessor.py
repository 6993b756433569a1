"""
Sysfs File Accessor

Concrete implementation of FileAccessorInterface for the kernel sysfs.

Every call is one open/read-or-write/close sequence. Failures are raised
as SysfsIOError with the original OSError chained, never logged and
turned into an empty value.

Locking is in-process only: one lock per path, shared by all accessors,
makes each single call atomic with respect to other threads of this
process. Other processes writing the same attribute still interleave (last
write wins).
"""

import logging
import threading
from contextlib import nullcontext
from typing import Dict

from boardio.errors import SysfsIOError
from boardio.interfaces.file_accessor_interface import FileAccessorInterface


class SysfsFileAccessor(FileAccessorInterface):
    """
    Line-oriented access to real sysfs attribute files.

    Usage:
        accessor = SysfsFileAccessor()
        accessor.write_line("/sys/class/gpio/gpio12/value", "1")
        level = accessor.read_line("/sys/class/gpio/gpio12/value")
    """

    # Shared by every accessor in the process. Key: path, Value: lock
    _locks: Dict[str, threading.Lock] = {}
    _locks_guard = threading.Lock()

    def __init__(self, per_path_locking: bool = True):
        """
        Initialize accessor.

        Args:
            per_path_locking: Serialize calls on the same path within
                              this process
        """
        self.logger = logging.getLogger(__name__)
        self.per_path_locking = per_path_locking

        self.logger.info(
            f"Sysfs accessor initialized (per-path locking: {per_path_locking})",
        )

    def read_line(self, path: str) -> str:
        """Read and strip the first line of a sysfs attribute"""
        with self._lock_for(path):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    line = f.readline()
            except OSError as e:
                raise SysfsIOError(path, f"Failed to read ({e.strerror or e})") from e
            except UnicodeDecodeError as e:
                raise SysfsIOError(path, "Attribute is not text") from e

        # readline() only returns "" at end of file - no line at all
        if line == "":
            raise SysfsIOError(path, "Attribute is empty")

        value = line.strip()
        self.logger.debug(f"read {path} -> '{value}'")
        return value

    def write_line(self, path: str, content: str) -> None:
        """Overwrite a sysfs attribute with content (no newline added)"""
        with self._lock_for(path):
            try:
                with open(path, "w", encoding="utf-8") as f:
                    f.write(content)
            except OSError as e:
                raise SysfsIOError(path, f"Failed to write '{content}' ({e.strerror or e})") from e

        self.logger.debug(f"write {path} <- '{content}'")

    def is_available(self) -> bool:
        """Backed by real files"""
        return True

    def _lock_for(self, path: str):
        """Get (or create) the lock for a path"""
        if not self.per_path_locking:
            return nullcontext()

        with self._locks_guard:
            lock = self._locks.get(path)
            if lock is None:
                lock = threading.Lock()
                self._locks[path] = lock
            return lock
