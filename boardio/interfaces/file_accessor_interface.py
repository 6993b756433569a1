"""
File Accessor Interface - Abstract Sysfs Layer

This defines the contract that any sysfs file accessor must follow.
Controllers only ever read one line or overwrite one value, so the
contract is exactly those two operations.

Why use an abstract interface?
1. Testability: Can swap real sysfs with an in-memory fake for tests
2. Simulation: Can run controller logic on a development machine
3. Type safety: mypy can check controllers use the accessor correctly
"""

from abc import ABC, abstractmethod


class FileAccessorInterface(ABC):
    """
    Abstract base class for line-oriented sysfs access.

    Each call performs one open/close pair. No buffering, no retries.
    """

    @abstractmethod
    def read_line(self, path: str) -> str:
        """
        Read the first line of a file, stripped of surrounding whitespace.

        Args:
            path: Absolute path of the sysfs attribute

        Returns:
            First line of the file without leading/trailing whitespace

        Raises:
            SysfsIOError: If the file cannot be opened or read, or has no line
        """

    @abstractmethod
    def write_line(self, path: str, content: str) -> None:
        """
        Replace the whole content of a file with the given text.

        No newline is appended.

        Args:
            path: Absolute path of the sysfs attribute
            content: Text to write

        Raises:
            SysfsIOError: If the file cannot be opened or written
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the accessor is backed by a real kernel sysfs.

        Returns:
            True for real sysfs, False if simulated
        """
