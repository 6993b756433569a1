"""
Property Store Interface - Abstract Key/Value Layer

The property store maps keys such as "hw.gpio.user-led1" to sysfs paths.
On Android this is the system property table; elsewhere it can be a YAML
file or an in-memory dict for tests.
"""

from abc import ABC, abstractmethod


class PropertyStoreInterface(ABC):
    """Read-only view of a system-wide property table"""

    @abstractmethod
    def get(self, key: str) -> str:
        """
        Look up a property value.

        Args:
            key: Full property key (e.g. "hw.led.user1")

        Returns:
            The property value, or "" if the property is not set

        Raises:
            PropertyStoreError: If the backend cannot be queried at all
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the store is backed by the real system property service.

        Returns:
            True for system properties, False for file or in-memory tables
        """
