"""
Mock Property Store Implementation

In-memory property table for tests. Unset keys return "" exactly like
the Android property service.
"""

import logging
from typing import Dict, Optional

from boardio.interfaces.property_store_interface import PropertyStoreInterface


class MockPropertyStore(PropertyStoreInterface):
    """Simulated property table backed by a dict"""

    def __init__(self, properties: Optional[Dict[str, str]] = None):
        self.logger = logging.getLogger(__name__)
        self._properties: Dict[str, str] = dict(properties or {})

        # Keys looked up, in call order
        self.lookups: list = []

        self.logger.info("Mock property store initialized (simulation mode)")

    def get(self, key: str) -> str:
        """Look up a key ("" if unset)"""
        self.lookups.append(key)
        return self._properties.get(key, "")

    def is_available(self) -> bool:
        """Mock store is simulated"""
        return False

    # =========================================================================
    # TESTING HELPER METHODS (not part of PropertyStoreInterface)
    # =========================================================================

    def set_property(self, key: str, value: str) -> None:
        """Equivalent of `setprop key value`"""
        self._properties[key] = value

    def clear(self) -> None:
        self._properties.clear()
        self.lookups.clear()
