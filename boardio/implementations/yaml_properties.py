"""
YAML Property Store

Property table loaded from a YAML file, for boards that run plain Linux
instead of Android. Accepts flat dotted keys or nested mappings:

    hw.gpio.user-led1: /sys/class/gpio/gpio12/value

    hw:
      gpio:
        user-led1: /sys/class/gpio/gpio12/value

Both forms produce the same key "hw.gpio.user-led1".
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from boardio.errors import PropertyStoreError
from boardio.interfaces.property_store_interface import PropertyStoreInterface
from config.settings import PROPERTIES_FILE


class YamlPropertyStore(PropertyStoreInterface):
    """
    Property store read once from a YAML file.

    Usage:
        store = YamlPropertyStore(Path("config/hw_properties.yaml"))
        path = store.get("hw.led.user1")
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize store.

        Args:
            config_path: Path to YAML property file (None = use settings)

        Raises:
            PropertyStoreError: If the file exists but is not valid YAML
                                or not a mapping
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or PROPERTIES_FILE)

        self._properties = self._load_properties()

        self.logger.info(
            f"YAML property store loaded {len(self._properties)} properties "
            f"from {self.config_path}",
        )

    def _load_properties(self) -> Dict[str, str]:
        """Load and flatten the property file"""
        if not self.config_path.exists():
            self.logger.warning(
                f"Property file not found at {self.config_path}. "
                f"No devices will resolve.",
            )
            return {}

        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise PropertyStoreError(
                f"Failed to load properties from {self.config_path}: {e}",
            ) from e

        if not isinstance(data, dict):
            raise PropertyStoreError(
                f"Property file {self.config_path} must contain a mapping, "
                f"got {type(data).__name__}",
            )

        properties: Dict[str, str] = {}
        _flatten(data, "", properties)
        return properties

    def get(self, key: str) -> str:
        """Look up a key ("" if unset)"""
        return self._properties.get(key, "")

    def is_available(self) -> bool:
        """File-based, not system properties"""
        return False

    def keys(self) -> list:
        """All known property keys, sorted"""
        return sorted(self._properties)


def _flatten(node: Any, prefix: str, out: Dict[str, str]) -> None:
    """Collapse nested mappings into dotted keys"""
    for key, value in node.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            _flatten(value, full_key, out)
        elif value is None:
            out[full_key] = ""
        else:
            out[full_key] = str(value)
