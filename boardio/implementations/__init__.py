"""
Board I/O Implementations Package

Exposes concrete implementations of the accessor and property store
interfaces.
"""

from boardio.implementations.android_properties import AndroidPropertyStore
from boardio.implementations.mock_accessor import MockFileAccessor
from boardio.implementations.mock_properties import MockPropertyStore
from boardio.implementations.sysfs_accessor import SysfsFileAccessor
from boardio.implementations.yaml_properties import YamlPropertyStore

# Public API (sorted alphabetically)
__all__ = [
    "AndroidPropertyStore",
    "MockFileAccessor",
    "MockPropertyStore",
    "SysfsFileAccessor",
    "YamlPropertyStore",
]
