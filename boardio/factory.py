"""
Board I/O Factory

Factory pattern for creating the external-store implementations.
Automatically selects real or mock implementations based on availability.

- File accessor: real sysfs when SYSFS_ROOT exists, in-memory mock otherwise
- Property store: Android getprop when present, YAML property file otherwise

Controllers call these when no accessor/resolver is injected, so they
never need to know which backend they run on.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from boardio.errors import PropertyStoreError
from boardio.implementations.android_properties import AndroidPropertyStore
from boardio.implementations.mock_accessor import MockFileAccessor
from boardio.implementations.mock_properties import MockPropertyStore
from boardio.implementations.sysfs_accessor import SysfsFileAccessor
from boardio.implementations.yaml_properties import YamlPropertyStore
from boardio.interfaces.file_accessor_interface import FileAccessorInterface
from boardio.interfaces.property_store_interface import PropertyStoreInterface
from boardio.resolver import PropertyResolver
from config.settings import (
    PROPERTIES_FILE,
    PROPERTY_BACKEND,
    SYSFS_PER_PATH_LOCKING,
    SYSFS_ROOT,
)

# Type aliases for better type hints
HardwareMode = Literal["auto", "real", "mock"]
PropertyBackend = Literal["auto", "android", "yaml", "mock"]


class BoardFactory:
    """
    Factory for creating accessor and property store implementations.

    Usage:
        # Auto-detect
        accessor = BoardFactory.create_accessor()
        resolver = BoardFactory.create_resolver()

        # Force mocks (useful for testing)
        accessor = BoardFactory.create_accessor(mode="mock")
        store = BoardFactory.create_property_store(backend="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_accessor(
        cls,
        mode: HardwareMode = "auto",
        per_path_locking: bool = SYSFS_PER_PATH_LOCKING,
    ) -> FileAccessorInterface:
        """
        Create a file accessor.

        Args:
            mode: "auto" (detect), "real" (force sysfs), "mock" (force simulation)
            per_path_locking: Passed to the real accessor

        Returns:
            FileAccessorInterface implementation

        Raises:
            RuntimeError: If mode="real" but sysfs is not mounted
        """
        if mode == "mock":
            cls._logger.info("Creating Mock file accessor (forced)")
            return MockFileAccessor()

        sysfs_present = Path(SYSFS_ROOT).is_dir()

        if mode == "real":
            if not sysfs_present:
                raise RuntimeError(
                    f"Real sysfs requested but {SYSFS_ROOT} is not available",
                )
            cls._logger.info("Creating sysfs file accessor (forced)")
            return SysfsFileAccessor(per_path_locking=per_path_locking)

        if mode != "auto":
            raise ValueError(f"Unknown hardware mode: {mode}")

        # mode == "auto" - real if sysfs exists, mock otherwise
        if sysfs_present:
            cls._logger.info("Creating sysfs file accessor (auto-detected)")
            return SysfsFileAccessor(per_path_locking=per_path_locking)

        cls._logger.warning(
            f"{SYSFS_ROOT} not available, using Mock file accessor",
        )
        return MockFileAccessor()

    @classmethod
    def create_property_store(
        cls,
        backend: PropertyBackend = PROPERTY_BACKEND,
        properties_file: Optional[Path] = None,
    ) -> PropertyStoreInterface:
        """
        Create a property store.

        Args:
            backend: "auto" (Android if available, else YAML), "android",
                     "yaml" or "mock"
            properties_file: YAML file for the yaml backend (None = settings)

        Returns:
            PropertyStoreInterface implementation

        Raises:
            RuntimeError: If backend="android" but getprop is not available
            PropertyStoreError: If the YAML property file is malformed
        """
        if backend == "mock":
            cls._logger.info("Creating Mock property store (forced)")
            return MockPropertyStore()

        if backend == "yaml":
            cls._logger.info("Creating YAML property store (forced)")
            return YamlPropertyStore(properties_file or PROPERTIES_FILE)

        if backend == "android":
            try:
                store = AndroidPropertyStore()
                cls._logger.info("Creating Android property store (forced)")
                return store
            except PropertyStoreError as e:
                raise RuntimeError(
                    f"Android properties requested but not available: {e}",
                ) from e

        if backend != "auto":
            raise ValueError(f"Unknown property backend: {backend}")

        # backend == "auto" - try Android first, fall back to YAML
        try:
            store = AndroidPropertyStore()
            cls._logger.info("Creating Android property store (auto-detected)")
            return store
        except PropertyStoreError as e:
            cls._logger.warning(
                f"Android properties not available ({e}), using YAML property file",
            )
            return YamlPropertyStore(properties_file or PROPERTIES_FILE)

    @classmethod
    def create_resolver(
        cls,
        backend: PropertyBackend = PROPERTY_BACKEND,
        properties_file: Optional[Path] = None,
    ) -> PropertyResolver:
        """Create a PropertyResolver over a new property store"""
        store = cls.create_property_store(backend, properties_file)
        return PropertyResolver(store)

    @classmethod
    def is_real_hardware_available(cls) -> dict[str, bool]:
        """
        Check which real backends are available.

        Returns:
            {'sysfs': True/False, 'properties': True/False}
        """
        status = {
            "sysfs": Path(SYSFS_ROOT).is_dir(),
            "properties": False,
        }

        try:
            status["properties"] = AndroidPropertyStore().is_available()
        except PropertyStoreError:
            pass

        return status


# Convenience functions for quick creation


def create_accessor(force_mock: bool = False) -> FileAccessorInterface:
    """
    Quick accessor creation with simple mock override.

    Example:
        accessor = create_accessor()
        accessor = create_accessor(force_mock=True)  # tests
    """
    mode = "mock" if force_mock else "auto"
    return BoardFactory.create_accessor(mode=mode)


def create_resolver(force_mock: bool = False) -> PropertyResolver:
    """
    Quick resolver creation with simple mock override.

    Example:
        resolver = create_resolver()
        resolver = create_resolver(force_mock=True)  # empty property table
    """
    backend = "mock" if force_mock else PROPERTY_BACKEND
    return BoardFactory.create_resolver(backend=backend)
