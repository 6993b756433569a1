"""
Device Controller Base

Shared wiring for the GPIO, LED, PWM and hwmon controllers: an injected
file accessor, an injected property resolver, and the decoding mode.
"""

import logging
from typing import Optional

from boardio.constants import PropertyNamespace
from boardio.errors import RejectedWriteError
from boardio.factory import create_accessor, create_resolver
from boardio.interfaces.file_accessor_interface import FileAccessorInterface
from boardio.resolver import PropertyResolver
from config.settings import STRICT_DECODE


class DeviceController:
    """
    Base class for one hardware class (one property namespace).

    Subclasses set NAMESPACE and build their operations on _read/_write.
    """

    NAMESPACE: PropertyNamespace

    def __init__(
        self,
        accessor: Optional[FileAccessorInterface] = None,
        resolver: Optional[PropertyResolver] = None,
        strict: Optional[bool] = None,
    ):
        """
        Initialize controller.

        Args:
            accessor: File accessor to use, or None to auto-create
            resolver: Property resolver to use, or None to auto-create
            strict: Raise UnrecognizedValueError on unexpected kernel text
                    (None = STRICT_DECODE setting)
        """
        self.logger = logging.getLogger(self.__class__.__module__)

        self.accessor = accessor or create_accessor()
        self.resolver = resolver or create_resolver()
        self.strict = STRICT_DECODE if strict is None else strict

    def get_hw_prop(self, name: str) -> str:
        """
        Raw property value for a device name ("" if unset).

        Equivalent to `getprop hw.<namespace>.<name>`.
        """
        return self.resolver.get(self.NAMESPACE, name)

    def _device_path(self, name: str) -> str:
        return self.resolver.resolve(self.NAMESPACE, name)

    def _read(self, path: str) -> str:
        return self.accessor.read_line(path)

    def _write(self, path: str, content: str, verify: bool = False) -> None:
        """
        Write a value, optionally reading it back.

        Raises:
            RejectedWriteError: If verify is set and the read-back differs
        """
        self.accessor.write_line(path, content)

        if verify:
            # sysfs drops the trailing newline of a write
            expected = content.strip()
            actual = self.accessor.read_line(path)
            if actual != expected:
                raise RejectedWriteError(path, expected, actual)
