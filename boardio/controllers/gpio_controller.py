"""
GPIO Controller

Reads and writes GPIO pins through /sys/class/gpio/gpio<N>/{value,direction}.

Every operation accepts either form of pin reference:
- int: the sysfs GPIO number (12 → /sys/class/gpio/gpio12/)
- str: a device name, resolved through hw.gpio.<name> and parsed with
  parse_gpio_number() before delegating to the number form

Pins must already be exported; export/unexport is not handled here.
"""

from typing import Optional, Union

from boardio.constants import (
    GPIO_DIRECTION_FILE,
    GPIO_VALUE_FILE,
    TOKEN_OFF,
    TOKEN_ON,
    GpioDirection,
    PropertyNamespace,
)
from boardio.controllers.device_controller import DeviceController
from boardio.interfaces.file_accessor_interface import FileAccessorInterface
from boardio.resolver import PropertyResolver
from boardio.utils.path_parser import gpio_attribute_path, parse_gpio_number
from boardio.utils.value_codecs import decode_direction, decode_int, encode_direction
from config.settings import GPIO_SYSFS_BASE

PinRef = Union[int, str]


class GPIOController(DeviceController):
    """
    GPIO pin access by number or by name.

    Usage:
        gpio = GPIOController()
        gpio.set_gpio("user-led1", GpioDirection.OUT, 1)
        level = gpio.get_value(240)
    """

    NAMESPACE = PropertyNamespace.GPIO

    def __init__(
        self,
        accessor: Optional[FileAccessorInterface] = None,
        resolver: Optional[PropertyResolver] = None,
        strict: Optional[bool] = None,
        sysfs_base: str = GPIO_SYSFS_BASE,
    ):
        super().__init__(accessor, resolver, strict)
        self.sysfs_base = sysfs_base

    # =========================================================================
    # PIN RESOLUTION
    # =========================================================================

    def resolve_number(self, name: str) -> int:
        """
        GPIO number for a device name.

        Raises:
            PropertyResolutionError: If hw.gpio.<name> is unset
            GpioPathParseError: If the property value has no gpio<N>/ segment
        """
        return parse_gpio_number(self._device_path(name))

    def _number(self, pin: PinRef) -> int:
        # bool is an int subclass; True would silently mean gpio1
        if isinstance(pin, bool):
            raise TypeError("GPIO pin must be an int number or a str name, not bool")
        if isinstance(pin, int):
            return pin
        if isinstance(pin, str):
            number = self.resolve_number(pin)
            self.logger.debug(f"GPIO '{pin}' is gpio{number}")
            return number
        raise TypeError(
            f"GPIO pin must be an int number or a str name, not {type(pin).__name__}",
        )

    def value_path(self, pin: PinRef) -> str:
        return gpio_attribute_path(self.sysfs_base, self._number(pin), GPIO_VALUE_FILE)

    def direction_path(self, pin: PinRef) -> str:
        return gpio_attribute_path(
            self.sysfs_base,
            self._number(pin),
            GPIO_DIRECTION_FILE,
        )

    # =========================================================================
    # VALUE
    # =========================================================================

    def get_value(self, pin: PinRef) -> int:
        """
        Current level of the pin.

        Returns:
            The integer the kernel reports (0 or 1)
        """
        return decode_int(self._read(self.value_path(pin)))

    def set_value(self, pin: PinRef, value: int) -> None:
        """
        Drive the pin. 0 writes "0"; any other value writes "1".
        """
        self._write(self.value_path(pin), TOKEN_OFF if value == 0 else TOKEN_ON)

    # =========================================================================
    # DIRECTION
    # =========================================================================

    def get_direction(self, pin: PinRef) -> GpioDirection:
        """
        Current direction of the pin.

        "in" is IN. Any other text is OUT, unless strict decoding is on.
        """
        return decode_direction(self._read(self.direction_path(pin)), self.strict)

    def set_direction(self, pin: PinRef, direction: GpioDirection) -> None:
        self._write(self.direction_path(pin), encode_direction(direction))

    # =========================================================================
    # COMPOSITE
    # =========================================================================

    def set_gpio(self, pin: PinRef, direction: GpioDirection, value: int) -> None:
        """
        Configure direction, then value.

        Direction is written first: some drivers reset the level when the
        direction changes.
        """
        number = self._number(pin)
        self.set_direction(number, direction)
        self.set_value(number, value)
        self.logger.info(
            f"gpio{number} set to {encode_direction(direction)}, "
            f"value {TOKEN_OFF if value == 0 else TOKEN_ON}",
        )
