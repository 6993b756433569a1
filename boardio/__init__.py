"""
Board I/O Module

Named access to kernel sysfs hardware: GPIO pins, LEDs, PWM channels and
hwmon sensors. A device name (e.g. "user-led1") is resolved through the
system property table (hw.gpio.user-led1) to a sysfs path, then one line
of text is read from or written to that path.

Public API:
    - GPIOController, LEDController, PWMController, HwmonController
    - GpioDirection, PwmPolarity: enumerated values
    - PropertyResolver: device name → sysfs path
    - BoardFactory, create_accessor, create_resolver: backend selection
    - BoardIOError and subclasses: failure taxonomy

Usage:
    from boardio import GPIOController, GpioDirection, LEDController

    gpio = GPIOController()
    gpio.set_gpio("user-led1", GpioDirection.OUT, 1)

    led = LEDController()
    print(led.get_trigger("user1"))
"""

from boardio.constants import GpioDirection, PropertyNamespace, PwmPolarity
from boardio.controllers.gpio_controller import GPIOController
from boardio.controllers.hwmon_controller import HwmonController
from boardio.controllers.led_controller import LEDController
from boardio.controllers.pwm_controller import PWMController
from boardio.errors import (
    BoardIOError,
    GpioPathParseError,
    PropertyResolutionError,
    PropertyStoreError,
    RejectedWriteError,
    SysfsIOError,
    UnrecognizedValueError,
    ValueParseError,
)
from boardio.factory import BoardFactory, create_accessor, create_resolver
from boardio.resolver import PropertyResolver, property_key

__all__ = [
    # Exception classes
    "BoardIOError",
    "GpioPathParseError",
    "PropertyResolutionError",
    "PropertyStoreError",
    "RejectedWriteError",
    "SysfsIOError",
    "UnrecognizedValueError",
    "ValueParseError",
    # Classes and enums (sorted alphabetically)
    "BoardFactory",
    "GPIOController",
    "GpioDirection",
    "HwmonController",
    "LEDController",
    "PWMController",
    "PropertyNamespace",
    "PropertyResolver",
    "PwmPolarity",
    # Functions
    "create_accessor",
    "create_resolver",
    "property_key",
]
