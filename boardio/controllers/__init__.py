"""
Board I/O Controllers Package

One controller per hardware class. Each resolves device names through
the property table and performs a single sysfs read or write per call.
"""

from boardio.controllers.device_controller import DeviceController
from boardio.controllers.gpio_controller import GPIOController
from boardio.controllers.hwmon_controller import HwmonController
from boardio.controllers.led_controller import LEDController
from boardio.controllers.pwm_controller import PWMController

# Public API (sorted alphabetically)
__all__ = [
    "DeviceController",
    "GPIOController",
    "HwmonController",
    "LEDController",
    "PWMController",
]
