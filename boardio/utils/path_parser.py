"""
GPIO Path Parser

Recovers the sysfs GPIO number from a property value such as
"/sys/class/gpio/gpio12/value".

Rule:
    The number is the text after the LAST "gpio" and before the LAST "/".
    It must be plain decimal digits.

Examples:
    "/sys/class/gpio/gpio12/value"    → 12
    "/sys/class/gpio/gpio240/"        → 240
    "/sys/class/gpio/gpio12"          → GpioPathParseError (no "/" after it)
    "/sys/class/leds/user1/"          → GpioPathParseError (no "gpio")
"""

import re

from boardio.constants import GPIO_DIR_PREFIX
from boardio.errors import GpioPathParseError

_DIGITS = re.compile(r"[0-9]+")


def parse_gpio_number(path: str) -> int:
    """
    Extract the GPIO number from a resolved sysfs path.

    Args:
        path: Property value naming a file or directory under gpio<N>/

    Returns:
        The GPIO number N

    Raises:
        GpioPathParseError: If the path has no gpio<N>/ final segment
    """
    marker = path.rfind(GPIO_DIR_PREFIX)
    if marker < 0:
        raise GpioPathParseError(path, f"no '{GPIO_DIR_PREFIX}' segment")

    start = marker + len(GPIO_DIR_PREFIX)
    end = path.rfind("/")
    if end < start:
        raise GpioPathParseError(path, "no '/' after the GPIO number")

    number_text = path[start:end]
    if not _DIGITS.fullmatch(number_text):
        raise GpioPathParseError(path, f"'{number_text}' is not a GPIO number")

    return int(number_text)


def gpio_attribute_path(base: str, number: int, attribute: str) -> str:
    """
    Build the path of a GPIO attribute file.

    Example:
        >>> gpio_attribute_path("/sys/class/gpio", 12, "value")
        '/sys/class/gpio/gpio12/value'
    """
    return f"{base.rstrip('/')}/{GPIO_DIR_PREFIX}{number}/{attribute}"
