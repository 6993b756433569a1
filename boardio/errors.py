"""
Board I/O Exceptions

Every failure raised by this package derives from BoardIOError, so callers
can catch the whole family or a single kind:

    try:
        gpio.get_value("user-button")
    except GpioPathParseError:
        ...  # hw.gpio.user-button is misconfigured
    except SysfsIOError:
        ...  # device unreachable
"""

from typing import Optional


class BoardIOError(Exception):
    """Base class for all board I/O errors"""


class PropertyResolutionError(BoardIOError):
    """A device name has no (or an empty) entry in the property table"""

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Property '{key}' is not set")


class PropertyStoreError(BoardIOError):
    """The property backend itself cannot be queried"""


class SysfsIOError(BoardIOError):
    """
    A sysfs attribute could not be opened, read or written.

    The original OSError (if any) is chained as __cause__.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class RejectedWriteError(BoardIOError):
    """The driver accepted the write call but the value did not change"""

    def __init__(self, path: str, expected: str, actual: str):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Write to {path} rejected by driver "
            f"(wrote '{expected}', reads back '{actual}')",
        )


class ValueParseError(BoardIOError, ValueError):
    """Text from sysfs or from the property table could not be parsed"""


class GpioPathParseError(ValueParseError):
    """A GPIO property value does not end in a gpio<N>/ path segment"""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot extract GPIO number from '{path}': {reason}")


class UnrecognizedValueError(ValueParseError):
    """Strict decoding met a token outside the expected set"""

    def __init__(self, text: str, expected):
        self.text = text
        self.expected = tuple(expected)
        super().__init__(
            f"Unrecognized value '{text}' (expected one of {list(self.expected)})",
        )
