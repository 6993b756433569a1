"""
Value Codecs

Conversions between raw sysfs text and typed values.

Two decoding modes exist for enumerated values:

- permissive (default): one exact token selects one value, ANY other text
  selects the other value. "in" is IN, everything else is OUT; "normal" is
  NORMAL, everything else is INVERSED; LED brightness "0" is off,
  everything else is on; PWM enable "1" is on, everything else is off.
- strict: text outside the token table raises UnrecognizedValueError.
"""

import re
from enum import Enum
from typing import Dict, List, TypeVar

from boardio.constants import (
    GPIO_DIRECTION_TOKENS,
    PWM_POLARITY_TOKENS,
    TOKEN_OFF,
    TOKEN_ON,
    TRIGGER_ACTIVE_CLOSE,
    TRIGGER_ACTIVE_OPEN,
    TRIGGER_SEPARATOR,
    GpioDirection,
    PwmPolarity,
)
from boardio.errors import UnrecognizedValueError, ValueParseError

E = TypeVar("E", bound=Enum)

_INTEGER = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# INTEGERS AND FLAGS
# =============================================================================

def decode_int(text: str) -> int:
    """
    Parse decimal integer text.

    Raises:
        ValueParseError: If text is not a decimal integer
    """
    if not _INTEGER.fullmatch(text):
        raise ValueParseError(f"Expected an integer, got '{text}'")
    return int(text)


def encode_int(value: int) -> str:
    """Format an integer as decimal text"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    return str(value)


def encode_bool(flag: bool) -> str:
    """True → "1", False → "0" """
    return TOKEN_ON if flag else TOKEN_OFF


def decode_brightness(text: str, strict: bool = False) -> bool:
    """
    LED brightness text to on/off.

    Permissive: anything but exactly "0" is on.
    Strict: must be an integer (any non-zero level is on).
    """
    if strict:
        return decode_int(text) != 0
    return text != TOKEN_OFF


def decode_enable(text: str, strict: bool = False) -> bool:
    """
    PWM enable text to on/off.

    Permissive: only exactly "1" is on.
    Strict: must be "0" or "1".
    """
    if strict and text not in (TOKEN_ON, TOKEN_OFF):
        raise UnrecognizedValueError(text, (TOKEN_OFF, TOKEN_ON))
    return text == TOKEN_ON


# =============================================================================
# ENUMERATIONS
# =============================================================================

def _decode_token(
    text: str,
    table: Dict[E, str],
    fallback: E,
    strict: bool,
) -> E:
    """Reverse lookup in a token table"""
    for member, token in table.items():
        if token == text:
            return member

    if strict:
        raise UnrecognizedValueError(text, table.values())
    return fallback


def decode_direction(text: str, strict: bool = False) -> GpioDirection:
    """ "in" → IN, "out" → OUT, anything else → OUT unless strict"""
    return _decode_token(text, GPIO_DIRECTION_TOKENS, GpioDirection.OUT, strict)


def encode_direction(direction: GpioDirection) -> str:
    return GPIO_DIRECTION_TOKENS[direction]


def decode_polarity(text: str, strict: bool = False) -> PwmPolarity:
    """ "normal" → NORMAL, "inversed" → INVERSED, anything else → INVERSED unless strict"""
    return _decode_token(text, PWM_POLARITY_TOKENS, PwmPolarity.INVERSED, strict)


def encode_polarity(polarity: PwmPolarity) -> str:
    return PWM_POLARITY_TOKENS[polarity]


# =============================================================================
# LED TRIGGERS
# =============================================================================

def decode_trigger_list(text: str) -> List[str]:
    """
    All trigger names, in kernel order, with the active marker removed.

    Example:
        >>> decode_trigger_list("none [timer] heartbeat")
        ['none', 'timer', 'heartbeat']
    """
    cleaned = text.replace(TRIGGER_ACTIVE_OPEN, "").replace(TRIGGER_ACTIVE_CLOSE, "")
    return cleaned.split(TRIGGER_SEPARATOR)


def decode_active_trigger(text: str) -> str:
    """
    The trigger between the first "[" and the first "]".

    Raises:
        ValueParseError: If text has no [...] marker

    Example:
        >>> decode_active_trigger("none [timer] heartbeat")
        'timer'
    """
    start = text.find(TRIGGER_ACTIVE_OPEN)
    end = text.find(TRIGGER_ACTIVE_CLOSE)
    if start < 0 or end < start:
        raise ValueParseError(f"No active trigger marked in '{text}'")
    return text[start + 1:end]
