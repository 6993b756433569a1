"""
Board I/O Utilities Package

Exposes the shared parsing helpers used by all controllers.

Public API:
    Path utilities:
    - parse_gpio_number: Extract N from ".../gpio<N>/..."
    - gpio_attribute_path: Build "<base>/gpio<N>/<attribute>"

    Value codecs:
    - decode_int / encode_int / encode_bool
    - decode_brightness / decode_enable
    - decode_direction / encode_direction
    - decode_polarity / encode_polarity
    - decode_trigger_list / decode_active_trigger

Usage:
    from boardio.utils import parse_gpio_number

    number = parse_gpio_number("/sys/class/gpio/gpio12/value")  # 12
"""

from boardio.utils.path_parser import gpio_attribute_path, parse_gpio_number
from boardio.utils.value_codecs import (
    decode_active_trigger,
    decode_brightness,
    decode_direction,
    decode_enable,
    decode_int,
    decode_polarity,
    decode_trigger_list,
    encode_bool,
    encode_direction,
    encode_int,
    encode_polarity,
)

# Public API (sorted alphabetically)
__all__ = [
    "decode_active_trigger",
    "decode_brightness",
    "decode_direction",
    "decode_enable",
    "decode_int",
    "decode_polarity",
    "decode_trigger_list",
    "encode_bool",
    "encode_direction",
    "encode_int",
    "encode_polarity",
    "gpio_attribute_path",
    "parse_gpio_number",
]
