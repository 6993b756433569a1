"""
Property Resolver Tests

To run these tests:
    pytest tests/boardio/test_resolver.py -v
"""

import pytest

from boardio.constants import PropertyNamespace
from boardio.errors import PropertyResolutionError
from boardio.implementations.mock_properties import MockPropertyStore
from boardio.resolver import PropertyResolver, property_key


@pytest.mark.unit
@pytest.mark.parametrize(
    "namespace, name, expected",
    [
        ("gpio", "user-led1", "hw.gpio.user-led1"),
        (PropertyNamespace.LED, "user1", "hw.led.user1"),
        (PropertyNamespace.PWM, "pwm2", "hw.pwm.pwm2"),
        ("hwmon", "temp", "hw.hwmon.temp"),
    ],
)
def test_property_key(namespace, name, expected):
    assert property_key(namespace, name) == expected


@pytest.mark.unit
def test_property_key_rejects_unknown_namespace():
    with pytest.raises(ValueError):
        property_key("spi", "bus0")


@pytest.mark.unit
def test_custom_prefix():
    store = MockPropertyStore({"ro.board.led.user1": "/sys/class/leds/user1/"})
    resolver = PropertyResolver(store, prefix="ro.board")

    assert resolver.resolve("led", "user1") == "/sys/class/leds/user1/"


@pytest.mark.unit
def test_resolve_returns_path(resolver):
    assert resolver.resolve(PropertyNamespace.PWM, "pwm2") == "/sys/class/pwm/pwmchip0/pwm0/"


@pytest.mark.unit
@pytest.mark.parametrize("value", ["", "   "])
def test_resolve_blank_raises(mock_store, resolver, value):
    mock_store.set_property("hw.led.blank", value)

    with pytest.raises(PropertyResolutionError) as exc_info:
        resolver.resolve("led", "blank")

    assert exc_info.value.key == "hw.led.blank"


@pytest.mark.unit
def test_get_returns_raw_empty_value(resolver):
    assert resolver.get("led", "missing") == ""
