"""
Property Store Tests

Tests for the property backends:
- YAML file (flat and nested keys, missing and malformed files)
- Android getprop wrapper (subprocess mocked)
- In-memory mock

To run these tests:
    pytest tests/boardio/implementations/test_property_stores.py -v
"""

import subprocess
from unittest.mock import patch

import pytest

from boardio.errors import PropertyStoreError
from boardio.implementations.android_properties import AndroidPropertyStore
from boardio.implementations.mock_properties import MockPropertyStore
from boardio.implementations.yaml_properties import YamlPropertyStore


# =============================================================================
# YAML STORE
# =============================================================================

@pytest.mark.unit
def test_yaml_nested_and_flat_keys(tmp_path):
    config = tmp_path / "hw_properties.yaml"
    config.write_text(
        "hw:\n"
        "  gpio:\n"
        "    user-led1: /sys/class/gpio/gpio12/value\n"
        "  led:\n"
        "    user1: /sys/class/leds/user1/\n"
        "hw.hwmon.temp: /sys/class/hwmon/hwmon0/temp1_input\n",
    )

    store = YamlPropertyStore(config)

    assert store.get("hw.gpio.user-led1") == "/sys/class/gpio/gpio12/value"
    assert store.get("hw.led.user1") == "/sys/class/leds/user1/"
    assert store.get("hw.hwmon.temp") == "/sys/class/hwmon/hwmon0/temp1_input"
    assert store.get("hw.pwm.none") == ""
    assert store.keys() == ["hw.gpio.user-led1", "hw.hwmon.temp", "hw.led.user1"]
    assert store.is_available() is False


@pytest.mark.unit
def test_yaml_missing_file_is_empty_table(tmp_path):
    store = YamlPropertyStore(tmp_path / "absent.yaml")

    assert store.get("hw.gpio.user-led1") == ""


@pytest.mark.unit
def test_yaml_null_value_reads_as_unset(tmp_path):
    config = tmp_path / "hw_properties.yaml"
    config.write_text("hw.led.user2:\n")

    assert YamlPropertyStore(config).get("hw.led.user2") == ""


@pytest.mark.unit
@pytest.mark.parametrize("content", ["hw: [unclosed\n", "- just\n- a list\n"])
def test_yaml_malformed_file(tmp_path, content):
    config = tmp_path / "hw_properties.yaml"
    config.write_text(content)

    with pytest.raises(PropertyStoreError):
        YamlPropertyStore(config)


@pytest.mark.unit
def test_shipped_property_file_loads():
    """config/hw_properties.yaml parses and follows the key layout"""
    from config.settings import PROPERTIES_FILE

    store = YamlPropertyStore(PROPERTIES_FILE)

    assert store.get("hw.gpio.user-led1").endswith("/value")
    assert store.get("hw.led.user1").endswith("/")


# =============================================================================
# ANDROID STORE
# =============================================================================

@pytest.mark.unit
def test_android_store_requires_getprop():
    with patch("boardio.implementations.android_properties.shutil.which", return_value=None):
        with pytest.raises(PropertyStoreError):
            AndroidPropertyStore()


@pytest.fixture
def android_store():
    with patch(
        "boardio.implementations.android_properties.shutil.which",
        return_value="/system/bin/getprop",
    ):
        yield AndroidPropertyStore(timeout=1.0)


@pytest.mark.unit
def test_android_get_runs_getprop(android_store):
    completed = subprocess.CompletedProcess(
        args=[], returncode=0, stdout="/sys/class/leds/user1/\n", stderr="",
    )
    with patch("subprocess.run", return_value=completed) as run:
        value = android_store.get("hw.led.user1")

    assert value == "/sys/class/leds/user1/"
    assert run.call_args.args[0] == ["/system/bin/getprop", "hw.led.user1"]


@pytest.mark.unit
def test_android_unset_property_is_empty(android_store):
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="\n", stderr="")
    with patch("subprocess.run", return_value=completed):
        assert android_store.get("hw.led.none") == ""


@pytest.mark.unit
def test_android_getprop_failure(android_store):
    completed = subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="boom")
    with patch("subprocess.run", return_value=completed):
        with pytest.raises(PropertyStoreError):
            android_store.get("hw.led.user1")


@pytest.mark.unit
def test_android_getprop_timeout(android_store):
    with patch("subprocess.run", side_effect=subprocess.TimeoutExpired("getprop", 1.0)):
        with pytest.raises(PropertyStoreError):
            android_store.get("hw.led.user1")


# =============================================================================
# MOCK STORE
# =============================================================================

@pytest.mark.unit
def test_mock_store_records_lookups():
    store = MockPropertyStore()
    store.set_property("hw.pwm.pwm2", "/sys/class/pwm/pwmchip0/pwm0/")

    assert store.get("hw.pwm.pwm2") == "/sys/class/pwm/pwmchip0/pwm0/"
    assert store.get("hw.pwm.other") == ""
    assert store.lookups == ["hw.pwm.pwm2", "hw.pwm.other"]
