"""
Test Configuration and Fixtures

Shared pytest fixtures for the board I/O tests.

Controllers are always built with injected mocks so no test touches the
real /sys or the Android property service.

To use pytest:
    pip install -e .[test]
    pytest tests/boardio/
"""

import pytest

from boardio.implementations.mock_accessor import MockFileAccessor
from boardio.implementations.mock_properties import MockPropertyStore
from boardio.resolver import PropertyResolver

# Property values used across the controller tests
LED_PATH = "/sys/class/leds/user1/"
PWM_PATH = "/sys/class/pwm/pwmchip0/pwm0/"
HWMON_PATH = "/sys/class/hwmon/hwmon0/temp1_input"
GPIO_BASE = "/sys/class/gpio"


# =============================================================================
# BACKEND FIXTURES
# =============================================================================

@pytest.fixture
def mock_accessor():
    """
    Provide a fresh in-memory sysfs for each test.

    Usage in test:
        def test_something(mock_accessor):
            mock_accessor.set_file("/sys/class/gpio/gpio12/value", "1\\n")
    """
    return MockFileAccessor()


@pytest.fixture
def mock_store():
    """
    Provide a property table with one device per namespace.

    Usage:
        def test_lookup(mock_store):
            mock_store.set_property("hw.gpio.extra", "/sys/class/gpio/gpio7/value")
    """
    return MockPropertyStore({
        "hw.gpio.user-led1": "/sys/class/gpio/gpio12/value",
        "hw.gpio.user-button": "/sys/class/gpio/gpio240/",
        "hw.gpio.broken": "/sys/class/leds/user1/",
        "hw.led.user1": LED_PATH,
        "hw.pwm.pwm2": PWM_PATH,
        "hw.hwmon.temp": HWMON_PATH,
    })


@pytest.fixture
def resolver(mock_store):
    return PropertyResolver(mock_store)


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================

@pytest.fixture
def gpio_controller(mock_accessor, resolver):
    """
    Provide GPIOController over mocks (permissive decoding).

    Usage:
        def test_gpio(gpio_controller, mock_accessor):
            gpio_controller.set_value(12, 1)
    """
    from boardio.controllers.gpio_controller import GPIOController

    return GPIOController(
        accessor=mock_accessor,
        resolver=resolver,
        strict=False,
        sysfs_base=GPIO_BASE,
    )


@pytest.fixture
def led_controller(mock_accessor, resolver):
    from boardio.controllers.led_controller import LEDController

    return LEDController(accessor=mock_accessor, resolver=resolver, strict=False)


@pytest.fixture
def pwm_controller(mock_accessor, resolver):
    from boardio.controllers.pwm_controller import PWMController

    return PWMController(accessor=mock_accessor, resolver=resolver, strict=False)


@pytest.fixture
def hwmon_controller(mock_accessor, resolver):
    from boardio.controllers.hwmon_controller import HwmonController

    return HwmonController(accessor=mock_accessor, resolver=resolver, strict=False)


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================

def pytest_configure(config):
    """
    Configure pytest with custom markers.

        pytest -m unit          # Only unit tests
        pytest -m integration   # Only integration tests
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (real files in tmp_path)")
