"""
Board I/O Constants

This file centralizes the sysfs attribute names, property namespaces and
the exact wire tokens the kernel uses for enumerated values.

Wire tokens live in explicit tables instead of being derived from enum
names, so renaming a Python identifier can never change what is written
to the kernel.
"""

from enum import Enum

# =============================================================================
# PROPERTY NAMESPACES
# =============================================================================


class PropertyNamespace(Enum):
    """Hardware classes that have their own property namespace"""

    GPIO = "gpio"
    LED = "led"
    PWM = "pwm"
    HWMON = "hwmon"


# =============================================================================
# SYSFS ATTRIBUTE FILES
# =============================================================================

# GPIO: /sys/class/gpio/gpio<N>/<attribute>
GPIO_DIR_PREFIX = "gpio"
GPIO_VALUE_FILE = "value"
GPIO_DIRECTION_FILE = "direction"

# LED: <resolved-path><attribute>
LED_BRIGHTNESS_FILE = "brightness"
LED_TRIGGER_FILE = "trigger"

# PWM: <resolved-path><attribute>
PWM_ENABLE_FILE = "enable"
PWM_POLARITY_FILE = "polarity"
PWM_DUTY_CYCLE_FILE = "duty_cycle"
PWM_PERIOD_FILE = "period"

# =============================================================================
# WIRE TOKENS
# =============================================================================

TOKEN_ON = "1"
TOKEN_OFF = "0"

# Active LED trigger is reported as "none [timer] heartbeat"
TRIGGER_ACTIVE_OPEN = "["
TRIGGER_ACTIVE_CLOSE = "]"
TRIGGER_SEPARATOR = " "


class GpioDirection(Enum):
    """Direction of a GPIO pin"""

    IN = "in"
    OUT = "out"


class PwmPolarity(Enum):
    """Polarity of a PWM channel"""

    NORMAL = "normal"
    INVERSED = "inversed"


# Exact kernel text for each value
GPIO_DIRECTION_TOKENS = {
    GpioDirection.IN: "in",
    GpioDirection.OUT: "out",
}

PWM_POLARITY_TOKENS = {
    PwmPolarity.NORMAL: "normal",
    PwmPolarity.INVERSED: "inversed",
}
