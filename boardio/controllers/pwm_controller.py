"""
PWM Controller

Controls PWM channels through /sys/class/pwm/pwmchip<X>/pwm<Y>/.

The property hw.pwm.<name> holds the channel directory WITH a trailing
slash; attribute file names are appended directly.

Driver constraints (enforced by the kernel, not here):
- duty_cycle must stay below period
- period must stay above duty_cycle, be non-negative and fit in 11 digits
Out-of-range writes are refused by the driver. Pass verify=True to read
the value back and get a RejectedWriteError instead of a silent no-op.
"""

from boardio.constants import (
    PWM_DUTY_CYCLE_FILE,
    PWM_ENABLE_FILE,
    PWM_PERIOD_FILE,
    PWM_POLARITY_FILE,
    PropertyNamespace,
    PwmPolarity,
)
from boardio.controllers.device_controller import DeviceController
from boardio.utils.value_codecs import (
    decode_enable,
    decode_int,
    decode_polarity,
    encode_bool,
    encode_int,
    encode_polarity,
)


class PWMController(DeviceController):
    """
    Named PWM channel access. Times are in nanoseconds.

    Usage:
        pwm = PWMController()
        pwm.set_period("pwm2", 1_000_000)
        pwm.set_duty_cycle("pwm2", 250_000)
        pwm.set_enabled("pwm2", True)
    """

    NAMESPACE = PropertyNamespace.PWM

    def _attribute_path(self, name: str, attribute: str) -> str:
        return self._device_path(name) + attribute

    def get_enabled(self, name: str) -> bool:
        """True only if enable reads exactly "1" """
        raw = self._read(self._attribute_path(name, PWM_ENABLE_FILE))
        return decode_enable(raw, self.strict)

    def set_enabled(self, name: str, enabled: bool, verify: bool = False) -> None:
        self._write(
            self._attribute_path(name, PWM_ENABLE_FILE),
            encode_bool(enabled),
            verify,
        )

    def get_polarity(self, name: str) -> PwmPolarity:
        """
        Current polarity.

        "normal" is NORMAL. Any other text is INVERSED, unless strict
        decoding is on.
        """
        raw = self._read(self._attribute_path(name, PWM_POLARITY_FILE))
        return decode_polarity(raw, self.strict)

    def set_polarity(self, name: str, polarity: PwmPolarity, verify: bool = False) -> None:
        """
        Set polarity. INVERSED acts as an inverter: a 50% duty cycle signal
        is phase shifted by 180 degrees.
        """
        self._write(
            self._attribute_path(name, PWM_POLARITY_FILE),
            encode_polarity(polarity),
            verify,
        )

    def get_duty_cycle(self, name: str) -> int:
        return decode_int(self._read(self._attribute_path(name, PWM_DUTY_CYCLE_FILE)))

    def set_duty_cycle(self, name: str, value: int, verify: bool = False) -> None:
        self._write(
            self._attribute_path(name, PWM_DUTY_CYCLE_FILE),
            encode_int(value),
            verify,
        )

    def get_period(self, name: str) -> int:
        return decode_int(self._read(self._attribute_path(name, PWM_PERIOD_FILE)))

    def set_period(self, name: str, value: int, verify: bool = False) -> None:
        self._write(
            self._attribute_path(name, PWM_PERIOD_FILE),
            encode_int(value),
            verify,
        )
