"""
Hwmon Controller

Reads hardware monitor sensors. Unlike LED and PWM, the property
hw.hwmon.<name> points directly at the value file (e.g.
/sys/class/hwmon/hwmon0/temp1_input), so no attribute is appended.
"""

from boardio.constants import PropertyNamespace
from boardio.controllers.device_controller import DeviceController
from boardio.utils.value_codecs import decode_int


class HwmonController(DeviceController):
    """Named sensor readings"""

    NAMESPACE = PropertyNamespace.HWMON

    def get_value(self, name: str) -> int:
        """
        Current sensor reading.

        Returns:
            The integer the kernel reports; the unit (millivolts,
            millidegrees, ...) depends on the sensor
        """
        return decode_int(self._read(self._device_path(name)))
