"""
LED Controller

Controls kernel LEDs through /sys/class/leds/<led>/{brightness,trigger}.

The property hw.led.<name> holds the LED directory WITH a trailing slash;
attribute file names are appended directly.

Triggers:
    The trigger file lists every trigger the driver offers, with the active
    one in brackets: "none [timer] heartbeat". Writing a name that is not
    in that list makes the kernel reject the write and keep the old one.
"""

from typing import List

from boardio.constants import (
    LED_BRIGHTNESS_FILE,
    LED_TRIGGER_FILE,
    PropertyNamespace,
)
from boardio.controllers.device_controller import DeviceController
from boardio.errors import RejectedWriteError
from boardio.utils.value_codecs import (
    decode_active_trigger,
    decode_brightness,
    decode_trigger_list,
    encode_bool,
)


class LEDController(DeviceController):
    """
    Named LED access.

    Usage:
        led = LEDController()
        led.set_trigger("user1", "heartbeat")
        led.set_value("user2", True)
    """

    NAMESPACE = PropertyNamespace.LED

    def _attribute_path(self, name: str, attribute: str) -> str:
        return self._device_path(name) + attribute

    def get_all_triggers(self, name: str) -> List[str]:
        """
        Every trigger the LED driver offers, active one included.

        The active marker is dropped; use get_trigger() for that.
        """
        return decode_trigger_list(self._read(self._attribute_path(name, LED_TRIGGER_FILE)))

    def set_value(self, name: str, on: bool) -> None:
        """
        Turn the LED on or off.

        Turning it off also clears the active trigger (kernel behaviour).
        """
        self._write(self._attribute_path(name, LED_BRIGHTNESS_FILE), encode_bool(on))

    def get_value(self, name: str) -> bool:
        """True unless brightness reads exactly "0" (any integer level when strict)"""
        raw = self._read(self._attribute_path(name, LED_BRIGHTNESS_FILE))
        return decode_brightness(raw, self.strict)

    def get_trigger(self, name: str) -> str:
        """
        Name of the active trigger.

        Raises:
            ValueParseError: If no trigger is marked active
        """
        return decode_active_trigger(self._read(self._attribute_path(name, LED_TRIGGER_FILE)))

    def set_trigger(self, name: str, trigger: str, verify: bool = False) -> None:
        """
        Select a trigger.

        Args:
            name: LED device name
            trigger: Trigger name, written verbatim
            verify: Read the trigger back and raise if it did not change

        Raises:
            RejectedWriteError: If verify is set and the driver kept
                                another trigger
        """
        path = self._attribute_path(name, LED_TRIGGER_FILE)
        self.accessor.write_line(path, trigger)

        if verify:
            expected = trigger.strip()
            active = decode_active_trigger(self._read(path))
            if active != expected:
                raise RejectedWriteError(path, expected, active)

        self.logger.info(f"LED '{name}' trigger -> {trigger}")
