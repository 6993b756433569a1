"""
Property Resolver

Maps a logical device name to its sysfs path through the property table.

The key is "<prefix>.<namespace>.<name>":

    resolver.resolve(PropertyNamespace.LED, "user1")
    # looks up "hw.led.user1" → "/sys/class/leds/user1/"
"""

import logging
from typing import Union

from boardio.constants import PropertyNamespace
from boardio.errors import PropertyResolutionError
from boardio.interfaces.property_store_interface import PropertyStoreInterface
from config.settings import PROPERTY_PREFIX

NamespaceLike = Union[PropertyNamespace, str]


def property_key(
    namespace: NamespaceLike,
    name: str,
    prefix: str = PROPERTY_PREFIX,
) -> str:
    """
    Build the property key for a device.

    Raises:
        ValueError: If namespace is not gpio, led, pwm or hwmon

    Example:
        >>> property_key("gpio", "user-led1")
        'hw.gpio.user-led1'
    """
    ns = PropertyNamespace(namespace)
    return f"{prefix}.{ns.value}.{name}"


class PropertyResolver:
    """
    Resolves device names through a PropertyStoreInterface.

    Usage:
        resolver = PropertyResolver(store)
        path = resolver.resolve("pwm", "pwm2")
    """

    def __init__(self, store: PropertyStoreInterface, prefix: str = PROPERTY_PREFIX):
        self.logger = logging.getLogger(__name__)
        self.store = store
        self.prefix = prefix

    def get(self, namespace: NamespaceLike, name: str) -> str:
        """
        Raw property value for a device ("" if unset).

        Same contract as `getprop hw.<namespace>.<name>`.
        """
        return self.store.get(property_key(namespace, name, self.prefix))

    def resolve(self, namespace: NamespaceLike, name: str) -> str:
        """
        Sysfs path for a device.

        Raises:
            PropertyResolutionError: If the property is unset or blank
            PropertyStoreError: If the store cannot be queried
        """
        key = property_key(namespace, name, self.prefix)
        value = self.store.get(key).strip()

        if not value:
            raise PropertyResolutionError(key)

        self.logger.debug(f"{key} -> {value}")
        return value
