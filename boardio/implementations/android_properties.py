"""
Android System Property Store

Reads the Android system property table through the `getprop` command,
the same lookup as running `getprop hw.gpio.user-led1` in a shell.

The wrapper keeps controllers independent of how properties are fetched:
they only see PropertyStoreInterface.
"""

import logging
import shutil
import subprocess

from boardio.errors import PropertyStoreError
from boardio.interfaces.property_store_interface import PropertyStoreInterface
from config.settings import GETPROP_COMMAND, GETPROP_TIMEOUT


class AndroidPropertyStore(PropertyStoreInterface):
    """
    Property store backed by Android system properties.

    Raises PropertyStoreError at construction when `getprop` is not on
    the PATH, so the factory can fall back to another backend.
    """

    def __init__(
        self,
        command: str = GETPROP_COMMAND,
        timeout: float = GETPROP_TIMEOUT,
    ):
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout

        resolved = shutil.which(command)
        if resolved is None:
            raise PropertyStoreError(
                f"'{command}' not found - not running on Android?",
            )
        self.command = resolved

        self.logger.info(f"Android property store initialized ({self.command})")

    def get(self, key: str) -> str:
        """Run getprop for one key"""
        try:
            result = subprocess.run(
                [self.command, key],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise PropertyStoreError(
                f"getprop {key} timed out after {self.timeout}s",
            ) from e
        except OSError as e:
            raise PropertyStoreError(f"Failed to run getprop {key}: {e}") from e

        if result.returncode != 0:
            raise PropertyStoreError(
                f"getprop {key} failed (exit {result.returncode}): "
                f"{result.stderr.strip()}",
            )

        value = result.stdout.strip()
        self.logger.debug(f"getprop {key} -> '{value}'")
        return value

    def is_available(self) -> bool:
        """Real system properties"""
        return True
