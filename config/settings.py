"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Board-specific overrides go in .env (or real environment variables)
- Import these settings in modules: from config.settings import GPIO_SYSFS_BASE
- Device names and their sysfs paths are NOT configured here - they come
  from the system property table (hw.<namespace>.<name>)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# PROPERTY TABLE CONFIGURATION
# =============================================================================

# Every lookup key is "<prefix>.<namespace>.<name>", e.g. hw.gpio.user-led1
PROPERTY_PREFIX = os.getenv("BOARDIO_PROPERTY_PREFIX", "hw")

# Which property backend to use: auto, android, yaml, mock
PROPERTY_BACKEND = os.getenv("BOARDIO_PROPERTY_BACKEND", "auto")

# Android system property command (same as `getprop hw.gpio.name`)
GETPROP_COMMAND = os.getenv("BOARDIO_GETPROP_COMMAND", "getprop")
GETPROP_TIMEOUT = float(os.getenv("BOARDIO_GETPROP_TIMEOUT", "5.0"))  # seconds

# Property table for boards without Android system properties
PROPERTIES_FILE = Path(
    os.getenv(
        "BOARDIO_PROPERTIES_FILE",
        str(Path(__file__).parent / "hw_properties.yaml"),
    ),
)

# =============================================================================
# SYSFS CONFIGURATION
# =============================================================================

# Directory holding the exported gpio<N>/ directories
GPIO_SYSFS_BASE = os.getenv("BOARDIO_GPIO_SYSFS_BASE", "/sys/class/gpio")

# Root checked by the factory to decide if real sysfs is present
SYSFS_ROOT = os.getenv("BOARDIO_SYSFS_ROOT", "/sys")

# Serialize calls touching the same path within this process
SYSFS_PER_PATH_LOCKING = _env_flag("BOARDIO_SYSFS_LOCKING", "true")

# =============================================================================
# DECODING CONFIGURATION
# =============================================================================

# False keeps the permissive decoding (anything that is not "in" is OUT,
# anything that is not "normal" is INVERSED, ...).
# True raises UnrecognizedValueError on unexpected kernel text.
STRICT_DECODE = _env_flag("BOARDIO_STRICT_DECODE", "false")
