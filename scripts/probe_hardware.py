#!/usr/bin/env python3
"""
Hardware Probe Script

Prints the property value and current readings of named devices.
Read-only: nothing is written to the hardware.

Usage:
    python scripts/probe_hardware.py --gpio user-led1 --led user1
    python scripts/probe_hardware.py --pwm pwm2 --hwmon temp --hwmon vdd-core
    BOARDIO_PROPERTY_BACKEND=yaml python scripts/probe_hardware.py --led user1

Exit code is 1 if any device could not be read.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path to allow imports (MUST be before other imports)
sys.path.insert(0, str(Path(__file__).parent.parent))

from boardio import (
    BoardFactory,
    BoardIOError,
    GPIOController,
    HwmonController,
    LEDController,
    PWMController,
)

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def probe_gpio(gpio: GPIOController, name: str) -> dict:
    number = gpio.resolve_number(name)
    return {
        "number": number,
        "direction": gpio.get_direction(number).value,
        "value": gpio.get_value(number),
    }


def probe_led(led: LEDController, name: str) -> dict:
    return {
        "on": led.get_value(name),
        "trigger": led.get_trigger(name),
        "triggers": " ".join(led.get_all_triggers(name)),
    }


def probe_pwm(pwm: PWMController, name: str) -> dict:
    return {
        "enabled": pwm.get_enabled(name),
        "polarity": pwm.get_polarity(name).value,
        "period_ns": pwm.get_period(name),
        "duty_cycle_ns": pwm.get_duty_cycle(name),
    }


def probe_hwmon(hwmon: HwmonController, name: str) -> dict:
    return {"value": hwmon.get_value(name)}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show the current state of named board devices",
    )
    parser.add_argument("--gpio", action="append", default=[], metavar="NAME")
    parser.add_argument("--led", action="append", default=[], metavar="NAME")
    parser.add_argument("--pwm", action="append", default=[], metavar="NAME")
    parser.add_argument("--hwmon", action="append", default=[], metavar="NAME")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on unexpected kernel values instead of falling back "
        "(default: BOARDIO_STRICT_DECODE)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    status = BoardFactory.is_real_hardware_available()
    print(f"sysfs available: {status['sysfs']}")
    print(f"system properties available: {status['properties']}")
    print()

    accessor = BoardFactory.create_accessor()
    resolver = BoardFactory.create_resolver()

    controllers = [
        (GPIOController(accessor, resolver, args.strict), probe_gpio, args.gpio),
        (LEDController(accessor, resolver, args.strict), probe_led, args.led),
        (PWMController(accessor, resolver, args.strict), probe_pwm, args.pwm),
        (HwmonController(accessor, resolver, args.strict), probe_hwmon, args.hwmon),
    ]

    failures = 0
    for controller, probe, names in controllers:
        for name in names:
            key = f"{controller.NAMESPACE.value}.{name}"
            print(f"{key}:")
            try:
                prop = controller.get_hw_prop(name) or "(unset)"
                print(f"    {'property':<14} {prop}")
                for field, value in probe(controller, name).items():
                    print(f"    {field:<14} {value}")
            except BoardIOError as e:
                failures += 1
                print(f"    [FAIL] {type(e).__name__}: {e}")
            print()

    if failures:
        logger.error(f"{failures} device(s) could not be read")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
