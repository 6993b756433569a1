"""
Sysfs File Accessor Tests

Runs the real accessor against ordinary files in tmp_path.

To run these tests:
    pytest tests/boardio/implementations/test_sysfs_accessor.py -v
"""

import threading
from unittest.mock import patch

import pytest

from boardio.controllers.gpio_controller import GPIOController
from boardio.errors import SysfsIOError
from boardio.implementations.sysfs_accessor import SysfsFileAccessor


@pytest.fixture
def accessor():
    return SysfsFileAccessor()


# =============================================================================
# READ TESTS
# =============================================================================

@pytest.mark.unit
def test_read_first_line_stripped(accessor, tmp_path):
    attribute = tmp_path / "trigger"
    attribute.write_text("  none [timer] heartbeat \nsecond line\n")

    assert accessor.read_line(str(attribute)) == "none [timer] heartbeat"


@pytest.mark.unit
def test_read_missing_file(accessor, tmp_path):
    path = str(tmp_path / "missing")

    with pytest.raises(SysfsIOError) as exc_info:
        accessor.read_line(path)

    assert exc_info.value.path == path
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


@pytest.mark.unit
def test_read_empty_file(accessor, tmp_path):
    attribute = tmp_path / "value"
    attribute.write_text("")

    with pytest.raises(SysfsIOError):
        accessor.read_line(str(attribute))


@pytest.mark.unit
def test_read_directory_fails(accessor, tmp_path):
    with pytest.raises(SysfsIOError):
        accessor.read_line(str(tmp_path))


# =============================================================================
# WRITE TESTS
# =============================================================================

@pytest.mark.unit
def test_write_overwrites_without_newline(accessor, tmp_path):
    attribute = tmp_path / "period"
    attribute.write_text("1000000\n")

    accessor.write_line(str(attribute), "20")

    assert attribute.read_text() == "20"


@pytest.mark.unit
def test_write_into_missing_directory(accessor, tmp_path):
    path = str(tmp_path / "gpio99" / "value")

    with pytest.raises(SysfsIOError) as exc_info:
        accessor.write_line(path, "1")

    assert isinstance(exc_info.value.__cause__, OSError)


# =============================================================================
# LOCKING
# =============================================================================

@pytest.mark.unit
def test_same_path_shares_lock(accessor):
    assert accessor._lock_for("/a") is accessor._lock_for("/a")
    assert accessor._lock_for("/a") is not accessor._lock_for("/b")


@pytest.mark.unit
def test_separate_accessors_share_lock():
    assert SysfsFileAccessor()._lock_for("/a") is SysfsFileAccessor()._lock_for("/a")


@pytest.mark.unit
def test_default_controllers_share_lock(resolver, tmp_path):
    """Controllers that build their own accessor still serialize one path"""
    path = "/sys/class/gpio/gpio12/value"

    with patch("boardio.factory.SYSFS_ROOT", str(tmp_path)):
        first = GPIOController(resolver=resolver, strict=False)
        second = GPIOController(resolver=resolver, strict=False)

    assert first.accessor is not second.accessor
    assert first.accessor._lock_for(path) is second.accessor._lock_for(path)


@pytest.mark.unit
def test_locking_can_be_disabled(tmp_path):
    accessor = SysfsFileAccessor(per_path_locking=False)
    attribute = tmp_path / "value"

    accessor.write_line(str(attribute), "1")

    assert accessor.read_line(str(attribute)) == "1"
    assert str(attribute) not in SysfsFileAccessor._locks


@pytest.mark.unit
def test_concurrent_writes_leave_one_complete_value(accessor, tmp_path):
    attribute = tmp_path / "duty_cycle"
    values = [str(n) * 50 for n in range(1, 10)]

    threads = [
        threading.Thread(target=accessor.write_line, args=(str(attribute), value))
        for value in values
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert accessor.read_line(str(attribute)) in values
