import errno

import pytest

from accelutil.sysfs import (
    SYSFS_ATTR_SIZE,
    device_parse,
    devpath_to_devname,
    read_attr,
    write_attr,
)


def test_write_then_read_strips_newline(tmp_path):
    attr = tmp_path / "state"
    attr.write_text("")
    write_attr(str(attr), "enabled\n")
    assert read_attr(str(attr)) == "enabled"


def test_read_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_attr(str(tmp_path / "missing"))


def test_read_too_large(tmp_path):
    attr = tmp_path / "big"
    attr.write_text("x" * SYSFS_ATTR_SIZE)
    with pytest.raises(OSError) as info:
        read_attr(str(attr))
    assert info.value.errno == errno.EFBIG


def test_write_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_attr(str(tmp_path / "nope"), "1", quiet=True)


def test_device_parse(tmp_path):
    for name in ("dsa1", "dsa0", "wq0!x"):
        (tmp_path / name).mkdir()
    seen = []

    def add_dev(parent, dev_id, path, prefix, bus):
        seen.append((parent, dev_id, path, prefix, bus))
        return None if dev_id == 1 else object()

    failures = device_parse(str(tmp_path), "dsa", "dsa", "P", add_dev)
    assert failures == 1
    assert [entry[1] for entry in seen] == [0, 1]
    assert seen[0][2] == f"{tmp_path}/dsa0"
    assert seen[0][0] == "P"


def test_device_parse_filter(tmp_path):
    for name in ("dsa0", "iax1"):
        (tmp_path / name).mkdir()
    ids = []
    device_parse(str(tmp_path), "x", "y", None,
                 lambda p, i, path, a, b: ids.append(i) or True,
                 name_filter=lambda n: n.startswith("iax"))
    assert ids == [1]


def test_device_parse_missing_dir(tmp_path):
    with pytest.raises(OSError) as info:
        device_parse(str(tmp_path / "none"), "a", "b", None, lambda *a: None)
    assert info.value.errno == errno.ENODEV


def test_devpath_to_devname():
    assert devpath_to_devname("/sys/bus/dsa/devices/wq0.1") == "wq0.1"
    with pytest.raises(ValueError):
        devpath_to_devname("noslash")