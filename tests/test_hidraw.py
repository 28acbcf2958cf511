import os
import struct
from unittest import mock

import pytest

from u2fauth.consts import MAX_HID_RPT_SIZE
from u2fauth.linux.hidraw import (
    is_u2f_device,
    read_hid_rpt_sizes_or_defaults,
    read_report_descriptor,
)
from u2fauth.linux.ioctl import hid_ioctls

FIDO_DESCRIPTOR = bytes(
    [
        0x06, 0xD0, 0xF1,  # usage page 0xF1D0
        0x09, 0x01,  # usage U2FHID
        0x95, 0x40,  # report count 64
        0x81, 0x02,  # input
        0x95, 0x20,  # report count 32
        0x91, 0x02,  # output
    ]
)

KEYBOARD_DESCRIPTOR = bytes([0x05, 0x01, 0x09, 0x06])


def fake_ioctl(descriptor, reported_size=None):
    requests = hid_ioctls()
    size = len(descriptor) if reported_size is None else reported_size

    def ioctl(fd, request, arg, mutate_flag=True):
        if request == requests.hidiocgrdescsize:
            struct.pack_into("i", arg, 0, size)
        elif request == requests.hidiocgrdesc:
            arg[4 : 4 + len(descriptor)] = descriptor
        else:
            raise OSError("unexpected request")
        return 0

    return ioctl


def test_read_report_descriptor_returns_descriptor():
    with mock.patch("fcntl.ioctl", side_effect=fake_ioctl(FIDO_DESCRIPTOR)):
        assert read_report_descriptor(3) == FIDO_DESCRIPTOR


def test_zero_size_is_an_error():
    with mock.patch("fcntl.ioctl", side_effect=fake_ioctl(b"", 0)):
        with pytest.raises(OSError):
            read_report_descriptor(3)


def test_oversized_descriptor_is_an_error():
    with mock.patch("fcntl.ioctl", side_effect=fake_ioctl(b"\x00", 4097)):
        with pytest.raises(OSError):
            read_report_descriptor(3)


def test_is_u2f_device_true_for_fido_descriptor():
    with mock.patch("fcntl.ioctl", side_effect=fake_ioctl(FIDO_DESCRIPTOR)):
        assert is_u2f_device(3) is True


def test_is_u2f_device_false_for_other_descriptor():
    with mock.patch("fcntl.ioctl", side_effect=fake_ioctl(KEYBOARD_DESCRIPTOR)):
        assert is_u2f_device(3) is False


def test_report_sizes_from_descriptor():
    with mock.patch("fcntl.ioctl", side_effect=fake_ioctl(FIDO_DESCRIPTOR)):
        assert read_hid_rpt_sizes_or_defaults(3) == (0x40, 0x20)


def test_report_sizes_default_when_descriptor_lacks_them():
    with mock.patch("fcntl.ioctl", side_effect=fake_ioctl(KEYBOARD_DESCRIPTOR)):
        assert read_hid_rpt_sizes_or_defaults(3) == (MAX_HID_RPT_SIZE, MAX_HID_RPT_SIZE)


def test_regular_file_is_not_u2f(tmp_path):
    path = tmp_path / "plain"
    path.write_bytes(b"data")
    fd = os.open(path, os.O_RDWR)
    try:
        assert is_u2f_device(fd) is False
        assert read_hid_rpt_sizes_or_defaults(fd) == (MAX_HID_RPT_SIZE, MAX_HID_RPT_SIZE)
    finally:
        os.close(fd)