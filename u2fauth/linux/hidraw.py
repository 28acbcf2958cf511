"""Report descriptor access for Linux hidraw devices."""

import fcntl
import struct
from functools import lru_cache

from ..consts import MAX_HID_RPT_SIZE
from ..hidproto import has_fido_usage, read_hid_rpt_sizes
from .ioctl import HidIoctls, hid_ioctls

HID_MAX_DESCRIPTOR_SIZE = 4096

_SIZE_FORMAT = "i"
_SIZE_LEN = struct.calcsize(_SIZE_FORMAT)


@lru_cache(maxsize=None)
def _ioctls() -> HidIoctls:
    return hid_ioctls()


def read_report_descriptor(fd: int) -> bytes:
    """Read the HID report descriptor of an open hidraw file descriptor.

    Raises OSError if the device does not deliver a usable descriptor.
    """
    requests = _ioctls()

    size_buf = bytearray(_SIZE_LEN)
    fcntl.ioctl(fd, requests.hidiocgrdescsize, size_buf, True)
    (size,) = struct.unpack(_SIZE_FORMAT, size_buf)
    if size <= 0 or size > HID_MAX_DESCRIPTOR_SIZE:
        raise OSError("unexpected hidiocgrdescsize() result")

    desc_buf = bytearray(_SIZE_LEN + HID_MAX_DESCRIPTOR_SIZE)
    struct.pack_into(_SIZE_FORMAT, desc_buf, 0, size)
    fcntl.ioctl(fd, requests.hidiocgrdesc, desc_buf, True)
    return bytes(desc_buf[_SIZE_LEN : _SIZE_LEN + size])


def is_u2f_device(fd: int) -> bool:
    """Whether the device's descriptor declares FIDO U2F usage; False on failure."""
    try:
        descriptor = read_report_descriptor(fd)
    except (OSError, ValueError):
        return False
    return has_fido_usage(descriptor)


def read_hid_rpt_sizes_or_defaults(fd: int) -> tuple[int, int]:
    """The (input, output) report sizes, or the maximum sizes if unavailable."""
    try:
        return read_hid_rpt_sizes(read_report_descriptor(fd))
    except (OSError, ValueError):
        return MAX_HID_RPT_SIZE, MAX_HID_RPT_SIZE