"""Report descriptor access and raw mode for NetBSD uhid devices."""

import fcntl
import struct

from ..hidproto import has_fido_usage
from .fd import Fd

_IOCPARM_MASK = 0x1FFF
_IOCPARM_SHIFT = 16
_IOCGROUP_SHIFT = 8
_IOC_OUT = 0x40000000
_IOC_IN = 0x80000000

REPORT_DESCRIPTOR_MAX = 1024

_INT = struct.Struct("i")


def _ioc(direction: int, group: str, number: int, size: int) -> int:
    return (
        direction
        | ((size & _IOCPARM_MASK) << _IOCPARM_SHIFT)
        | (ord(group) << _IOCGROUP_SHIFT)
        | number
    )


_USB_GET_REPORT_DESC = _ioc(_IOC_OUT, "U", 21, _INT.size + REPORT_DESCRIPTOR_MAX)
_USB_HID_SET_RAW = _ioc(_IOC_IN, "h", 2, _INT.size)


def _fileno(fd: Fd | int) -> int:
    return fd if isinstance(fd, int) else fd.fileno


def read_report_descriptor(fd: Fd | int) -> bytes:
    """Read the report descriptor of a uhid device; raises OSError on failure."""
    buf = bytearray(_INT.size + REPORT_DESCRIPTOR_MAX)
    fcntl.ioctl(_fileno(fd), _USB_GET_REPORT_DESC, buf, True)
    (size,) = _INT.unpack_from(buf)
    if size < 0:
        raise OSError("negative report descriptor size")
    if size > REPORT_DESCRIPTOR_MAX:
        raise OSError("report descriptor size exceeds buffer")
    return bytes(buf[_INT.size : _INT.size + size])


def is_u2f_device(fd: Fd | int) -> bool:
    """Whether the descriptor declares FIDO U2F usage; False on failure."""
    try:
        descriptor = read_report_descriptor(fd)
    except (OSError, ValueError):
        return False
    return has_fido_usage(descriptor)


def hid_set_raw(fd: Fd | int, raw: bool) -> None:
    """Switch the device into or out of raw mode; raises OSError on failure."""
    buf = bytearray(_INT.pack(1 if raw else 0))
    fcntl.ioctl(_fileno(fd), _USB_HID_SET_RAW, buf, True)