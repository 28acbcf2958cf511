"""A U2F device reached through a NetBSD uhid node."""

import logging
import os
import select

from ..consts import CID_BROADCAST, MAX_HID_RPT_SIZE, U2FHID_PING
from ..types import DeviceInfo
from . import uhid
from .fd import Fd

_log = logging.getLogger(__name__)

_PING_ATTEMPTS = 10
_PING_WAIT = 0.1


class Device:
    """A uhid device; equal to another device open on the same file."""

    in_rpt_size = MAX_HID_RPT_SIZE
    out_rpt_size = MAX_HID_RPT_SIZE

    def __init__(self, fd: Fd) -> None:
        self.fd = fd
        self.cid: bytes = CID_BROADCAST
        self.dev_info: DeviceInfo | None = None

    def is_u2f(self) -> bool:
        """Whether this is a FIDO device that accepts raw mode and answers a ping."""
        if not uhid.is_u2f_device(self.fd):
            return False
        # Raw mode is normally the default, but setting it verifies kernel support.
        try:
            uhid.hid_set_raw(self.fd, True)
            self.ping()
        except OSError:
            return False
        return True

    def ping(self) -> None:
        """Send a broadcast ping and wait for any reply; raises OSError if none comes."""
        report = bytearray(1 + MAX_HID_RPT_SIZE)
        report[1:5] = CID_BROADCAST
        report[5] = U2FHID_PING
        report[6] = 0
        report[7] = 1
        for attempt in range(_PING_ATTEMPTS):
            self.write(report)
            readable, _, _ = select.select([self.fd.fileno], [], [], _PING_WAIT)
            if not readable:
                _log.debug("device timeout %d", attempt)
                continue
            self.read(len(report))
            return
        raise OSError("no response from device")

    def read(self, size: int = MAX_HID_RPT_SIZE) -> bytes:
        """Read one report of at most size bytes."""
        return os.read(self.fd.fileno, size)

    def write(self, data: bytes) -> int:
        """Write a report, dropping its leading report number byte.

        The returned count includes the dropped byte.
        """
        written = os.write(self.fd.fileno, bytes(data)[1:])
        return written + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return self.fd == other.fd

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Device(fd={self.fd!r})"