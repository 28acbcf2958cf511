"""A U2F device reached through a Linux hidraw node."""

import os

from ..consts import CID_BROADCAST
from ..types import DeviceInfo
from . import hidraw


class Device:
    """An open hidraw device node; equal to another device with the same path."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)
        self._fd: int | None = os.open(self.path, os.O_RDWR)
        self.in_rpt_size, self.out_rpt_size = hidraw.read_hid_rpt_sizes_or_defaults(
            self._fd
        )
        self.cid: bytes = CID_BROADCAST
        self.dev_info: DeviceInfo | None = None

    def _require_fd(self) -> int:
        if self._fd is None:
            raise ValueError("I/O operation on closed device")
        return self._fd

    @property
    def closed(self) -> bool:
        return self._fd is None

    def is_u2f(self) -> bool:
        """Whether the device declares FIDO U2F usage."""
        return hidraw.is_u2f_device(self._require_fd())

    def read(self, size: int) -> bytes:
        """Read one report of at most size bytes."""
        return os.read(self._require_fd(), size)

    def write(self, data: bytes) -> int:
        """Write a report; returns the number of bytes written."""
        return os.write(self._require_fd(), bytes(data))

    def close(self) -> None:
        """Close the device node; closing twice is harmless."""
        fd, self._fd = self._fd, None
        if fd is not None:
            try:
                os.close(fd)
            except OSError:
                pass

    def __enter__(self) -> "Device":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_fd", None) is not None:
            self.close()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"Device(path={self.path!r})"