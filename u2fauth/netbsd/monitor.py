"""Polling discovery of NetBSD uhid devices."""

import errno
import os
import time
from typing import Callable

from ..runloop import AliveFn, RunLoop
from .fd import Fd

DEFAULT_PATH_PATTERN = "/dev/uhid{}"
MAX_DEVICES = 100
# Device control events need write access, so poll instead.
POLL_INTERVAL = 0.5

NewDeviceCallback = Callable[[Fd, AliveFn], None]


class Monitor:
    """Polls uhid nodes and runs the callback for each one opened, on its own thread."""

    def __init__(
        self,
        new_device_cb: NewDeviceCallback,
        *,
        path_pattern: str = DEFAULT_PATH_PATTERN,
        max_devices: int = MAX_DEVICES,
        poll_interval: float = POLL_INTERVAL,
    ) -> None:
        self._new_device_cb = new_device_cb
        self._path_pattern = path_pattern
        self._max_devices = max_devices
        self._poll_interval = poll_interval
        self._runloops: dict[str, RunLoop] = {}

    @property
    def tracked_paths(self) -> frozenset[str]:
        """Paths of the devices currently being served."""
        return frozenset(self._runloops)

    def run(self, alive: AliveFn) -> None:
        """Poll for devices until alive() is False, then stop all device threads."""
        while alive():
            for n in range(self._max_devices):
                path = self._path_pattern.format(n)
                try:
                    fd = Fd.open(path, os.O_RDWR | os.O_CLOEXEC)
                except OSError as exc:
                    if exc.errno == errno.EBUSY:
                        continue
                    if exc.errno == errno.ENOENT:
                        break
                    self._remove_device(path)
                    continue
                self._add_device(fd, path)
            time.sleep(self._poll_interval)
        self._remove_all_devices()

    def _add_device(self, fd: Fd, path: str) -> None:
        callback = self._new_device_cb

        def serve(alive: AliveFn) -> None:
            with fd:
                if alive():
                    callback(fd, alive)

        try:
            runloop = RunLoop(serve)
        except RuntimeError:
            fd.close()
            return
        previous = self._runloops.get(path)
        self._runloops[path] = runloop
        if previous is not None:
            previous.cancel()

    def _remove_device(self, path: str) -> None:
        runloop = self._runloops.pop(path, None)
        if runloop is not None:
            runloop.cancel()

    def _remove_all_devices(self) -> None:
        while self._runloops:
            self._remove_device(next(iter(self._runloops)))