"""An owned file descriptor that compares by the file it refers to."""

import os


class Fd:
    """An open file descriptor, closed on close(), exit or collection."""

    def __init__(self, fileno: int) -> None:
        self.fileno = fileno
        self._closed = False

    @classmethod
    def open(cls, path: str | os.PathLike, flags: int = os.O_RDWR) -> "Fd":
        """Open a path; raises OSError on failure."""
        return cls(os.open(os.fspath(path), flags))

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close the descriptor; closing twice is harmless."""
        if self._closed:
            return
        self._closed = True
        try:
            os.close(self.fileno)
        except OSError:
            pass

    def __enter__(self) -> "Fd":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __del__(self) -> None:
        if not getattr(self, "_closed", True):
            self.close()

    def _stat(self) -> os.stat_result | None:
        if self._closed:
            return None
        try:
            return os.fstat(self.fileno)
        except OSError:
            return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fd):
            return NotImplemented
        mine = self._stat()
        theirs = other._stat()
        if mine is None or theirs is None:
            return False
        return mine.st_dev == theirs.st_dev and mine.st_ino == theirs.st_ino

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Fd(fileno={self.fileno}, closed={self._closed})"