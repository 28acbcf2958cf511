import os

import pytest

from u2fauth.netbsd.fd import Fd


@pytest.fixture
def two_files(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.write_bytes(b"one")
    second.write_bytes(b"two")
    return first, second


def test_open_reads_file(two_files):
    first, _ = two_files
    with Fd.open(first, os.O_RDONLY) as fd:
        assert os.read(fd.fileno, 16) == b"one"


def test_same_file_opened_twice_is_equal(two_files):
    first, _ = two_files
    with Fd.open(first) as a, Fd.open(first) as b:
        assert a.fileno != b.fileno
        assert a == b


def test_different_files_are_not_equal(two_files):
    first, second = two_files
    with Fd.open(first) as a, Fd.open(second) as b:
        assert not (a == b)


def test_closed_fd_never_equal(two_files):
    first, _ = two_files
    a = Fd.open(first)
    b = Fd.open(first)
    a.close()
    assert a.closed is True
    assert not (a == b)
    b.close()


def test_close_is_idempotent(two_files):
    first, _ = two_files
    fd = Fd.open(first)
    fd.close()
    fd.close()
    assert fd.closed is True
    with pytest.raises(OSError):
        os.fstat(fd.fileno) if not fd.closed else os.read(-1, 1)


def test_open_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Fd.open(tmp_path / "missing")