import os
import socket
import struct
from unittest import mock

import pytest

from u2fauth.consts import CID_BROADCAST, MAX_HID_RPT_SIZE, U2FHID_PING
from u2fauth.netbsd.device import Device
from u2fauth.netbsd.fd import Fd

FIDO_DESCRIPTOR = bytes([0x06, 0xD0, 0xF1, 0x09, 0x01])


@pytest.fixture
def pair():
    a, b = socket.socketpair(socket.AF_UNIX, socket.SOCK_DGRAM)
    fd = Fd(os.dup(a.fileno()))
    a.close()
    yield Device(fd), b
    fd.close()
    b.close()


def _fake_ioctl(fail_raw=False):
    def fake(fd, request, buf, mutate=True):
        if len(buf) > 4:
            struct.pack_into("i", buf, 0, len(FIDO_DESCRIPTOR))
            buf[4 : 4 + len(FIDO_DESCRIPTOR)] = FIDO_DESCRIPTOR
        elif fail_raw:
            raise OSError("raw mode unsupported")
        return 0

    return fake


def test_write_drops_report_number(pair):
    dev, peer = pair
    assert dev.write(b"\x00abc") == 4
    assert peer.recv(1024) == b"abc"


def test_read_returns_report(pair):
    dev, peer = pair
    peer.send(b"hello")
    assert dev.read(64) == b"hello"


def test_ping_sends_broadcast_ping(pair):
    dev, peer = pair
    peer.send(bytes(MAX_HID_RPT_SIZE))
    dev.ping()
    sent = peer.recv(1024)
    assert len(sent) == MAX_HID_RPT_SIZE
    assert sent[:7] == CID_BROADCAST + bytes([U2FHID_PING, 0, 1])


def test_ping_without_reply_fails(pair):
    dev, _ = pair
    with pytest.raises(OSError, match="no response"):
        dev.ping()


def test_devices_on_same_file_are_equal(pair):
    dev, _ = pair
    other = Device(Fd(os.dup(dev.fd.fileno)))
    try:
        assert other == dev
        assert other.cid == dev.cid
    finally:
        other.fd.close()


def test_regular_file_is_not_u2f(tmp_path):
    path = tmp_path / "uhid0"
    path.write_bytes(b"")
    with Fd.open(path) as fd:
        assert Device(fd).is_u2f() is False


def test_is_u2f_with_fido_descriptor_and_reply(pair):
    dev, peer = pair
    peer.send(bytes(MAX_HID_RPT_SIZE))
    with mock.patch("fcntl.ioctl", side_effect=_fake_ioctl()):
        assert dev.is_u2f() is True
    assert peer.recv(1024)[:5] == CID_BROADCAST + bytes([U2FHID_PING])


def test_is_u2f_false_when_raw_mode_fails(pair):
    dev, peer = pair
    peer.send(bytes(MAX_HID_RPT_SIZE))
    with mock.patch("fcntl.ioctl", side_effect=_fake_ioctl(fail_raw=True)):
        assert dev.is_u2f() is False