import pytest

from u2fauth.consts import PARAMETER_SIZE
from u2fauth.responses import challenge_digest, key_handle_from_register_response


def make_response(handle: bytes, reserved: int = 0x05) -> bytes:
    return bytes([reserved]) + b"\x04" * 65 + bytes([len(handle)]) + handle + b"attestation"


def test_extracts_key_handle():
    assert key_handle_from_register_response(make_response(b"abc")) == b"abc"


def test_extracts_empty_key_handle():
    assert key_handle_from_register_response(make_response(b"")) == b""


def test_key_handle_without_trailing_data():
    response = make_response(b"\x01\x02")[: 67 + 2]
    assert key_handle_from_register_response(response) == b"\x01\x02"


def test_wrong_reserved_byte():
    with pytest.raises(ValueError, match="Reserved byte not set correctly"):
        key_handle_from_register_response(make_response(b"abc", reserved=0x04))


def test_empty_response():
    with pytest.raises(ValueError):
        key_handle_from_register_response(b"")


def test_short_response():
    with pytest.raises(ValueError):
        key_handle_from_register_response(b"\x05" + b"\x00" * 10)


def test_truncated_key_handle():
    response = make_response(b"abcdef")[: 67 + 3]
    with pytest.raises(ValueError):
        key_handle_from_register_response(response)


def test_digest_of_empty_input():
    assert challenge_digest(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_digest_of_abc():
    assert challenge_digest(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_text_and_bytes_agree_and_size():
    digest = challenge_digest("http://demo.example.com")
    assert digest == challenge_digest(b"http://demo.example.com")
    assert len(digest) == PARAMETER_SIZE
    assert challenge_digest("a") != challenge_digest("b")