"""Helpers for handling raw U2F register responses and request parameters."""

import hashlib

from .consts import U2F_REGISTER_ID

# Reserved byte, 65-byte public key, then the key handle length.
_KEY_HANDLE_LEN_OFFSET = 66
_KEY_HANDLE_OFFSET = 67


def key_handle_from_register_response(register_response: bytes) -> bytes:
    """Extract the key handle from a raw U2F registration response.

    Raises ValueError if the response is malformed.
    """
    data = bytes(register_response)
    if not data or data[0] != U2F_REGISTER_ID:
        raise ValueError("Reserved byte not set correctly")
    if len(data) < _KEY_HANDLE_OFFSET:
        raise ValueError("Register response too short")
    length = data[_KEY_HANDLE_LEN_OFFSET]
    end = _KEY_HANDLE_OFFSET + length
    if len(data) < end:
        raise ValueError("Register response truncated within key handle")
    return data[_KEY_HANDLE_OFFSET:end]


def challenge_digest(data: bytes | str) -> bytes:
    """SHA-256 digest of a challenge or application id; text is UTF-8 encoded."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).digest()