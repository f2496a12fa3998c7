"""Generation of K-sortable unique trace identifiers."""

from __future__ import annotations

import os
import time

_EPOCH = 1_400_000_000
_PAYLOAD_LENGTH = 16
_ENCODED_LENGTH = 27
_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _base62(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, rem = divmod(number, 62)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits)).rjust(_ENCODED_LENGTH, "0")


def new() -> str:
    """Return a new 27-character, time-ordered, random identifier."""
    timestamp = int(time.time()) - _EPOCH
    if not 0 <= timestamp <= 0xFFFFFFFF:
        raise ValueError("current time is outside the identifier's range")
    return _base62(timestamp.to_bytes(4, "big") + os.urandom(_PAYLOAD_LENGTH))