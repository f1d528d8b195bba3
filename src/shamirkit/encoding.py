# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Portable text encoding for big integers.

An integer is written in base 36 and the resulting ASCII text is wrapped in
unpadded URL-safe base 64, which keeps it compact and safe to paste into
URLs, shells and e-mails.
"""

from __future__ import annotations

import base64
import binascii
import re

from .errors import InvalidEncoding

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_BASE36 = re.compile(r"[0-9a-z]+")
_URLSAFE = re.compile(r"[A-Za-z0-9_-]+={0,2}")


def int_to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("only non-negative integers can be encoded")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def base36_to_int(text: str) -> int:
    if not _BASE36.fullmatch(text.lower()):
        raise InvalidEncoding("payload is not a base-36 number")
    return int(text, 36)


def urlsafe_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def urlsafe_decode(text: str) -> bytes:
    if not isinstance(text, str) or not text:
        raise InvalidEncoding("encoded value is empty")
    if not _URLSAFE.fullmatch(text):
        raise InvalidEncoding("encoded value contains characters outside the URL-safe alphabet")
    stripped = text.rstrip("=")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding(f"invalid base64: {exc}") from exc
    if not data:
        raise InvalidEncoding("invalid base64 (decoded to an empty value)")
    return data


def encode_int(value: int) -> str:
    """Encode *value* as URL-safe base 64 of its base-36 digits."""
    return urlsafe_encode(int_to_base36(value).encode("ascii"))


def decode_int(text: str) -> int:
    """Inverse of :func:`encode_int`; raises :class:`InvalidEncoding`."""
    data = urlsafe_decode(text)
    try:
        digits = data.decode("ascii")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding("payload is not ASCII text") from exc
    return base36_to_int(digits)


__all__ = [
    "int_to_base36",
    "base36_to_int",
    "urlsafe_encode",
    "urlsafe_decode",
    "encode_int",
    "decode_int",
]
