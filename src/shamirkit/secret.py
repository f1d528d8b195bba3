# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""The value protected by a sharing session.

A :class:`Secret` is a field element of at most :data:`MAX_BITLENGTH` bits.
It can be created from a fresh random value, from an explicit integer, or
from the portable string produced by :meth:`Secret.encode`.

Every secret carries an integrity tag: an HMAC-SHA256 keyed with the
secret's decimal representation over the hex SHA-256 digest of that same
representation. The tag travels alongside the shares, and after
reconstruction the candidate value re-derives it. A match proves the
original secret came back; fewer than threshold shares, or shares from
another session, interpolate to some other field element whose tag differs.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from .encoding import decode_int, encode_int
from .errors import InvalidSecret
from .policy import policy
from .randomness import RandomSource, random_of_bitlength

MAX_BITLENGTH = 4096


def _tag_material(value: int) -> tuple[bytes, bytes]:
    key = str(value).encode("ascii")
    digest = hashes.Hash(hashes.SHA256())
    digest.update(key)
    return key, digest.finalize().hex().encode("ascii")


def _tag_hmac(value: int) -> hmac.HMAC:
    key, message = _tag_material(value)
    mac = hmac.HMAC(key, hashes.SHA256())
    mac.update(message)
    return mac


def compute_integrity_tag(value: int) -> str:
    """Return the lowercase hex integrity tag for *value*."""
    return _tag_hmac(value).finalize().hex()


def _validate(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidSecret(f"secret must be an integer, not {type(value).__name__!r}")
    if value < 0:
        raise InvalidSecret("secret must be a non-negative integer")
    if value.bit_length() > MAX_BITLENGTH:
        raise InvalidSecret(f"secret must have a bitlength less than or equal to {MAX_BITLENGTH}")
    return value


class Secret:
    """A validated field element together with its integrity tag."""

    def __init__(self, value: int | None = None, *, random_source: RandomSource | None = None) -> None:
        if value is None:
            value = random_of_bitlength(policy.default_bitlength, source=random_source)
        self.value = value

    @classmethod
    def decode(cls, text: str) -> "Secret":
        """Rebuild a secret from the output of :meth:`encode`."""
        return cls(decode_int(text))

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = _validate(value)
        self._tag = compute_integrity_tag(self._value)

    @property
    def bit_length(self) -> int:
        return self._value.bit_length()

    @property
    def integrity_tag(self) -> str:
        return self._tag

    def encode(self) -> str:
        return encode_int(self._value)

    def verify_integrity(self, candidate_tag: str | bytes) -> bool:
        """Check *candidate_tag* against the tag of the current value in constant time."""
        if not isinstance(candidate_tag, (str, bytes, bytearray)):
            return False
        if isinstance(candidate_tag, str):
            try:
                candidate_tag = bytes.fromhex(candidate_tag)
            except ValueError:
                return False
        if not candidate_tag:
            return False
        try:
            _tag_hmac(self._value).verify(bytes(candidate_tag))
        except InvalidSignature:
            return False
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Secret):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"Secret(bit_length={self.bit_length})"


__all__ = ["MAX_BITLENGTH", "Secret", "compute_integrity_tag"]
