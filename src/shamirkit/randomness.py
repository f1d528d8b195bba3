# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Random field element generation.

Production code always draws from :class:`SystemRandomSource`, which wraps the
operating system CSPRNG. :class:`SeededRandomSource` exists so tests can
replay a sharing session deterministically; it must never protect real data.
"""

from __future__ import annotations

import os
import random
from typing import Protocol

from .errors import InsecureRandomUnavailable, InvalidParameters


class RandomSource(Protocol):
    def random_bytes(self, length: int) -> bytes: ...


class SystemRandomSource:
    """Random bytes from ``os.urandom``. Fails loudly instead of degrading."""

    def random_bytes(self, length: int) -> bytes:
        try:
            data = os.urandom(length)
        except NotImplementedError as exc:
            raise InsecureRandomUnavailable("no secure random source available") from exc
        if len(data) != length:
            raise InsecureRandomUnavailable("secure random source returned a short read")
        return data


class SeededRandomSource:
    """Deterministic byte stream for reproducible tests."""

    def __init__(self, seed: int | str | bytes) -> None:
        self._rng = random.Random(seed)

    def random_bytes(self, length: int) -> bytes:
        return self._rng.getrandbits(length * 8).to_bytes(length, "big") if length else b""


system_random = SystemRandomSource()


def random_of_bitlength(bitlength: int, *, source: RandomSource | None = None) -> int:
    """Return a random integer whose bit at index *bitlength* is set.

    ``ceil(bitlength / 8)`` bytes are drawn, masked down to the low
    *bitlength* bits and then the bit at position *bitlength* is forced on,
    so the result always lies in ``[2**bitlength, 2**(bitlength + 1))``.
    """

    if not isinstance(bitlength, int) or isinstance(bitlength, bool) or bitlength < 1:
        raise InvalidParameters(f"bitlength must be a positive integer, got {bitlength!r}")
    source = source or system_random
    byte_length = (bitlength + 7) // 8
    raw = source.random_bytes(byte_length)
    if len(raw) != byte_length:
        raise InsecureRandomUnavailable("random source returned a short read")
    value = int.from_bytes(raw, "big")
    value &= (1 << bitlength) - 1
    value |= 1 << bitlength
    return value


__all__ = [
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "system_random",
    "random_of_bitlength",
]
