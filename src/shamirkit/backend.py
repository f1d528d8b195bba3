# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Arbitrary-precision arithmetic boundary.

The algorithms in :mod:`shamirkit.prime`, :mod:`shamirkit.polynomial` and
:mod:`shamirkit.interpolation` only talk to a :class:`FieldBackend`, so an
alternative big-integer implementation can be plugged in without touching
them. :class:`IntegerBackend` uses Python's built-in ``int``.
"""

from __future__ import annotations

import secrets
from typing import Protocol

from .errors import SingularShares

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71)


class FieldBackend(Protocol):
    def add(self, a: int, b: int, modulus: int) -> int: ...

    def mul(self, a: int, b: int, modulus: int) -> int: ...

    def pow(self, base: int, exponent: int, modulus: int) -> int: ...

    def inverse(self, value: int, modulus: int) -> int: ...

    def is_probable_prime(self, candidate: int, rounds: int) -> bool: ...


class IntegerBackend:
    """Field operations over built-in integers."""

    def add(self, a: int, b: int, modulus: int) -> int:
        return (a + b) % modulus

    def mul(self, a: int, b: int, modulus: int) -> int:
        return (a * b) % modulus

    def pow(self, base: int, exponent: int, modulus: int) -> int:
        return pow(base, exponent, modulus)

    def inverse(self, value: int, modulus: int) -> int:
        """Return ``value**-1 mod modulus`` or raise :class:`SingularShares`."""
        try:
            return pow(value % modulus, -1, modulus)
        except ValueError as exc:
            raise SingularShares(f"{value} has no inverse modulo the field prime") from exc

    def is_probable_prime(self, candidate: int, rounds: int) -> bool:
        """Miller-Rabin with *rounds* random witnesses.

        A composite survives with probability at most ``4**-rounds``.
        """
        if candidate < 2:
            return False
        for p in _SMALL_PRIMES:
            if candidate % p == 0:
                return candidate == p
        d = candidate - 1
        s = 0
        while d % 2 == 0:
            d //= 2
            s += 1
        for _ in range(rounds):
            a = 2 + secrets.randbelow(candidate - 3)
            x = pow(a, d, candidate)
            if x == 1 or x == candidate - 1:
                continue
            for _ in range(s - 1):
                x = pow(x, 2, candidate)
                if x == candidate - 1:
                    break
            else:
                return False
        return True


default_backend = IntegerBackend()


__all__ = ["FieldBackend", "IntegerBackend", "default_backend"]
