# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Field modulus generation."""

from __future__ import annotations

import logging
from functools import lru_cache

from .backend import FieldBackend, default_backend
from .errors import InvalidParameters
from .policy import MIN_PRIMALITY_ROUNDS, policy

_logger = logging.getLogger(__name__)


def smallest_prime_of_bitlength(
    bitlength: int,
    *,
    rounds: int | None = None,
    backend: FieldBackend | None = None,
) -> int:
    """Return the smallest probable prime ``>= 2**bitlength + 1``.

    Only odd candidates are tested. The search has no iteration cap: prime
    density guarantees it ends quickly, but the loop never assumes the first
    candidate is prime.
    """

    if not isinstance(bitlength, int) or isinstance(bitlength, bool) or bitlength < 1:
        raise InvalidParameters(f"bitlength must be a positive integer, got {bitlength!r}")
    rounds = policy.primality_rounds if rounds is None else rounds
    if rounds < MIN_PRIMALITY_ROUNDS:
        raise InvalidParameters(f"primality test needs at least {MIN_PRIMALITY_ROUNDS} rounds")
    if backend is None or backend is default_backend:
        return _cached_search(bitlength, rounds)
    return _search(bitlength, rounds, backend)


@lru_cache(maxsize=64)
def _cached_search(bitlength: int, rounds: int) -> int:
    return _search(bitlength, rounds, default_backend)


def _search(bitlength: int, rounds: int, backend: FieldBackend) -> int:
    candidate = (1 << bitlength) + 1
    tried = 1
    while not backend.is_probable_prime(candidate, rounds):
        candidate += 2
        tried += 1
    _logger.debug("found %d-bit field prime after %d candidates", bitlength, tried)
    return candidate


__all__ = ["smallest_prime_of_bitlength"]
