# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Lagrange interpolation at zero over GF(prime).

Recovers the constant term of the unique degree ``len(points) - 1``
polynomial through the given points::

    value = sum_j  y_j * l_j(0)              mod prime
    l_j(0) = prod_{i != j} -x_i / (x_j - x_i)  mod prime

Supplying fewer points than the sharing threshold is not detected here. The
result is then some field element unrelated to the secret, so every caller
must compare the integrity tag afterwards (see :class:`shamirkit.Container`).
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .backend import FieldBackend, default_backend
from .errors import InvalidShare, SingularShares
from .share import Share

_logger = logging.getLogger(__name__)


def _basis_at_zero(j: int, xs: Sequence[int], prime: int, backend: FieldBackend) -> int:
    x_j = xs[j]
    result = 1
    for i, x_i in enumerate(xs):
        if i == j:
            continue
        denominator = (x_j - x_i) % prime
        if denominator == 0:
            raise SingularShares(f"duplicate share x coordinate {x_i} modulo the field prime")
        term = backend.mul(-x_i % prime, backend.inverse(denominator, prime), prime)
        result = backend.mul(result, term, prime)
    return result


def interpolate_at_zero(
    points: Iterable[tuple[int, int]],
    prime: int,
    *,
    backend: FieldBackend | None = None,
) -> int:
    """Return ``f(0)`` for the polynomial through *points*.

    Points are processed in ascending x order so runs are reproducible.
    """

    backend = backend or default_backend
    ordered = sorted(points)
    if not ordered:
        raise InvalidShare("at least one point is required")
    xs = [x for x, _ in ordered]
    value = 0
    for j, (_, y_j) in enumerate(ordered):
        value = backend.add(value, backend.mul(y_j, _basis_at_zero(j, xs, prime, backend), prime), prime)
    return value


def reconstruct(shares: Iterable[Share], *, backend: FieldBackend | None = None) -> int:
    """Interpolate the secret value from *shares*, which must share one prime."""

    shares = list(shares)
    if not shares:
        raise InvalidShare("no shares supplied")
    primes = {share.prime for share in shares}
    if len(primes) != 1:
        raise InvalidShare("shares belong to different fields")
    prime = primes.pop()
    _logger.debug("interpolating from %d shares", len(shares))
    return interpolate_at_zero((share.point for share in shares), prime, backend=backend)


__all__ = ["interpolate_at_zero", "reconstruct"]
