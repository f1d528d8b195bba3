# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Secret-encoding polynomial used while splitting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .backend import FieldBackend, default_backend
from .errors import InvalidParameters, InvalidSecret
from .randomness import RandomSource, random_of_bitlength
from .secret import Secret


@dataclass(frozen=True)
class Polynomial:
    """Coefficients ``c0..c(k-1)`` over GF(prime); ``c0`` is the secret."""

    coefficients: tuple[int, ...]
    prime: int

    @property
    def threshold(self) -> int:
        return len(self.coefficients)

    def evaluate(self, x: int, *, backend: FieldBackend | None = None) -> int:
        return evaluate(self.coefficients, x, self.prime, backend=backend)


def build(
    secret: Secret,
    threshold: int,
    prime: int,
    *,
    random_source: RandomSource | None = None,
) -> Polynomial:
    """Create a degree ``threshold - 1`` polynomial with *secret* as constant term."""

    if not isinstance(threshold, int) or isinstance(threshold, bool) or threshold < 1:
        raise InvalidParameters(f"threshold must be a positive integer, got {threshold!r}")
    if secret.value >= prime:
        raise InvalidSecret("secret does not fit into the field")
    bitlength = max(prime.bit_length() - 1, 1)
    coefficients = [secret.value] + [
        random_of_bitlength(bitlength, source=random_source) % prime for _ in range(threshold - 1)
    ]
    return Polynomial(tuple(coefficients), prime)


def evaluate(
    coefficients: Sequence[int],
    x: int,
    prime: int,
    *,
    backend: FieldBackend | None = None,
) -> int:
    """Horner evaluation of ``sum(c_i * x**i) mod prime``."""

    backend = backend or default_backend
    result = 0
    for coefficient in reversed(coefficients):
        result = backend.add(backend.mul(result, x, prime), coefficient, prime)
    return result


__all__ = ["Polynomial", "build", "evaluate"]
