# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Turn a :class:`Secret` into shares and back."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .backend import FieldBackend, default_backend
from .errors import IntegrityError, InsufficientShares, InvalidParameters, InvalidShare
from .interpolation import reconstruct
from .polynomial import build
from .policy import MIN_PRIMALITY_ROUNDS, policy
from .prime import smallest_prime_of_bitlength
from .randomness import RandomSource
from .secret import Secret
from .share import Share

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SharingConfig:
    """Validated parameters of one sharing session."""

    threshold: int
    num_shares: int
    primality_rounds: int = field(default_factory=lambda: policy.primality_rounds)

    def __post_init__(self) -> None:
        for name in ("threshold", "num_shares", "primality_rounds"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidParameters(f"{name} must be an integer")
        if not 1 <= self.threshold <= self.num_shares:
            raise InvalidParameters("threshold must be between 1 and the number of shares")
        if self.num_shares > policy.max_shares:
            raise InvalidParameters(f"at most {policy.max_shares} shares are supported")
        if self.primality_rounds < MIN_PRIMALITY_ROUNDS:
            raise InvalidParameters(f"primality test needs at least {MIN_PRIMALITY_ROUNDS} rounds")


class Container:
    """Split secrets into ``num_shares`` shares, any ``threshold`` of which recover it."""

    def __init__(
        self,
        config: SharingConfig,
        *,
        random_source: RandomSource | None = None,
        backend: FieldBackend | None = None,
    ) -> None:
        self.config = config
        self._random_source = random_source
        self._backend = backend or default_backend

    def split(self, secret: Secret) -> List[Share]:
        # field holds the secret, every x in 1..N and at least min_field_bitlength bits
        bitlength = max(
            secret.bit_length,
            self.config.num_shares.bit_length(),
            policy.min_field_bitlength,
        )
        prime = smallest_prime_of_bitlength(
            bitlength,
            rounds=self.config.primality_rounds,
            backend=self._backend,
        )
        polynomial = build(secret, self.config.threshold, prime, random_source=self._random_source)
        shares = [
            Share(x, polynomial.evaluate(x, backend=self._backend), prime, secret.integrity_tag)
            for x in range(1, self.config.num_shares + 1)
        ]
        del polynomial
        _logger.debug(
            "split secret into %d shares with threshold %d",
            self.config.num_shares,
            self.config.threshold,
        )
        return shares

    def combine(self, shares: Iterable[Share], *, tag: Optional[str] = None) -> Secret:
        """Reconstruct and verify the secret.

        The integrity tag comes from *tag* or, when omitted, from the shares'
        ``tag_fragment``, which must then agree across all shares.
        """

        shares = list(shares)
        if len(shares) < self.config.threshold:
            raise InsufficientShares(
                f"need {self.config.threshold} shares, got {len(shares)}"
            )
        if tag is None:
            tags = {share.tag_fragment for share in shares}
            if len(tags) != 1:
                raise InvalidShare("shares carry different integrity tags")
            tag = tags.pop()
        if not tag:
            raise IntegrityError("no integrity tag available to verify the secret")

        secret = Secret(reconstruct(shares, backend=self._backend))
        if not secret.verify_integrity(tag):
            _logger.warning("reconstructed secret failed integrity verification")
            raise IntegrityError("reconstructed secret does not match its integrity tag")
        _logger.debug("combined %d shares", len(shares))
        return secret


__all__ = ["SharingConfig", "Container"]
