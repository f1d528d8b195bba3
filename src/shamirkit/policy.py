# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Centralised tunables for the field arithmetic.

Values can be overridden by environment variables so that deployments can
raise the primality-test strength or the share limit without code changes.
Invalid overrides fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

MIN_PRIMALITY_ROUNDS = 20


def _load_int(name: str, default: int, *, minimum: int = 1, maximum: int | None = None) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    if parsed < minimum:
        return default
    if maximum is not None and parsed > maximum:
        return default
    return parsed


@dataclass(frozen=True)
class FieldPolicy:
    """Holds runtime tunables for prime generation and sharing limits."""

    primality_rounds: int = MIN_PRIMALITY_ROUNDS
    default_bitlength: int = 256
    max_shares: int = 512
    min_field_bitlength: int = 16


def load_policy() -> FieldPolicy:
    """Load the field policy considering environment overrides."""

    return FieldPolicy(
        primality_rounds=_load_int(
            "SHAMIRKIT_PRIMALITY_ROUNDS", MIN_PRIMALITY_ROUNDS, minimum=MIN_PRIMALITY_ROUNDS
        ),
        # random secrets carry one extra bit, see randomness.random_of_bitlength
        default_bitlength=_load_int("SHAMIRKIT_DEFAULT_BITLENGTH", 256, maximum=4095),
        max_shares=_load_int("SHAMIRKIT_MAX_SHARES", 512),
        min_field_bitlength=_load_int("SHAMIRKIT_MIN_FIELD_BITLENGTH", 16, maximum=4096),
    )


policy = load_policy()


__all__ = ["FieldPolicy", "MIN_PRIMALITY_ROUNDS", "policy", "load_policy"]
