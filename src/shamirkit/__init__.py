# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Shamir's secret sharing over prime fields with integrity verification."""

from .container import Container, SharingConfig
from .errors import (
    InsecureRandomUnavailable,
    InsufficientShares,
    IntegrityError,
    InvalidEncoding,
    InvalidParameters,
    InvalidSecret,
    InvalidShare,
    SecretSharingError,
    SingularShares,
)
from .interpolation import interpolate_at_zero, reconstruct
from .polynomial import Polynomial, build, evaluate
from .prime import smallest_prime_of_bitlength
from .randomness import random_of_bitlength
from .secret import MAX_BITLENGTH, Secret
from .share import Share

__version__ = "0.1.0"

__all__ = [
    "Container",
    "SharingConfig",
    "Secret",
    "Share",
    "Polynomial",
    "MAX_BITLENGTH",
    "build",
    "evaluate",
    "interpolate_at_zero",
    "reconstruct",
    "random_of_bitlength",
    "smallest_prime_of_bitlength",
    "SecretSharingError",
    "InvalidSecret",
    "InvalidEncoding",
    "SingularShares",
    "InsecureRandomUnavailable",
    "InvalidShare",
    "InvalidParameters",
    "InsufficientShares",
    "IntegrityError",
]
