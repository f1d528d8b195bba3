# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy shared by every shamirkit module."""

from __future__ import annotations


class SecretSharingError(Exception):
    """Base class for all shamirkit failures."""


class InvalidSecret(SecretSharingError, ValueError):
    """Secret is not a non-negative integer of at most 4096 bits."""


class InvalidEncoding(SecretSharingError, ValueError):
    """Portable string is empty or malformed."""


class SingularShares(SecretSharingError, ArithmeticError):
    """Two shares have the same x coordinate in the field."""


class InsecureRandomUnavailable(SecretSharingError, RuntimeError):
    """The operating system CSPRNG cannot be used."""


class InvalidShare(SecretSharingError, ValueError):
    pass


class InvalidParameters(SecretSharingError, ValueError):
    pass


class InsufficientShares(SecretSharingError, ValueError):
    pass


class IntegrityError(SecretSharingError):
    """Reconstructed value does not match the original integrity tag."""


__all__ = [
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
