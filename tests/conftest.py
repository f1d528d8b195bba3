"""Shared fixtures for the shamirkit test-suite."""
from __future__ import annotations

import pytest

from shamirkit.prime import smallest_prime_of_bitlength
from shamirkit.randomness import SeededRandomSource


@pytest.fixture
def seeded_source():
    return SeededRandomSource(1234)


@pytest.fixture
def prime16():
    """2**16 + 1, the smallest prime above 2**16."""
    return smallest_prime_of_bitlength(16)
