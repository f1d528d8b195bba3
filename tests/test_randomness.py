import pytest

from shamirkit.errors import InsecureRandomUnavailable, InvalidParameters
from shamirkit.randomness import SeededRandomSource, SystemRandomSource, random_of_bitlength


class ShortSource:
    def random_bytes(self, length):
        return b"\x01" * (length - 1)


class ZeroSource:
    def random_bytes(self, length):
        return b"\x00" * length


class FullSource:
    def random_bytes(self, length):
        return b"\xff" * length


@pytest.mark.parametrize("bitlength", [1, 7, 8, 9, 64, 256, 4095])
def test_top_bit_is_forced(bitlength):
    value = random_of_bitlength(bitlength)
    assert value.bit_length() == bitlength + 1
    assert 2**bitlength <= value < 2 ** (bitlength + 1)


def test_mask_then_set_bit():
    assert random_of_bitlength(12, source=ZeroSource()) == 1 << 12
    assert random_of_bitlength(12, source=FullSource()) == (1 << 13) - 1


def test_seeded_source_is_reproducible():
    first = random_of_bitlength(256, source=SeededRandomSource("seed"))
    second = random_of_bitlength(256, source=SeededRandomSource("seed"))
    other = random_of_bitlength(256, source=SeededRandomSource("other"))
    assert first == second
    assert first != other


def test_short_read_is_fatal():
    with pytest.raises(InsecureRandomUnavailable):
        random_of_bitlength(64, source=ShortSource())


def test_missing_os_random_is_fatal(monkeypatch):
    import shamirkit.randomness as randomness

    def unavailable(length):
        raise NotImplementedError("no urandom")

    monkeypatch.setattr(randomness.os, "urandom", unavailable)
    with pytest.raises(InsecureRandomUnavailable):
        SystemRandomSource().random_bytes(16)
    with pytest.raises(InsecureRandomUnavailable):
        random_of_bitlength(64)


@pytest.mark.parametrize("bitlength", [0, -3, True, 2.5])
def test_invalid_bitlength(bitlength):
    with pytest.raises(InvalidParameters):
        random_of_bitlength(bitlength)
