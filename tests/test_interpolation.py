import pytest

from shamirkit.errors import InvalidShare, SingularShares
from shamirkit.interpolation import interpolate_at_zero, reconstruct
from shamirkit.share import Share


def test_line_through_two_points():
    # f(x) = 5 + 2x over GF(13)
    assert interpolate_at_zero([(1, 7), (2, 9)], 13) == 5


def test_order_does_not_matter():
    points = [(1, 1494), (2, 329), (3, 965)]
    # f(x) = 1234 + 166x + 94x^2 over GF(1613)
    assert interpolate_at_zero(points, 1613) == 1234
    assert interpolate_at_zero(list(reversed(points)), 1613) == 1234


def test_single_point_returns_its_y():
    assert interpolate_at_zero([(4, 42)], 101) == 42


def test_duplicate_x_is_singular():
    shares = [Share(1, 5, 101), Share(1, 6, 101), Share(2, 7, 101)]
    with pytest.raises(SingularShares):
        reconstruct(shares)


def test_duplicate_x_modulo_prime_is_singular():
    with pytest.raises(SingularShares):
        interpolate_at_zero([(1, 5), (102, 6)], 101)


def test_mixed_primes_rejected():
    with pytest.raises(InvalidShare):
        reconstruct([Share(1, 5, 101), Share(2, 6, 103)])


def test_empty_input_rejected():
    with pytest.raises(InvalidShare):
        reconstruct([])
    with pytest.raises(InvalidShare):
        interpolate_at_zero([], 101)
