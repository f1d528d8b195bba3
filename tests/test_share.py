import pytest

from shamirkit.errors import InvalidEncoding, InvalidShare
from shamirkit.share import Share

TAG = "ab" * 32


def test_encode_decode_with_tag():
    share = Share(3, 12345, 65537, TAG)
    restored = Share.decode(share.encode())
    assert restored == share
    assert str(share) == share.encode()


def test_encode_decode_without_tag():
    share = Share(1, 0, 101)
    assert Share.decode(share.encode()) == share


def test_decode_ignores_surrounding_whitespace():
    share = Share(2, 9, 101)
    assert Share.decode(f"  {share.encode()}\n") == share


def test_zero_x_rejected():
    with pytest.raises(InvalidShare):
        Share(0, 5, 101)


@pytest.mark.parametrize(
    "x, y, prime",
    [
        (-1, 5, 101),
        (101, 5, 101),
        (1, -1, 101),
        (1, 101, 101),
        (1, 1, 2),
        (1.0, 1, 101),
        (1, True, 101),
    ],
)
def test_out_of_field_rejected(x, y, prime):
    with pytest.raises(InvalidShare):
        Share(x, y, prime)


def test_tag_must_be_hex():
    with pytest.raises(InvalidShare):
        Share(1, 1, 101, "not-a-tag")


@pytest.mark.parametrize("fields", [b"1.2", b"1.2.3.4.5", b"1.2.!!"])
def test_malformed_payload_rejected(fields):
    import base64

    text = base64.urlsafe_b64encode(fields).decode().rstrip("=")
    with pytest.raises(InvalidEncoding):
        Share.decode(text)


def test_decoded_zero_x_rejected():
    import base64

    text = base64.urlsafe_b64encode(b"0.5.2t").decode().rstrip("=")
    with pytest.raises(InvalidShare):
        Share.decode(text)


def test_repr_hides_y():
    assert "12345" not in repr(Share(1, 12345, 65537))


@pytest.mark.parametrize("text", [None, 42, b"MS4yLjJ0"])
def test_decode_rejects_non_text(text):
    with pytest.raises(InvalidEncoding):
        Share.decode(text)
