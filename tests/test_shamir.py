import itertools
import os

import pytest

from enshamir.shamir import combine, split


def test_share_shape():
    data = os.urandom(32)
    shares = split(data, 5, 3)
    assert len(shares) == 5
    assert all(len(share) == len(data) + 1 for share in shares)
    xs = [share[-1] for share in shares]
    assert len(set(xs)) == len(xs)
    assert 0 not in xs


@pytest.mark.parametrize(("parts", "threshold"), [(2, 2), (3, 2), (4, 3), (5, 5)])
def test_any_threshold_subset_recovers(parts, threshold):
    data = os.urandom(24)
    shares = split(data, parts, threshold)
    for size in range(threshold, parts + 1):
        for subset in itertools.combinations(shares, size):
            assert combine(list(subset)) == data


def test_fewer_than_threshold_shares_do_not_recover():
    data = os.urandom(32)
    shares = split(data, 4, 3)
    for subset in itertools.combinations(shares, 2):
        assert combine(list(subset)) != data


def test_share_order_does_not_matter():
    secret = b"secret"
    shares = split(secret, 4, 3)
    assert combine(shares[::-1]) == secret


def test_maximum_parts():
    secret = b"secret"
    shares = split(secret, 255, 2)
    assert sorted(share[-1] for share in shares) == list(range(1, 256))
    assert combine(shares[:2]) == secret
    assert combine(shares[-3:]) == secret


def test_constant_polynomial_shares():
    assert combine([b"\x05\x01", b"\x05\x02"]) == b"\x05"


@pytest.mark.parametrize(
    ("parts", "threshold", "message"),
    [
        (2, 3, "parts cannot be less than threshold"),
        (256, 2, "parts cannot exceed 255"),
        (3, 1, "threshold must be at least 2"),
    ],
)
def test_split_rejects_bad_arguments(parts, threshold, message):
    with pytest.raises(ValueError, match=message):
        split(b"secret", parts, threshold)


def test_split_rejects_empty_secret():
    with pytest.raises(ValueError, match="empty secret"):
        split(b"", 3, 2)


def test_combine_needs_two_shares():
    shares = split(b"secret", 3, 2)
    with pytest.raises(ValueError, match="less than two parts"):
        combine(shares[:1])


def test_combine_rejects_short_parts():
    with pytest.raises(ValueError, match="at least two bytes"):
        combine([b"\x01", b"\x02"])


def test_combine_rejects_mismatched_lengths():
    shares = split(b"secret", 3, 2)
    with pytest.raises(ValueError, match="same length"):
        combine([shares[0], shares[1][:-2] + shares[1][-1:]])


def test_combine_rejects_duplicate_parts():
    shares = split(b"secret", 3, 2)
    with pytest.raises(ValueError, match="duplicate part"):
        combine([shares[0], shares[0]])