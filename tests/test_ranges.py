"""Tests for range expansion."""

from __future__ import annotations

import pytest

from osprobe.core import EmptyResultError, RangeParseError, expand_range
from osprobe.core.ranges import AddressRangeError


def test_single_address():
    assert expand_range("192.168.1.1") == ["192.168.1.1"]


def test_last_octet_range():
    assert expand_range("10.0.0.1-3") == ["10.0.0.1", "10.0.0.2", "10.0.0.3"]


def test_last_octet_varies_fastest():
    assert expand_range("10.0.1-2.5-6") == [
        "10.0.1.5",
        "10.0.1.6",
        "10.0.2.5",
        "10.0.2.6",
    ]


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("192.168.33.1-245", 245),
        ("10.0.1-2.5-10", 12),
        ("1-2.1-2.1-2.1-2", 16),
        ("0.0.0.0-255", 256),
    ],
)
def test_count_is_product_of_range_sizes(expression, expected):
    addresses = expand_range(expression)
    assert len(addresses) == expected
    assert len(set(addresses)) == expected
    for address in addresses:
        octets = address.split(".")
        assert len(octets) == 4
        assert all(0 <= int(octet) <= 255 for octet in octets)


def test_octet_out_of_range_fails():
    with pytest.raises(RangeParseError, match="invalid IP address: 1.2.3.256"):
        expand_range("1.2.3.256")


def test_range_crossing_255_fails_on_generated_address():
    with pytest.raises(RangeParseError, match="1.2.3.256"):
        expand_range("1.2.3.250-256")


def test_three_parts_fails():
    with pytest.raises(RangeParseError, match="invalid IP range format"):
        expand_range("1.2.3")


def test_five_parts_fails():
    with pytest.raises(RangeParseError):
        expand_range("1.2.3.4.5")


def test_inverted_range_fails():
    with pytest.raises(RangeParseError, match="start cannot be greater than end"):
        expand_range("10.0.0.9-3")


@pytest.mark.parametrize(
    "expression",
    [
        "10.0.0.a",
        "10.0.0.1-b",
        "10.0.0.x-3",
        "10.0.0.1-2-3",
        "10.0.0.-1",
        "10..0.1",
        "10.0.0.²",
        "10.0.0.٣",
        "10.0.0.1-³",
        "10.0.0.+3",
        "10.0.0.3_0",
    ],
)
def test_malformed_parts_fail(expression):
    with pytest.raises(RangeParseError):
        expand_range(expression)


def test_errors_share_a_base_class():
    assert issubclass(RangeParseError, AddressRangeError)
    assert issubclass(EmptyResultError, AddressRangeError)
    assert issubclass(AddressRangeError, ValueError)
