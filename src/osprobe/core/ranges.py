"""Expansion of compact IPv4 range expressions such as ``10.0.1-2.5-10``."""

from __future__ import annotations

import itertools
import logging

logger = logging.getLogger(__name__)

OCTET_MIN = 0
OCTET_MAX = 255


class AddressRangeError(ValueError):
    """Base class for range expressions that cannot be scanned."""


class RangeParseError(AddressRangeError):
    pass


class EmptyResultError(AddressRangeError):
    pass


def _parse_int(text: str, message: str) -> int:
    # ASCII digits only: int() accepts "+3", " 3", "3_0" and "٣", and
    # str.isdigit() accepts "²" which int() then rejects
    if not (text.isascii() and text.isdigit()):
        raise RangeParseError(message)
    return int(text)


def _parse_part(index: int, part: str) -> range:
    if "-" not in part:
        value = _parse_int(part, f"invalid value in part {index}: {part}")
        return range(value, value + 1)

    bounds = part.split("-")
    if len(bounds) != 2:
        raise RangeParseError(f"invalid range in part {index}: {part}")

    start = _parse_int(bounds[0], f"invalid start value in part {index}: {bounds[0]}")
    end = _parse_int(bounds[1], f"invalid end value in part {index}: {bounds[1]}")
    if start > end:
        raise RangeParseError(f"start cannot be greater than end in part {index}")
    return range(start, end + 1)


def parse_range(expression: str) -> list[range]:
    """Split an expression into one inclusive range per octet."""
    parts = expression.strip().split(".")
    if len(parts) != 4:
        raise RangeParseError("invalid IP range format")
    return [_parse_part(index, part) for index, part in enumerate(parts)]


def expand_range(expression: str) -> list[str]:
    """Return every address denoted by ``expression``, last octet fastest.

    Octet bounds are checked per generated address, so ``1.2.3.250-256``
    fails on ``1.2.3.256`` rather than when the part is parsed.
    """
    ranges = parse_range(expression)

    addresses: list[str] = []
    for octets in itertools.product(*ranges):
        if not all(OCTET_MIN <= value <= OCTET_MAX for value in octets):
            raise RangeParseError(
                "invalid IP address: " + ".".join(str(value) for value in octets)
            )
        addresses.append(".".join(str(value) for value in octets))

    if not addresses:
        raise EmptyResultError("no valid IP addresses generated")

    logger.debug("Expanded %s to %d addresses", expression, len(addresses))
    return addresses
