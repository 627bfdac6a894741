"""Strict dotted-quad IPv4 parsing."""

import logging
from dataclasses import dataclass
from typing import Tuple, Union

logger = logging.getLogger(__name__)

IPV4_PART_COUNT = 4
IPV4_DELIMITER = "."
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class IPv4Address:
    """Four octets in network order."""

    octets: Tuple[int, int, int, int]

    def __post_init__(self):
        if len(self.octets) != IPV4_PART_COUNT:
            raise ValueError(f"IPv4 address needs 4 octets, got {len(self.octets)}")
        for octet in self.octets:
            if not isinstance(octet, int) or not 0 <= octet <= 255:
                raise ValueError(f"Octet out of range: {octet!r}")

    def __str__(self) -> str:
        return IPV4_DELIMITER.join(str(octet) for octet in self.octets)


@dataclass(frozen=True)
class MalformedAddress:
    """Result of a rejected parse. Returned, never raised."""

    text: object
    reason: str

    def __bool__(self) -> bool:
        return False


def _parse_octet(part: str) -> Union[int, str]:
    """Return the octet value, or the reason the part was rejected."""
    if not 1 <= len(part) <= 3:
        return f"octet {part!r} must be 1-3 characters"
    if not _DIGITS.issuperset(part):
        return f"octet {part!r} is not decimal"
    # Leading zeroes are ambiguous between decimal and octal
    if len(part) > 1 and part[0] == "0":
        return f"octet {part!r} has a leading zero"
    value = int(part)
    if value > 255:
        return f"octet {part!r} is greater than 255"
    return value


def parse_ipv4(text: str) -> Union[IPv4Address, MalformedAddress]:
    """
    Parse a dotted-quad string into an IPv4Address.

    Parsing is all-or-nothing: either every octet is valid or the result is a
    MalformedAddress describing the first problem found.

    Args:
        text: Candidate address such as "192.168.0.1"

    Returns:
        IPv4Address on success, MalformedAddress otherwise
    """
    if not isinstance(text, str):
        return _reject(text, f"expected str, got {type(text).__name__}")

    parts = text.split(IPV4_DELIMITER)
    if len(parts) != IPV4_PART_COUNT:
        return _reject(text, f"expected {IPV4_PART_COUNT} parts, got {len(parts)}")

    octets = []
    for part in parts:
        value = _parse_octet(part)
        if isinstance(value, str):
            return _reject(text, value)
        octets.append(value)

    return IPv4Address(tuple(octets))


def is_valid_ipv4(text: str) -> bool:
    """Check whether text is a strict dotted-quad IPv4 address."""
    return isinstance(parse_ipv4(text), IPv4Address)


def _reject(text: object, reason: str) -> MalformedAddress:
    logger.debug("Could not parse IP %r: %s", text, reason)
    return MalformedAddress(text=text, reason=reason)
