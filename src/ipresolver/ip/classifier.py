"""IP address classification utilities."""

from ipresolver.ip.parser import IPv4Address

# RFC 1918 ranges as (first octet, lowest second octet, highest second octet)
PRIVATE_RANGES = (
    (10, 0, 255),     # 10.0.0.0/8
    (172, 16, 31),    # 172.16.0.0/12
    (192, 168, 168),  # 192.168.0.0/16
)


def _in_range(addr: IPv4Address, first: int, second_low: int, second_high: int) -> bool:
    b0, b1 = addr.octets[0], addr.octets[1]
    return b0 == first and second_low <= b1 <= second_high


def is_internal(addr: IPv4Address) -> bool:
    """
    Check if an IPv4 address is in a private range (RFC 1918).

    Each range is tested on its own; a miss in one range never
    carries into the next.

    Args:
        addr: Parsed IPv4 address

    Returns:
        True if the address is 10/8, 172.16/12 or 192.168/16
    """
    return any(_in_range(addr, *bounds) for bounds in PRIVATE_RANGES)
