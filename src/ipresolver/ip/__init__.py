"""IPv4 parsing and classification."""

from ipresolver.ip.classifier import is_internal
from ipresolver.ip.parser import IPv4Address, MalformedAddress, is_valid_ipv4, parse_ipv4

__all__ = [
    "IPv4Address",
    "MalformedAddress",
    "is_internal",
    "is_valid_ipv4",
    "parse_ipv4",
]
