"""Public entry points used by access-control and request logging code."""

from typing import Any, Mapping, Optional

from ipresolver.headers import HeaderLookup, resolve
from ipresolver.ip.classifier import is_internal
from ipresolver.ip.parser import IPv4Address, parse_ipv4
from ipresolver.lookups import environ_lookup


def client_ip(lookup: HeaderLookup, remote_fallback: Optional[str] = None) -> Optional[str]:
    """
    Resolve the client address of a request.

    The result is returned as found in the header and is not validated;
    pass it to is_internal_ip() or parse_ipv4() if that matters.

    Args:
        lookup: Header lookup for the current request
        remote_fallback: Transport-level peer address, if known

    Returns:
        Address string, or None when no header and no fallback is available
    """
    return resolve(lookup, remote_fallback)


def client_ip_from_environ(environ: Optional[Mapping[str, Any]]) -> Optional[str]:
    """Resolve the client address from a WSGI/CGI environ."""
    if not environ:
        return None
    return client_ip(environ_lookup(environ), environ.get("REMOTE_ADDR"))


def is_internal_ip(text: str) -> bool:
    """
    Check if a dotted-quad string is a private (RFC 1918) IPv4 address.

    Malformed input returns False, the same as a public address. Callers that
    need to tell the two apart should use parse_ipv4() directly.

    Args:
        text: Address string, e.g. the result of client_ip()

    Returns:
        True only for a well-formed address in 10/8, 172.16/12 or 192.168/16
    """
    parsed = parse_ipv4(text)
    if not isinstance(parsed, IPv4Address):
        return False
    return is_internal(parsed)
