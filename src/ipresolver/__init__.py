"""Client IP resolution behind proxies and private-range classification."""

__version__ = "1.0.0"

from ipresolver.api import client_ip, client_ip_from_environ, is_internal_ip  # noqa: E402
from ipresolver.headers import CANDIDATE_HEADERS, resolve  # noqa: E402
from ipresolver.ip import IPv4Address, MalformedAddress, is_internal, parse_ipv4  # noqa: E402

__all__ = [
    "__version__",
    "CANDIDATE_HEADERS",
    "IPv4Address",
    "MalformedAddress",
    "client_ip",
    "client_ip_from_environ",
    "is_internal",
    "is_internal_ip",
    "parse_ipv4",
    "resolve",
]
