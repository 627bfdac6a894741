"""Client address resolution from proxy headers."""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

HeaderLookup = Callable[[str], Optional[str]]

# Checked in this order; the first usable value wins
CANDIDATE_HEADERS = (
    "X-Forwarded-For",
    "Proxy-Client-IP",
    "WL-Proxy-Client-IP",
    "HTTP_X_FORWARDED_FOR",
    "HTTP_X_FORWARDED",
    "HTTP_X_CLUSTER_CLIENT_IP",
    "HTTP_CLIENT_IP",
    "HTTP_FORWARDED_FOR",
    "HTTP_FORWARDED",
    "HTTP_VIA",
    "REMOTE_ADDR",
)

UNKNOWN = "unknown"


def _is_usable(value: Optional[str]) -> bool:
    if value is None:
        return False
    value = value.strip()
    return bool(value) and value.lower() != UNKNOWN


def resolve(lookup: HeaderLookup, remote_fallback: Optional[str] = None) -> Optional[str]:
    """
    Return the first client address candidate found in the proxy headers.

    A header value may carry a proxy chain ("client, proxy1, proxy2"); only the
    first hop is returned. The value is not authenticated in any way.

    Args:
        lookup: Returns the raw value of a header, or None when it is absent
        remote_fallback: Transport-level peer address, used when no header matches

    Returns:
        The candidate address, or None if neither headers nor fallback supply one
    """
    for header in CANDIDATE_HEADERS:
        value = lookup(header)
        if not _is_usable(value):
            continue
        candidate = value.split(",")[0].strip()
        if not candidate:
            logger.debug("Empty first hop in %s, skipping", header)
            continue
        logger.debug("Client IP %r taken from %s", candidate, header)
        return candidate

    if not remote_fallback:
        logger.debug("No proxy header and no remote address available")
        return None

    logger.debug("Client IP %r taken from remote address", remote_fallback)
    return remote_fallback
