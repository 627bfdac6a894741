"""
Adapters that turn request objects into header lookup callables.

The resolver only needs ``lookup(name) -> Optional[str]``. These helpers build
one from a plain mapping, a WSGI/CGI environ, or httpx headers, so callers
never have to rely on an ambient request context.
"""

from typing import Any, Mapping, Optional, Union

import httpx

from ipresolver.headers import HeaderLookup


def _absent(name: str) -> Optional[str]:
    return None


def mapping_lookup(headers: Optional[Mapping[str, str]]) -> HeaderLookup:
    """Build a case-insensitive lookup over a plain header mapping."""
    if not headers:
        return _absent

    folded = {}
    for key, value in headers.items():
        # First spelling wins if the mapping holds the same header twice
        folded.setdefault(key.lower(), value)

    def lookup(name: str) -> Optional[str]:
        return folded.get(name.lower())

    return lookup


def environ_key(name: str) -> str:
    """Convert an HTTP header name to its CGI environ key."""
    return "HTTP_" + name.upper().replace("-", "_")


def _is_cgi_name(name: str) -> bool:
    return name.isupper() and "-" not in name


def environ_lookup(environ: Optional[Mapping[str, Any]]) -> HeaderLookup:
    """
    Build a lookup over a WSGI/CGI environ.

    ``X-Forwarded-For`` is read from ``HTTP_X_FORWARDED_FOR``. Names already in
    CGI form (``HTTP_CLIENT_IP``, ``REMOTE_ADDR``) are tried verbatim before the
    prefixed key.
    """
    if not environ:
        return _absent

    def lookup(name: str) -> Optional[str]:
        keys = [environ_key(name)]
        if _is_cgi_name(name):
            keys.insert(0, name)
        for key in keys:
            value = environ.get(key)
            if value is not None:
                return str(value)
        return None

    return lookup


def httpx_lookup(source: Union[httpx.Request, httpx.Response, httpx.Headers]) -> HeaderLookup:
    """Build a lookup over httpx headers, which are already case-insensitive."""
    headers = source if isinstance(source, httpx.Headers) else source.headers

    def lookup(name: str) -> Optional[str]:
        return headers.get(name)

    return lookup
