"""Tests for ipresolver.lookups module."""

import httpx

from ipresolver.headers import resolve
from ipresolver.lookups import environ_key, environ_lookup, httpx_lookup, mapping_lookup


class TestMappingLookup:
    def test_case_insensitive(self):
        lookup = mapping_lookup({"x-forwarded-for": "203.0.113.7"})
        assert lookup("X-Forwarded-For") == "203.0.113.7"
        assert lookup("X-FORWARDED-FOR") == "203.0.113.7"

    def test_missing_header(self):
        assert mapping_lookup({"Host": "example.com"})("X-Forwarded-For") is None

    def test_none_mapping(self):
        assert mapping_lookup(None)("X-Forwarded-For") is None

    def test_resolves_through_resolver(self):
        lookup = mapping_lookup({"proxy-client-ip": "192.0.2.4"})
        assert resolve(lookup, "10.0.0.1") == "192.0.2.4"


class TestEnvironKey:
    def test_header_name(self):
        assert environ_key("X-Forwarded-For") == "HTTP_X_FORWARDED_FOR"

    def test_mixed_case(self):
        assert environ_key("wl-proxy-client-ip") == "HTTP_WL_PROXY_CLIENT_IP"


class TestEnvironLookup:
    def test_header_name_maps_to_cgi_key(self):
        lookup = environ_lookup({"HTTP_X_FORWARDED_FOR": "203.0.113.7"})
        assert lookup("X-Forwarded-For") == "203.0.113.7"

    def test_cgi_name_looked_up_verbatim(self):
        lookup = environ_lookup({"HTTP_CLIENT_IP": "192.0.2.8"})
        assert lookup("HTTP_CLIENT_IP") == "192.0.2.8"

    def test_cgi_name_falls_back_to_prefixed_key(self):
        lookup = environ_lookup({"HTTP_HTTP_VIA": "192.0.2.9"})
        assert lookup("HTTP_VIA") == "192.0.2.9"

    def test_remote_addr(self):
        lookup = environ_lookup({"REMOTE_ADDR": "127.0.0.1"})
        assert lookup("REMOTE_ADDR") == "127.0.0.1"

    def test_missing(self):
        assert environ_lookup({"PATH": "/usr/bin"})("X-Forwarded-For") is None

    def test_none_environ(self):
        assert environ_lookup(None)("REMOTE_ADDR") is None


class TestHttpxLookup:
    def test_request_headers(self):
        request = httpx.Request(
            "GET",
            "https://example.com/",
            headers={"x-forwarded-for": "203.0.113.7, 10.0.0.5"},
        )
        lookup = httpx_lookup(request)
        assert lookup("X-Forwarded-For") == "203.0.113.7, 10.0.0.5"
        assert resolve(lookup, None) == "203.0.113.7"

    def test_headers_object(self):
        lookup = httpx_lookup(httpx.Headers({"Proxy-Client-IP": "192.0.2.1"}))
        assert lookup("proxy-client-ip") == "192.0.2.1"

    def test_missing_header(self):
        request = httpx.Request("GET", "https://example.com/")
        assert httpx_lookup(request)("Proxy-Client-IP") is None
