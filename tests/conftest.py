"""Shared fixtures for ipresolver tests."""

import logging

import pytest


def make_lookup(headers):
    """Exact-name lookup over a dict, like a servlet-style getHeader()."""
    return lambda name: headers.get(name)


@pytest.fixture
def lookup_factory():
    return make_lookup


@pytest.fixture
def clean_root_logger():
    """Restore the root logger after a test calls logging.basicConfig()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
