"""
Shared pytest fixtures for rgbacolor tests.

Provides:
- cache: Function-scoped ColorCache with default settings
- make_cache: Factory for caches with a custom size, policy or resolver
- hex_strings: Helper producing distinct valid hex color strings
"""

from __future__ import annotations

import pytest

from rgbacolor.color.cache import ColorCache


@pytest.fixture
def cache():
    """A fresh cache per test so entries never leak between tests."""
    return ColorCache()


@pytest.fixture
def make_cache():
    def _make(max_size=8, eviction_policy=None, resolver=None):
        kwargs = {"max_size": max_size, "resolver": resolver}
        if eviction_policy is not None:
            kwargs["eviction_policy"] = eviction_policy
        return ColorCache(**kwargs)

    return _make


@pytest.fixture
def hex_strings():
    def _hex_strings(count, start=0):
        return [f"#{i:06x}" for i in range(start, start + count)]

    return _hex_strings
