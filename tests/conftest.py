"""Shared test fixtures for the cfgmap test suite."""

from __future__ import annotations

import pytest

from cfgmap import ConfigMap, Float, Int, List, Map, Str


@pytest.fixture
def nested_map() -> ConfigMap:
    """Root map with a scalar, a two-level nested map and a list.

    Layout::

        num = 10
        sub/key = 5
        sub/inner/name = "leaf"
        items = [1, 2.5, "x"]
    """
    cmap = ConfigMap()
    cmap.add("num", Int(10))
    cmap.add("sub", Map())
    cmap.add("sub/key", Int(5))
    cmap.add("sub/inner", Map())
    cmap.add("sub/inner/name", Str("leaf"))
    cmap.add("items", List([Int(1), Float(2.5), Str("x")]))
    return cmap


@pytest.fixture
def defaults_map() -> ConfigMap:
    """Map with its default prefix at ``default/`` and one ``http`` category."""
    cmap = ConfigMap.with_default("default")
    cmap.add("default", Map())
    cmap.add("default/ip", Str("x"))
    cmap.add("default/port", Int(8080))
    cmap.add("http", Map())
    return cmap
