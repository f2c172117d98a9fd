"""Tests for the scripts in the examples/ directory."""

from __future__ import annotations

import importlib.util
import pathlib

import pytest

from cfgmap import ConfigMap, Str

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent.parent


def _load_example_module(relative_path: str):
    """Load a Python module from a path relative to PROJECT_ROOT using importlib."""
    full_path = PROJECT_ROOT / relative_path
    spec = importlib.util.spec_from_file_location(full_path.stem, str(full_path))
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


class TestHttpSettingsExample:
    def test_build_config_returns_config_map(self):
        mod = _load_example_module("examples/http_settings.py")
        assert isinstance(mod.build_config(), ConfigMap)

    def test_category_port_overrides_default(self):
        mod = _load_example_module("examples/http_settings.py")
        assert mod.listen_address(mod.build_config(), "http") == "127.0.0.1:80"

    def test_category_ip_overrides_default(self):
        mod = _load_example_module("examples/http_settings.py")
        assert mod.listen_address(mod.build_config(), "admin") == "10.0.0.1:8080"

    def test_unknown_service_uses_defaults(self):
        mod = _load_example_module("examples/http_settings.py")
        assert mod.listen_address(mod.build_config(), "metrics") == "127.0.0.1:8080"

    def test_invalid_option_type_rejected(self):
        mod = _load_example_module("examples/http_settings.py")
        config = mod.build_config()
        config.update_option("http", "port", Str("eighty"))
        with pytest.raises(ValueError):
            mod.listen_address(config, "http")
