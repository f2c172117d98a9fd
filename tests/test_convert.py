"""Tests for native Python data conversion."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from cfgmap import (
    Bool,
    ConfigMap,
    Float,
    Int,
    IsExactlyStr,
    List,
    Map,
    Str,
    to_config_map,
    to_value,
)
from cfgmap.errors import ConversionError, InvalidKeyError


class TlsSettings(BaseModel):
    enabled: bool = False
    ciphers: list[str] = []


class HttpSettings(BaseModel):
    ip: str
    port: int
    tls: TlsSettings = TlsSettings()


class TestToValue:
    @pytest.mark.parametrize(
        "obj, expected",
        [
            (1, Int(1)),
            (1.5, Float(1.5)),
            ("a", Str("a")),
            (True, Bool(True)),
            (False, Bool(False)),
            ([1, "a"], List([Int(1), Str("a")])),
            ((1, 2), List([Int(1), Int(2)])),
        ],
    )
    def test_scalars_and_sequences(self, obj: object, expected: object) -> None:
        assert to_value(obj) == expected

    def test_bool_is_not_int(self) -> None:
        assert to_value(True).is_bool()

    def test_dict_becomes_map(self) -> None:
        value = to_value({"a": {"b": 1}})
        assert value.is_map()
        assert value.as_map().get("a/b") == Int(1)

    def test_existing_value_is_copied(self) -> None:
        original = List([Int(1)])
        converted = to_value(original)
        assert converted == original
        assert converted is not original
        converted.as_list().append(Int(2))
        assert original.as_list() == [Int(1)]

    def test_config_map_is_wrapped_and_copied(self) -> None:
        cmap = ConfigMap()
        cmap.add("k", Int(1))
        value = to_value(cmap)
        assert value == Map(cmap)
        assert value.as_map() is not cmap

    @pytest.mark.parametrize("obj", [None, object(), {1, 2}, b"bytes"])
    def test_unsupported(self, obj: object) -> None:
        with pytest.raises(ConversionError) as exc_info:
            to_value(obj)
        assert exc_info.value.code == "CONVERSION_UNSUPPORTED"

    def test_unsupported_nested(self) -> None:
        with pytest.raises(ConversionError):
            to_value({"a": [1, None]})


class TestToConfigMap:
    def test_nested_dict(self) -> None:
        cmap = to_config_map({"http": {"ip": "x", "ports": [80, 443]}, "debug": False})
        assert cmap.get("http/ip") == Str("x")
        assert cmap.get("http/ports") == List([Int(80), Int(443)])
        assert cmap.get("debug") == Bool(False)

    def test_default_applies_to_root_only(self) -> None:
        cmap = to_config_map({"default": {"ip": "x"}, "http": {}}, default="default")
        assert cmap.default == "default/"
        assert cmap.get("http").as_map().default == ""
        assert cmap.get_option("http", "ip").check_that(IsExactlyStr("x"))

    def test_from_dict_classmethod(self) -> None:
        cmap = ConfigMap.from_dict({"a": 1}, default="d")
        assert cmap.get("a") == Int(1)
        assert cmap.default == "d/"

    def test_round_trip_through_to_dict(self) -> None:
        data = {"a": {"b": [1, 2.5, "s", True]}, "c": {}}
        assert to_config_map(data).to_dict() == data

    def test_pydantic_model(self) -> None:
        settings = HttpSettings(ip="0.0.0.0", port=80, tls=TlsSettings(enabled=True, ciphers=["aes"]))
        cmap = to_config_map(settings)
        assert cmap.get("ip") == Str("0.0.0.0")
        assert cmap.get("port") == Int(80)
        assert cmap.get("tls/enabled") == Bool(True)
        assert cmap.get("tls/ciphers") == List([Str("aes")])

    def test_pydantic_model_nested_in_dict(self) -> None:
        cmap = to_config_map({"http": HttpSettings(ip="x", port=1)})
        assert cmap.get("http/tls/enabled") == Bool(False)

    def test_key_with_separator_rejected(self) -> None:
        with pytest.raises(InvalidKeyError) as exc_info:
            to_config_map({"a/b": 1})
        assert exc_info.value.key == "a/b"
        assert exc_info.value.code == "INVALID_KEY"

    def test_non_string_key_rejected(self) -> None:
        with pytest.raises(InvalidKeyError):
            to_config_map({1: "x"})

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(ConversionError):
            to_config_map([1, 2])
