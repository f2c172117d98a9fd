"""cfgmap - Path-addressable configuration trees with typed values and conditions."""

from __future__ import annotations

# Values
from cfgmap.value import Bool, Float, Int, List, Map, Str, Value, ValueKind

# Map
from cfgmap.config_map import ConfigMap

# Conditions
from cfgmap.conditions import (
    Always,
    And,
    Checkable,
    Condition,
    Constant,
    IsBool,
    IsExactlyBool,
    IsExactlyFloat,
    IsExactlyInt,
    IsExactlyList,
    IsExactlyMap,
    IsExactlyStr,
    IsFalse,
    IsFloat,
    IsInt,
    IsKind,
    IsList,
    IsListWith,
    IsListWithLength,
    IsMap,
    IsStr,
    IsTrue,
    Never,
    Not,
    Or,
    check_that,
)

# Conversion
from cfgmap.convert import to_config_map, to_value

# Errors
from cfgmap.errors import (
    CfgMapError,
    ConversionError,
    ErrorCodes,
    InvalidInsertionError,
    InvalidKeyError,
    ValueTypeError,
)

__version__ = "0.4.0"

__all__ = [
    # Values
    "Value",
    "ValueKind",
    "Int",
    "Float",
    "Str",
    "Bool",
    "Map",
    "List",
    # Map
    "ConfigMap",
    # Conditions
    "Condition",
    "Checkable",
    "check_that",
    "IsKind",
    "IsInt",
    "IsFloat",
    "IsStr",
    "IsBool",
    "IsMap",
    "IsList",
    "IsExactlyInt",
    "IsExactlyFloat",
    "IsExactlyStr",
    "IsExactlyBool",
    "IsExactlyList",
    "IsExactlyMap",
    "IsListWith",
    "IsListWithLength",
    "IsTrue",
    "IsFalse",
    "Constant",
    "Always",
    "Never",
    "And",
    "Or",
    "Not",
    # Conversion
    "to_value",
    "to_config_map",
    # Errors
    "ErrorCodes",
    "CfgMapError",
    "InvalidInsertionError",
    "ValueTypeError",
    "InvalidKeyError",
    "ConversionError",
]
