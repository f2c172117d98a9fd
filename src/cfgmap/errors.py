"""Error hierarchy for the cfgmap package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "CfgMapError",
    "InvalidInsertionError",
    "ValueTypeError",
    "InvalidKeyError",
    "ConversionError",
    "ErrorCodes",
]


class CfgMapError(Exception):
    """Base error for all cfgmap errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidInsertionError(CfgMapError):
    """Raised when ``ConfigMap.add`` cannot find a map to insert into.

    The parent path either does not resolve or resolves to a non-map value;
    the two cases are deliberately reported the same way.
    """

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_INSERTION",
            message=f"Cannot insert at '{path}': parent is not an existing map",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The full path that was passed to ``add``."""
        return self.details["path"]


class ValueTypeError(CfgMapError):
    """Raised when a value variant is constructed with the wrong payload type."""

    def __init__(self, kind: str, expected: str, actual: Any, **kwargs: Any) -> None:
        super().__init__(
            code="VALUE_TYPE_MISMATCH",
            message=f"{kind} expects {expected}, got {type(actual).__name__}",
            details={"kind": kind, "expected": expected, "actual": type(actual).__name__},
            **kwargs,
        )

    @property
    def kind(self) -> str:
        """The variant name that rejected the payload."""
        return self.details["kind"]


class InvalidKeyError(CfgMapError):
    """Raised when a map key cannot be stored as a path segment."""

    def __init__(self, key: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_KEY",
            message=f"Invalid key {key!r}: {reason}",
            details={"key": key, "reason": reason},
            **kwargs,
        )

    @property
    def key(self) -> Any:
        """The rejected key."""
        return self.details["key"]


class ConversionError(CfgMapError):
    """Raised when a native Python object has no value representation."""

    def __init__(self, obj: Any, **kwargs: Any) -> None:
        super().__init__(
            code="CONVERSION_UNSUPPORTED",
            message=f"Cannot convert object of type {type(obj).__name__} to a config value",
            details={"type": type(obj).__name__},
            **kwargs,
        )


class ErrorCodes:
    """All cfgmap error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_INSERTION:
            create_parent_first()
    """

    INVALID_INSERTION = "INVALID_INSERTION"
    VALUE_TYPE_MISMATCH = "VALUE_TYPE_MISMATCH"
    INVALID_KEY = "INVALID_KEY"
    CONVERSION_UNSUPPORTED = "CONVERSION_UNSUPPORTED"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
