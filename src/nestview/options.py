"""Option merging for views.

``UNSET`` marks an option the caller explicitly left undefined. It is dropped
before defaults are applied, unlike ``None`` which is a real value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class _Unset:
    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def result(obj: Any, name: str, default: Any = None) -> Any:
    """Read an attribute, calling it first when it is callable.

    Lets ``defaults``, ``attributes`` and ``events`` be declared either as
    plain values or as methods computed per instance.
    """
    value = getattr(obj, name, default)
    if callable(value):
        return value()
    return value


def strip_unset(options: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is UNSET."""
    return {k: v for k, v in options.items() if v is not UNSET}


def merge_options(
    defaults: Mapping[str, Any] | None, options: Mapping[str, Any]
) -> dict[str, Any]:
    """Merge caller options over defaults, ignoring UNSET values."""
    merged = dict(defaults or {})
    merged.update(strip_unset(options))
    return merged
