"""Helpers for safely working with dynamic (untyped) structures.

Use these helpers at boundaries where we ingest TOML or other untyped data.
They provide runtime validation and static type narrowing.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    value = table.get(key)
    return as_str_dict(value)


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Get an integer value from a mapping.

    Returns None if missing or not an int. TOML booleans are not integers here.
    """
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    """Get a boolean value from a mapping, or None if missing or not a bool."""
    value = table.get(key)
    if not isinstance(value, bool):
        return None
    return value
