"""Narrowing for decoded `.releaserc` JSON.

``json.loads`` returns ``object``; these helpers check the shape at runtime
and hand back a typed value, or None when the shape does not match.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

StrDict = dict[str, object]
ObjList = list[object]


def as_str_dict(obj: object) -> StrDict | None:
    """A JSON object (dict with only string keys), else None."""
    if isinstance(obj, dict) and all(isinstance(k, str) for k in cast(dict[object, object], obj)):
        return cast(StrDict, obj)
    return None


def as_obj_list(obj: object) -> ObjList | None:
    return cast(ObjList, obj) if isinstance(obj, list) else None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """``table[key]`` when it is a non-blank string.

    The value is returned untouched: branch names are compared verbatim, so
    surrounding whitespace is significant.
    """
    value = table.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def get_list(table: Mapping[str, object], key: str) -> ObjList | None:
    return as_obj_list(table.get(key))
