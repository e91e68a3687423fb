from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Tuple

from .paths import split_path

MISSING = object()


def get_value_by_path(data: Any, path: str, disable_dot_notation: bool = False) -> Any:
    """Retrieve a value from nested mappings using a dot-notation path.

    Returns the MISSING sentinel when any segment is absent or when an
    intermediate value is not a mapping (lists are not traversed).
    """
    val = data
    for key in split_path(path, disable_dot_notation):
        if val is None or not isinstance(val, Mapping):
            return MISSING
        if key not in val:
            return MISSING
        val = val[key]
    return val


def resolve_field(record: Any, path: str, disable_dot_notation: bool = False) -> Tuple[Any, bool]:
    """Resolve `path` inside `record`.

    Absent keys and explicit nulls are both reported as not found.
    """
    value = get_value_by_path(record, path, disable_dot_notation)
    if value is MISSING or value is None:
        return None, False
    return value, True
