from __future__ import annotations

from typing import Any, List

from .accessors import MISSING, get_value_by_path, resolve_field

ROOT = '(root)'


def resolve_items_by_root(data: Any, root_path: str = ROOT) -> List[Any]:
    """Return the record sequence found at `root_path` inside a JSON document.

    '(root)' means the document itself; a single object becomes a one-record
    list. Paths that do not lead anywhere yield no records.
    """
    if data is None:
        return []

    if root_path in (None, '', ROOT):
        target = data
    else:
        target = get_value_by_path(data, root_path)
        if target is MISSING or target is None:
            return []

    if isinstance(target, list):
        return target
    return [target]


def count_resolved(records: List[Any], field_path: str, disable_dot_notation: bool = False) -> int:
    """Number of records in which `field_path` resolves to a non-null value."""
    return sum(1 for record in records if resolve_field(record, field_path, disable_dot_notation)[1])
