from __future__ import annotations

from typing import Any, Iterable, List, Set


def extract_field_paths(data: Any, parent_key: str = '', sep: str = '.') -> Set[str]:
    """Recursively collect dot paths that can be grouped on.

    Mappings are descended into; every other value (lists included) ends a
    path, since lists are not traversed during field resolution.
    """
    keys: Set[str] = set()

    if isinstance(data, dict):
        for k, v in data.items():
            current_key = f"{parent_key}{sep}{k}" if parent_key else str(k)
            if isinstance(v, dict) and v:
                keys.update(extract_field_paths(v, current_key, sep))
            else:
                keys.add(current_key)
    elif parent_key:
        keys.add(parent_key)

    return keys


def extract_record_paths(records: Iterable[Any], sample_size: int = 50) -> List[str]:
    """Field paths found across the first `sample_size` records."""
    keys: Set[str] = set()
    remaining = max(0, int(sample_size))
    for record in records:
        if remaining <= 0:
            break
        if isinstance(record, dict):
            keys.update(extract_field_paths(record))
        remaining -= 1
    return sorted(keys)


def find_list_paths(data: Any, parent_key: str = '', sep: str = '.') -> List[str]:
    """Find all paths in the JSON that point to a list of records."""
    paths: List[str] = []
    if isinstance(data, dict):
        for k, v in data.items():
            current_key = f"{parent_key}{sep}{k}" if parent_key else str(k)
            if isinstance(v, list):
                if any(isinstance(item, dict) for item in v):
                    paths.append(current_key)
            elif isinstance(v, dict):
                paths.extend(find_list_paths(v, current_key, sep))
    elif isinstance(data, list) and not parent_key:
        paths.append("(root)")
    return sorted(paths)
