from __future__ import annotations

from typing import List


def split_path(path: str, disable_dot_notation: bool = False) -> List[str]:
    """Split a field path into lookup segments.

    With dot notation disabled the whole path is a single literal key, so
    fields such as 'gpt-3.5-turbo' can be addressed directly.
    Empty segments are kept: 'a..b' looks up the key '' between 'a' and 'b'.
    """
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)
    if disable_dot_notation:
        return [path]
    return path.split('.')


def last_segment(path: str, disable_dot_notation: bool = False) -> str:
    """Name used for the group key field in output records."""
    parts = split_path(path, disable_dot_notation)
    return parts[-1] if parts else (path or '')
