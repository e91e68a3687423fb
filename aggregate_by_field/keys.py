from __future__ import annotations

import json
import math
import unicodedata
from typing import Any, Tuple


def normalize_key(value: Any) -> str:
    """Convert a resolved field value into its group key string.

    Equal-looking scalars share a key regardless of type: 5, 5.0 and '5'
    all normalize to '5'. Mappings and lists are serialized by content.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(value, sort_keys=True, ensure_ascii=False, separators=(',', ':'))
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def collation_key(text: str) -> Tuple[str, str, str, str]:
    """Sort key approximating locale-aware string comparison.

    Compares base letters case- and accent-insensitively first, then
    accents, then case with lowercase ahead of uppercase. The raw text
    breaks any remaining tie so distinct keys never compare equal.
    """
    decomposed = unicodedata.normalize('NFD', text)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), text.swapcase(), text
