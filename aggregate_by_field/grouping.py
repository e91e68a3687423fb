from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .accessors import resolve_field
from .config import MISSING_VALUE_KEYS, ConfigProvider, GroupingConfig, load_config
from .diagnostics import Diagnostics
from .keys import collation_key, normalize_key
from .paths import last_segment

logger = logging.getLogger(__name__)


@dataclass
class GroupedItem:
    """One output record plus the input positions it was built from."""

    json: Dict[str, Any]
    paired_items: List[int] = field(default_factory=list)


def order_group_keys(keys: List[str], sort_groups: str) -> List[str]:
    if sort_groups == 'asc':
        return sorted(keys, key=collation_key)
    if sort_groups == 'desc':
        return sorted(keys, key=collation_key, reverse=True)
    return list(keys)


def aggregate_by_field(
    records: Sequence[Any],
    config: GroupingConfig,
    diagnostics: Optional[Diagnostics] = None,
) -> List[GroupedItem]:
    """Group records by the value found at `config.field_to_group_by`.

    Records are never copied or modified; each output record references the
    original member objects in input order.

    Raises:
        ConfigurationError: If the configuration is invalid. Checked before
            any record is read.
    """
    config.validate()
    if not records:
        return []

    path = config.field_to_group_by
    groups: Dict[str, List[int]] = {}
    resolved_any = False

    for index, record in enumerate(records):
        value, found = resolve_field(record, path, config.disable_dot_notation)
        if found:
            resolved_any = True
            key = normalize_key(value)
        elif config.handle_missing_values == 'skip':
            continue
        else:
            key = MISSING_VALUE_KEYS[config.handle_missing_values]
        groups.setdefault(key, []).append(index)

    if not resolved_any and config.handle_missing_values == 'skip':
        if diagnostics is not None:
            diagnostics.hint(f"Field '{path}' was not found in any input record")
        return []

    if not groups:
        return []

    key_field = last_segment(path, config.disable_dot_notation)
    output: List[GroupedItem] = []
    for key in order_group_keys(list(groups), config.sort_groups):
        indices = groups[key]
        members = [records[i] for i in indices]
        out_json: Dict[str, Any] = {}
        if config.include_group_key:
            out_json[key_field] = key
        out_json[config.output_field_name] = members
        if config.include_item_count:
            out_json[config.item_count_field_name] = len(members)
        output.append(GroupedItem(json=out_json, paired_items=list(indices)))

    logger.debug("Grouped %d records by '%s' into %d groups", len(records), path, len(output))
    return output


def run_aggregation(
    records: Sequence[Any],
    provider: ConfigProvider,
    diagnostics: Optional[Diagnostics] = None,
) -> List[GroupedItem]:
    """Load parameters from `provider` and group `records`."""
    return aggregate_by_field(records, load_config(provider), diagnostics)
