from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, Dict, List, Tuple

import gradio as gr

from .config import GroupingConfig
from .diagnostics import LoggingDiagnostics
from .errors import ConfigurationError
from .grouping import GroupedItem, aggregate_by_field
from .io_utils import read_json_content, write_json_file
from .records import ROOT, count_resolved, resolve_items_by_root
from .schema_utils import extract_record_paths, find_list_paths

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 3


def prepare_dataset_payload(file_obj):
    if file_obj is None:
        return None, gr.update(choices=[ROOT], value=ROOT), gr.update(choices=[]), "No file uploaded."

    try:
        data = read_json_content(file_obj)
    except Exception as e:
        logger.warning("Failed to parse uploaded JSON: %s", e)
        return None, gr.update(choices=[ROOT], value=ROOT), gr.update(choices=[]), f"Error parsing JSON: {str(e)}"

    list_paths = find_list_paths(data) or [ROOT]
    default_root = ROOT if ROOT in list_paths else list_paths[0]
    records = resolve_items_by_root(data, default_root)
    field_paths = extract_record_paths(records)

    message = f"Successfully loaded {len(records)} records. Found {len(field_paths)} groupable fields."
    return (
        data,
        gr.update(choices=list_paths, value=default_root),
        gr.update(choices=field_paths, value=field_paths[0] if field_paths else None),
        message,
    )


def compute_record_count_text(data: Any, root_path: str = ROOT) -> str:
    if data is None:
        return ""
    records = resolve_items_by_root(data, root_path or ROOT)
    return f"Records: {len(records)}"


def handle_root_change(data: Any, root_path: str):
    records = resolve_items_by_root(data, root_path or ROOT)
    field_paths = extract_record_paths(records)
    return (
        gr.update(choices=field_paths, value=field_paths[0] if field_paths else None),
        compute_record_count_text(data, root_path),
    )


def build_parameters(
    field_to_group_by,
    output_field_name,
    include_group_key,
    disable_dot_notation,
    handle_missing_values,
    sort_groups,
    include_item_count,
    item_count_field_name,
) -> Dict[str, Any]:
    """Collect form values into the camelCase parameter layout."""
    return {
        "fieldToGroupBy": field_to_group_by or "",
        "outputFieldName": output_field_name or "items",
        "includeGroupKey": bool(include_group_key),
        "options": {
            "disableDotNotation": bool(disable_dot_notation),
            "handleMissingValues": handle_missing_values,
            "sortGroups": sort_groups,
            "includeItemCount": bool(include_item_count),
            "itemCountFieldName": item_count_field_name,
        },
    }


def group_dataset(data: Any, root_path: str, parameters: Dict[str, Any]) -> Tuple[List[GroupedItem], List[str]]:
    if data is None:
        raise ValueError("No data loaded.")

    config = GroupingConfig.from_parameters(parameters)
    records = resolve_items_by_root(data, root_path or ROOT)
    diagnostics = LoggingDiagnostics()
    grouped = aggregate_by_field(records, config, diagnostics)
    return grouped, diagnostics.messages


def describe_result(grouped: List[GroupedItem], hints: List[str]) -> str:
    if hints:
        return " ".join(hints)
    member_count = sum(len(item.paired_items) for item in grouped)
    return f"{len(grouped)} groups from {member_count} records."


def preview_groups_handler(data, root_path, *form_values):
    try:
        parameters = build_parameters(*form_values)
        grouped, hints = group_dataset(data, root_path, parameters)
    except (ConfigurationError, ValueError) as e:
        return None, str(e)

    preview = [item.json for item in grouped[:PREVIEW_LIMIT]]
    return (preview if preview else None), describe_result(grouped, hints)


def field_coverage_text(data, root_path, field_to_group_by, disable_dot_notation=False) -> str:
    if data is None or not field_to_group_by:
        return ""
    records = resolve_items_by_root(data, root_path or ROOT)
    found = count_resolved(records, field_to_group_by, bool(disable_dot_notation))
    return f"'{field_to_group_by}' present in {found} of {len(records)} records"


def export_groups_handler(data, root_path, file_name, *form_values):
    try:
        parameters = build_parameters(*form_values)
        grouped, hints = group_dataset(data, root_path, parameters)
    except (ConfigurationError, ValueError) as e:
        return None, str(e)

    if not file_name or not file_name.strip():
        file_name = "grouped"
    if not file_name.lower().endswith(".json"):
        file_name += ".json"

    path = os.path.join(tempfile.gettempdir(), file_name)
    try:
        write_json_file(path, [item.json for item in grouped])
    except OSError as e:
        return None, f"Error during export: {str(e)}"

    return path, f"Export successful! {describe_result(grouped, hints)} Saved to {path}"
