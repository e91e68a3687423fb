from __future__ import annotations

import json
from typing import Any


def parse_json_text(content) -> Any:
    if isinstance(content, bytes):
        content = content.decode('utf-8')
    if content is None or not content.strip():
        raise ValueError("No JSON content provided.")
    return json.loads(content)


def read_json_content(file_obj) -> Any:
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        return parse_json_text(file_obj.read())

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json_file(path: str, payload: Any) -> str:
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return path
