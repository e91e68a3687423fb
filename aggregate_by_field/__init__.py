"""Core logic for Aggregate By Field.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- resolve dot-path fields inside JSON records
- normalize resolved values into group keys
- group records into one output record per distinct key
"""
from .config import ConfigProvider, GroupingConfig, MappingConfigProvider, load_config
from .diagnostics import Diagnostics, LoggingDiagnostics
from .errors import ConfigurationError
from .grouping import GroupedItem, aggregate_by_field, run_aggregation

__all__ = [
    "ConfigProvider",
    "ConfigurationError",
    "Diagnostics",
    "GroupedItem",
    "GroupingConfig",
    "LoggingDiagnostics",
    "MappingConfigProvider",
    "aggregate_by_field",
    "load_config",
    "run_aggregation",
]
