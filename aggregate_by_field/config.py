from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigurationError

MISSING_VALUE_POLICIES = ('skip', 'groupUndefined', 'groupNull', 'groupEmpty')
SORT_MODES = ('none', 'asc', 'desc')

# Key substituted for unresolved values, per policy. `skip` has no entry.
MISSING_VALUE_KEYS = {
    'groupUndefined': 'undefined',
    'groupNull': 'null',
    'groupEmpty': '',
}


@dataclass(frozen=True)
class GroupingConfig:
    """Parameters for one grouping run.

    Defaults match the parameter form: members under 'items', the group key
    included, missing values skipped, groups in first-seen order.
    """

    field_to_group_by: str
    output_field_name: str = 'items'
    include_group_key: bool = True
    disable_dot_notation: bool = False
    handle_missing_values: str = 'skip'
    sort_groups: str = 'none'
    include_item_count: bool = False
    item_count_field_name: str = 'itemCount'

    def __post_init__(self):
        if isinstance(self.field_to_group_by, str):
            object.__setattr__(self, 'field_to_group_by', self.field_to_group_by.strip())

    def validate(self) -> None:
        if not isinstance(self.field_to_group_by, str) or not self.field_to_group_by.strip():
            raise ConfigurationError('The "Field To Group By" parameter is required')
        if self.handle_missing_values not in MISSING_VALUE_POLICIES:
            raise ConfigurationError(
                f"Unknown missing value policy '{self.handle_missing_values}'. "
                f"Use one of: {', '.join(MISSING_VALUE_POLICIES)}"
            )
        if self.sort_groups not in SORT_MODES:
            raise ConfigurationError(
                f"Unknown sort mode '{self.sort_groups}'. Use one of: {', '.join(SORT_MODES)}"
            )

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, Any]) -> GroupingConfig:
        return load_config(MappingConfigProvider(parameters))


class ConfigProvider(ABC):
    """Source of typed grouping parameters (form values, JSON, env...)."""

    @abstractmethod
    def get_parameter(self, name: str, default: Any = None) -> Any:
        raise NotImplementedError


class MappingConfigProvider(ConfigProvider):
    """Reads camelCase parameters from a plain dict.

    Optional settings sit under an 'options' collection, e.g.
    {'fieldToGroupBy': 'category', 'options': {'sortGroups': 'asc'}}.
    """

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None):
        self._parameters: Dict[str, Any] = dict(parameters or {})

    def get_parameter(self, name: str, default: Any = None) -> Any:
        value = self._parameters.get(name)
        return default if value is None else value


def load_config(provider: ConfigProvider) -> GroupingConfig:
    """Build and validate a GroupingConfig from a provider.

    Empty option values fall back to their defaults.

    Raises:
        ConfigurationError: If the grouping field is blank or an option value
            is not recognised.
    """
    field = provider.get_parameter('fieldToGroupBy', '')
    options = provider.get_parameter('options', {}) or {}

    config = GroupingConfig(
        field_to_group_by=field.strip() if isinstance(field, str) else field,
        output_field_name=provider.get_parameter('outputFieldName', 'items'),
        include_group_key=bool(provider.get_parameter('includeGroupKey', True)),
        disable_dot_notation=bool(options.get('disableDotNotation') or False),
        handle_missing_values=options.get('handleMissingValues') or 'skip',
        sort_groups=options.get('sortGroups') or 'none',
        include_item_count=bool(options.get('includeItemCount') or False),
        item_count_field_name=options.get('itemCountFieldName') or 'itemCount',
    )
    config.validate()
    return config
