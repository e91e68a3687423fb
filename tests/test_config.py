import pytest

from aggregate_by_field import ConfigurationError, GroupingConfig, MappingConfigProvider, load_config


def test_defaults_applied_for_missing_parameters():
    config = load_config(MappingConfigProvider({"fieldToGroupBy": "category"}))

    assert config == GroupingConfig("category")
    assert config.output_field_name == "items"
    assert config.include_group_key is True
    assert config.handle_missing_values == "skip"
    assert config.sort_groups == "none"
    assert config.item_count_field_name == "itemCount"


def test_empty_option_values_fall_back_to_defaults():
    config = GroupingConfig.from_parameters({
        "fieldToGroupBy": "category",
        "options": {"handleMissingValues": "", "sortGroups": None, "itemCountFieldName": ""},
    })

    assert config.handle_missing_values == "skip"
    assert config.sort_groups == "none"
    assert config.item_count_field_name == "itemCount"


def test_options_are_read_from_collection():
    config = GroupingConfig.from_parameters({
        "fieldToGroupBy": "user.country",
        "outputFieldName": "rows",
        "includeGroupKey": False,
        "options": {
            "disableDotNotation": True,
            "handleMissingValues": "groupEmpty",
            "sortGroups": "asc",
            "includeItemCount": True,
            "itemCountFieldName": "n",
        },
    })

    assert config == GroupingConfig(
        field_to_group_by="user.country",
        output_field_name="rows",
        include_group_key=False,
        disable_dot_notation=True,
        handle_missing_values="groupEmpty",
        sort_groups="asc",
        include_item_count=True,
        item_count_field_name="n",
    )


def test_grouping_field_is_trimmed():
    config = GroupingConfig.from_parameters({"fieldToGroupBy": "  category\t"})

    assert config.field_to_group_by == "category"


@pytest.mark.parametrize("parameters", [{}, {"fieldToGroupBy": ""}, {"fieldToGroupBy": "  "}])
def test_blank_grouping_field_is_rejected(parameters):
    with pytest.raises(ConfigurationError, match="required"):
        GroupingConfig.from_parameters(parameters)


def test_unknown_policy_is_rejected():
    with pytest.raises(ConfigurationError, match="missing value policy"):
        GroupingConfig.from_parameters({"fieldToGroupBy": "a", "options": {"handleMissingValues": "drop"}})


def test_unknown_sort_mode_is_rejected():
    with pytest.raises(ConfigurationError, match="sort mode"):
        GroupingConfig("a", sort_groups="random").validate()


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_direct_config_strips_grouping_field():
    assert GroupingConfig(" user.country ").field_to_group_by == "user.country"
