import pytest

from aggregate_by_field.accessors import MISSING, get_value_by_path, resolve_field
from aggregate_by_field.keys import collation_key, normalize_key
from aggregate_by_field.paths import last_segment, split_path


def test_split_path_on_dots():
    assert split_path("user.address.city") == ["user", "address", "city"]
    assert split_path("a..b") == ["a", "", "b"]


def test_split_path_without_dot_notation():
    assert split_path("gpt-3.5-turbo", disable_dot_notation=True) == ["gpt-3.5-turbo"]


def test_last_segment():
    assert last_segment("user.address.city") == "city"
    assert last_segment("category") == "category"
    assert last_segment("a.b", disable_dot_notation=True) == "a.b"


def test_resolve_field_distinguishes_found_values():
    record = {"a": {"b": 0, "c": None, "d": False}}

    assert resolve_field(record, "a.b") == (0, True)
    assert resolve_field(record, "a.d") == (False, True)
    assert resolve_field(record, "a.c") == (None, False)
    assert resolve_field(record, "a.x") == (None, False)
    assert resolve_field(record, "a.b.c") == (None, False)


def test_get_value_by_path_reports_missing():
    assert get_value_by_path({"a": "text"}, "a.length") is MISSING
    assert get_value_by_path(None, "a") is MISSING
    assert get_value_by_path({"a": None}, "a") is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Fruit", "Fruit"),
        ("", ""),
        (5, "5"),
        (5.0, "5"),
        (-2.5, "-2.5"),
        (True, "true"),
        (False, "false"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
        ({"b": 1, "a": "x"}, '{"a":"x","b":1}'),
        ([1, "two", None], '[1,"two",null]'),
    ],
)
def test_normalize_key(value, expected):
    assert normalize_key(value) == expected


def test_collation_orders_case_insensitively_lowercase_first():
    words = ["banana", "Apple", "apple", "Éclair", "eclair", "cherry"]

    assert sorted(words, key=collation_key) == ["apple", "Apple", "banana", "cherry", "eclair", "Éclair"]


def test_collation_key_distinguishes_casefold_equivalents():
    assert collation_key("ß") != collation_key("ss")
    assert sorted(["ß", "ss"], key=collation_key) == ["ss", "ß"]
