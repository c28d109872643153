"""Tests for the multi-shape field decoders."""
import pytest

from compose_yml.config import helpers
from compose_yml.core.errors import ParseError
from compose_yml.models import Build, ExternalNetwork, Volume
from compose_yml.values import Context


class TestMapOrKeyValueList:
    def test_map_form_coerces_scalars(self):
        node = {"A": "b", "N": 1, "B": True, "F": 1.5}
        assert helpers.map_or_key_value_list(node) == {
            "A": "b", "N": "1", "B": "true", "F": "1.5",
        }

    def test_list_form_splits_on_first_equals(self):
        node = ["A=b", "C=d=e", "EMPTY="]
        assert helpers.map_or_key_value_list(node) == {"A": "b", "C": "d=e", "EMPTY": ""}

    def test_list_entry_needs_equals(self):
        with pytest.raises(ParseError, match="expected KEY=value"):
            helpers.map_or_key_value_list(["A"])

    def test_list_entry_needs_a_key(self):
        with pytest.raises(ParseError, match="expected KEY=value"):
            helpers.map_or_key_value_list(["=foo"])

    def test_duplicate_keys_fail(self):
        with pytest.raises(ParseError, match="duplicate key"):
            helpers.map_or_key_value_list(["A=1", "A=2"])

    def test_other_shapes_fail(self):
        with pytest.raises(ParseError, match="expected a mapping or a list"):
            helpers.map_or_key_value_list("A=1")

    def test_errors_carry_the_key(self):
        with pytest.raises(ParseError) as exc_info:
            helpers.map_or_key_value_list({"A": [1]})
        assert exc_info.value.location == ["A"]
        assert str(exc_info.value) == "A: expected a string, got a list"

    def test_decode_value_is_applied(self):
        assert helpers.map_or_key_value_list({"N": 2}, int) == {"N": 2}


class TestMapOrKeyOptionalValueList:
    def test_bare_keys_have_no_value(self):
        assert helpers.map_or_key_optional_value_list(["value=1", "-value"]) == {
            "value": "1",
            "-value": None,
        }

    def test_null_map_values(self):
        assert helpers.map_or_key_optional_value_list({"x": None, "y": 2}) == {
            "x": None,
            "y": "2",
        }

    @pytest.mark.parametrize("entry", ["=foo", "", "="])
    def test_list_entry_needs_a_key(self, entry):
        with pytest.raises(ParseError, match="expected KEY or KEY=value"):
            helpers.map_or_key_optional_value_list([entry])


class TestMapOrDefaultList:
    def test_list_form_uses_defaults(self):
        assert helpers.map_or_default_list(["a", "b"], dict, dict) == {"a": {}, "b": {}}

    def test_map_form_decodes_values(self):
        result = helpers.map_or_default_list({"a": None, "b": {"x": 1}}, dict, dict)
        assert result == {"a": {}, "b": {"x": 1}}

    def test_other_shapes_fail(self):
        with pytest.raises(ParseError, match="expected a mapping or a list of names"):
            helpers.map_or_default_list("a", dict, dict)

    def test_map_keys_that_collide_as_strings_fail(self):
        with pytest.raises(ParseError, match="duplicate key `1`"):
            helpers.map_or_default_list({1: None, "1": {"x": 1}}, dict, dict)


class TestItemOrList:
    def test_single_item(self):
        assert helpers.item_or_list("8.8.8.8", str) == ["8.8.8.8"]

    def test_list(self):
        assert helpers.item_or_list(["a", "b"], str) == ["a", "b"]

    def test_mapping_fails(self):
        with pytest.raises(ParseError, match="expected a single item or a list"):
            helpers.item_or_list({"a": 1}, str)


class TestStructShapes:
    def test_string_or_struct_forms_are_identical(self):
        short = helpers.string_or_struct("./app", Build)
        full = helpers.string_or_struct({"context": "./app"}, Build)
        assert short == full
        assert short.context.value() == Context.dir("./app")

    def test_string_or_struct_serialization(self):
        assert helpers.serialize_string_or_struct(Build.from_string("./app")) == "./app"
        build = Build.from_node({"context": "./app", "dockerfile": "Dockerfile.dev"})
        assert helpers.serialize_string_or_struct(build) == {
            "context": "./app",
            "dockerfile": "Dockerfile.dev",
        }

    def test_string_or_struct_rejects_lists(self):
        with pytest.raises(ParseError, match="expected a string or a mapping"):
            helpers.string_or_struct(["./app"], Build)

    def test_true_or_struct(self):
        assert helpers.true_or_struct(True, ExternalNetwork) == ExternalNetwork()
        assert helpers.true_or_struct(False, ExternalNetwork) is None
        named = helpers.true_or_struct({"name": "real"}, ExternalNetwork)
        assert named.name.value() == "real"
        assert helpers.serialize_true_or_struct(ExternalNetwork()) is True
        assert helpers.serialize_true_or_struct(named) == {"name": "real"}
        with pytest.raises(ParseError, match="expected true or a mapping"):
            helpers.true_or_struct("yes", ExternalNetwork)

    def test_map_struct_or_null(self):
        volumes = helpers.map_struct_or_null({"data": None, "logs": {"driver": "local"}}, Volume)
        assert volumes["data"] == Volume()
        assert volumes["logs"].driver.value() == "local"
        assert helpers.serialize_map_struct_or_null(volumes) == {
            "data": None,
            "logs": {"driver": "local"},
        }
        with pytest.raises(ParseError, match="expected a mapping"):
            helpers.map_struct_or_null(["data"], Volume)


@pytest.mark.parametrize("node,text", [
    ("x", "x"),
    (True, "true"),
    (False, "false"),
    (3, "3"),
    (2.5, "2.5"),
])
def test_scalar_to_str(node, text):
    assert helpers.scalar_to_str(node) == text
