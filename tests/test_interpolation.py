"""Tests for the interpolation grammar and the RawOr wrapper."""
import pytest

from compose_yml.core.errors import (
    InterpolationDisabledError,
    InvalidSyntaxError,
    InvalidValueError,
    UndefinedVariableError,
    UnparsableValueError,
)
from compose_yml.interpolation import (
    MappingEnvironment,
    Mode,
    OsEnvironment,
    RawOr,
    escape,
    escape_str,
    interpolate_env,
    interpolate_helper,
    raw,
    unescape_str,
    validate,
    value,
)
from compose_yml.values import MemorySize

INVALID_SYNTAX = ["$", "${", "$}", "${}", "${ foo}", "${foo }", "${foo!}", "$1", "foo$", "${foo"]


class TestGrammar:
    """The three scanning modes share one grammar."""

    def test_interpolates_bare_and_braced_names(self, env):
        assert interpolate_env("$FOO", env) == "foo"
        assert interpolate_env("${FOO}bar", env) == "foobar"
        assert interpolate_env("$IMAGE:$TAG", env) == "nginx:1.25"
        assert interpolate_env("no variables", env) == "no variables"

    def test_bare_names_are_greedy(self):
        env = MappingEnvironment({"FOO_BAR": "x", "FOO": "y"})
        assert interpolate_env("$FOO_BAR", env) == "x"
        assert interpolate_env("$FOO-bar", env) == "y-bar"

    def test_double_dollar_is_an_escape(self, env):
        assert interpolate_env("a$$b", env) == "a$b"
        assert interpolate_env("$$FOO", env) == "$FOO"
        assert unescape_str("$${escaped}") == "${escaped}"

    @pytest.mark.parametrize("text", INVALID_SYNTAX)
    def test_malformed_sequences_fail_in_every_mode(self, text, env):
        with pytest.raises(InvalidSyntaxError):
            interpolate_env(text, env)
        with pytest.raises(InvalidSyntaxError):
            unescape_str(text)
        with pytest.raises(InvalidSyntaxError):
            validate(text)

    def test_undefined_variable_is_an_error(self, env):
        with pytest.raises(UndefinedVariableError) as exc_info:
            interpolate_env("$NOSUCH", env)
        assert exc_info.value.name == "NOSUCH"
        assert "NOSUCH" in str(exc_info.value)

    def test_syntax_errors_win_over_lookup_errors(self):
        empty = MappingEnvironment()
        with pytest.raises(InvalidSyntaxError):
            interpolate_env("$NOSUCH and then $", empty)
        with pytest.raises(InvalidSyntaxError):
            unescape_str("$FOO ${bad name}")

    def test_unescape_refuses_real_references(self):
        with pytest.raises(InterpolationDisabledError):
            unescape_str("hello $FOO")

    def test_validate_never_reads_the_environment(self, exploding_env):
        validate("$FOO ${BAR} $$")
        assert interpolate_helper("x$FOO-y", Mode.VALIDATE, exploding_env) == "x-y"

    def test_escape_doubles_every_dollar(self):
        assert escape_str("a$b$$") == "a$$b$$$$"
        assert unescape_str(escape_str("$FOO and $$")) == "$FOO and $$"


class TestRawOr:
    """Construction, interpolation and display of RawOr values."""

    def test_raw_reference_interpolates(self, env):
        field = raw(str, "$FOO")
        assert field.is_raw
        assert str(field) == "$FOO"

        assert field.interpolate_env(env) == "foo"
        assert not field.is_raw
        assert str(field) == "foo"
        assert field == value("foo")

    def test_interpolate_uses_process_environment(self, monkeypatch):
        monkeypatch.setenv("COMPOSE_YML_TEST_VAR", "from-os")
        field = raw(str, "${COMPOSE_YML_TEST_VAR}")
        assert field.interpolate() == "from-os"

    def test_escaped_text_becomes_a_value_immediately(self):
        field = raw(str, "$${escaped}")
        assert not field.is_raw
        assert field.value() == "${escaped}"
        assert str(field) == "$${escaped}"

    def test_value_of_raw_field_is_disabled(self):
        with pytest.raises(InterpolationDisabledError):
            raw(str, "$FOO").value()

    def test_undefined_variable_leaves_field_unchanged(self):
        field = raw(str, "$NOSUCH")
        with pytest.raises(UndefinedVariableError):
            field.interpolate_env(MappingEnvironment())
        assert field.is_raw
        assert str(field) == "$NOSUCH"

    def test_unparsable_interpolation_leaves_field_unchanged(self):
        field = raw(MemorySize, "$SIZE")
        with pytest.raises(UnparsableValueError):
            field.interpolate_env(MappingEnvironment({"SIZE": "huge"}))
        assert field.is_raw

    def test_typed_interpolation(self, env):
        field = raw(MemorySize, "$SIZE")
        assert field.interpolate_env(env) == MemorySize.mb(512)
        assert str(field) == "512m"

    def test_interpolation_is_idempotent(self, env):
        field = raw(str, "$FOO")
        first = field.interpolate_env(env)
        assert field.interpolate_env(MappingEnvironment()) == first

    def test_raw_parses_literal_text_eagerly(self):
        assert raw(MemorySize, "1g").value() == MemorySize.gb(1)
        with pytest.raises(UnparsableValueError) as exc_info:
            raw(MemorySize, "lots")
        assert exc_info.value.error.wanted == "memory size"

    def test_raw_rejects_bad_syntax(self):
        with pytest.raises(InvalidSyntaxError):
            raw(str, "cost: $")

    def test_escape_treats_dollars_literally(self):
        field = escape(str, "$FOO")
        assert field.value() == "$FOO"
        assert str(field) == "$$FOO"

    def test_raw_and_value_are_never_equal(self):
        assert raw(str, "plain") == value("plain")
        assert raw(str, "$FOO") != value("foo")
        assert raw(str, "$FOO") != escape(str, "$FOO")
        assert raw(str, "$FOO") == raw(str, "$FOO")

    def test_display_round_trips(self):
        for text in ["plain", "$$escaped", "$FOO", "${FOO}-$$-$BAR"]:
            assert str(raw(str, text)) == text

    def test_from_str_reports_invalid_values(self):
        with pytest.raises(InvalidValueError) as exc_info:
            RawOr.from_str(MemorySize, "lots")
        assert exc_info.value.wanted == "memory size"

        with pytest.raises(InvalidValueError) as exc_info:
            RawOr.from_str(str, "$")
        assert exc_info.value.wanted == "interpolation"

    def test_repr_shows_variant(self):
        assert repr(raw(str, "$FOO")) == "RawOr.Raw('$FOO')"
        assert repr(value("x")) == "RawOr.Value('x')"


def test_os_environment_reads_process_env(monkeypatch):
    monkeypatch.setenv("COMPOSE_YML_TEST_VAR", "1")
    monkeypatch.delenv("COMPOSE_YML_MISSING", raising=False)
    env = OsEnvironment()
    assert env.var("COMPOSE_YML_TEST_VAR") == "1"
    assert env.var("COMPOSE_YML_MISSING") is None
