"""Values that may still contain unresolved ``$VAR`` references.

Every string-valued leaf of a compose file is held in a :class:`RawOr`. If
the text contains a real variable reference it stays ``Raw`` (verbatim,
unparsed) until :meth:`RawOr.interpolate_env` resolves it. Otherwise it is
parsed straight away into a typed ``Value``.
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Type, TypeVar, Union

from compose_yml.core.errors import (
    InterpolationDisabledError,
    InterpolationError,
    InvalidValueError,
    UnparsableValueError,
)
from compose_yml.interpolation.environment import Environment, OsEnvironment
from compose_yml.interpolation.grammar import (
    escape_str,
    interpolate_env as interpolate_text,
    unescape_str,
    validate,
)

T = TypeVar("T")


class InterpolatableValue:
    """A value type that can be stored in a :class:`RawOr`.

    Subclasses implement :meth:`parse` and ``__str__`` so that
    ``cls.parse(str(v)) == v``. Neither method deals with ``$`` escaping.
    """

    @classmethod
    def parse(cls, text: str):
        raise NotImplementedError(f"{cls.__name__} does not implement parse()")


def _parser_for(value_type: type) -> Callable[[str], Any]:
    if value_type is str:
        return str
    return value_type.parse


def _parse_value(value_type: type, text: str):
    try:
        return _parser_for(value_type)(text)
    except InvalidValueError as exc:
        raise UnparsableValueError(exc) from exc


@dataclass(frozen=True)
class _Raw:
    text: str


@dataclass(frozen=True)
class _Value:
    value: Any


class RawOr(Generic[T]):
    """Either raw text with variable references, or a parsed value."""

    def __init__(self, value_type: Type[T], inner: Union[_Raw, _Value]):
        self.value_type = value_type
        self._inner = inner

    @classmethod
    def from_str(cls, value_type: Type[T], text: str) -> "RawOr[T]":
        """Like :func:`raw`, but report failures as :class:`InvalidValueError`."""
        try:
            return raw(value_type, text)
        except UnparsableValueError as exc:
            raise exc.error from exc
        except InterpolationError as exc:
            raise InvalidValueError("interpolation", text) from exc

    @property
    def is_raw(self) -> bool:
        return isinstance(self._inner, _Raw)

    def value(self) -> T:
        """Return the parsed value.

        Raises:
            InterpolationDisabledError: The text still holds variable references
        """
        if isinstance(self._inner, _Value):
            return self._inner.value
        unescape_str(self._inner.text)
        raise InterpolationDisabledError(self._inner.text)

    def interpolate_env(self, env: Environment) -> T:
        """Resolve variables with ``env`` and become a ``Value``.

        On failure nothing changes. Already-parsed values are returned as is.
        """
        if isinstance(self._inner, _Raw):
            text = interpolate_text(self._inner.text, env)
            self._inner = _Value(_parse_value(self.value_type, text))
        return self._inner.value

    def interpolate(self) -> T:
        """Resolve variables from the process environment."""
        return self.interpolate_env(OsEnvironment())

    def __str__(self) -> str:
        if isinstance(self._inner, _Raw):
            return self._inner.text
        return escape_str(str(self._inner.value))

    def __repr__(self) -> str:
        if isinstance(self._inner, _Raw):
            return f"RawOr.Raw({self._inner.text!r})"
        return f"RawOr.Value({self._inner.value!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, RawOr):
            return NotImplemented
        return self._inner == other._inner

    __hash__ = None


def raw(value_type: Type[T], text: str) -> RawOr[T]:
    """Build a :class:`RawOr` from text that may contain ``$`` references.

    Raises:
        InvalidSyntaxError: ``text`` is not valid interpolation syntax
        UnparsableValueError: ``text`` has no references but does not parse
    """
    validate(text)
    try:
        literal = unescape_str(text)
    except InterpolationDisabledError:
        return RawOr(value_type, _Raw(text))
    return RawOr(value_type, _Value(_parse_value(value_type, literal)))


def escape(value_type: Type[T], text: str) -> RawOr[T]:
    """Build a :class:`RawOr` from a literal string, treating ``$`` as plain text."""
    return RawOr(value_type, _Value(_parse_value(value_type, text)))


def value(v: T, value_type: Optional[type] = None) -> RawOr[T]:
    """Wrap an already-typed value."""
    return RawOr(value_type or type(v), _Value(v))
