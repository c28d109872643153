"""The ``$VAR`` / ``${VAR}`` / ``$$`` interpolation grammar.

A single scanner serves three modes:

* ``INTERPOLATE`` substitutes variables from an :class:`Environment`.
* ``UNESCAPE`` only turns ``$$`` into ``$`` and refuses real references.
* ``VALIDATE`` checks syntax and never consults the environment.

Syntax errors win over every other error in the same string, so the three
modes always agree on which strings are well formed.
"""
import re
from enum import Enum
from typing import Optional

from compose_yml.core.errors import (
    InterpolationDisabledError,
    InterpolationError,
    InvalidSyntaxError,
    UndefinedVariableError,
)
from compose_yml.interpolation.environment import Environment

_INTERPOLATION_RE = re.compile(
    r"""
    \$(?:
        (?P<name>[A-Za-z_][A-Za-z0-9_]*)          # $NAME
      | \{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)\}    # ${NAME}
      | (?P<escaped>\$)                           # $$
      | (?P<invalid>.|\Z)                         # anything else
    )
    """,
    re.VERBOSE | re.DOTALL,
)


class Mode(Enum):
    INTERPOLATE = "interpolate"
    UNESCAPE = "unescape"
    VALIDATE = "validate"


def interpolate_helper(text: str, mode: Mode, env: Optional[Environment] = None) -> str:
    """Scan ``text`` and expand it according to ``mode``.

    Raises:
        InvalidSyntaxError: A ``$`` is not followed by a name, ``{name}`` or ``$``
        UndefinedVariableError: INTERPOLATE mode and a variable is missing
        InterpolationDisabledError: UNESCAPE mode and a real reference is present
    """
    if mode is Mode.INTERPOLATE and env is None:
        raise ValueError("interpolation requires an environment")

    pieces = []
    pending: Optional[InterpolationError] = None
    position = 0
    for match in _INTERPOLATION_RE.finditer(text):
        pieces.append(text[position:match.start()])
        position = match.end()

        if match.group("invalid") is not None:
            raise InvalidSyntaxError(text)
        if match.group("escaped") is not None:
            pieces.append("$")
            continue

        name = match.group("name") or match.group("braced")
        if mode is Mode.VALIDATE:
            continue
        if mode is Mode.UNESCAPE:
            if pending is None:
                pending = InterpolationDisabledError(text)
            continue

        found = env.var(name)
        if found is None:
            if pending is None:
                pending = UndefinedVariableError(name)
            continue
        pieces.append(found)

    if pending is not None:
        raise pending

    pieces.append(text[position:])
    return "".join(pieces)


def interpolate_env(text: str, env: Environment) -> str:
    """Substitute every variable in ``text`` using ``env``."""
    return interpolate_helper(text, Mode.INTERPOLATE, env)


def unescape_str(text: str) -> str:
    """Turn ``$$`` into ``$``; fail if ``text`` references any variable."""
    return interpolate_helper(text, Mode.UNESCAPE)


def validate(text: str) -> None:
    """Check that ``text`` is syntactically valid."""
    interpolate_helper(text, Mode.VALIDATE)


def escape_str(text: str) -> str:
    """Escape ``text`` so that it reads back as the literal string."""
    return text.replace("$", "$$")
