"""Shell-style ``$VAR`` interpolation and the RawOr dual representation."""
from compose_yml.interpolation.environment import (
    Environment,
    MappingEnvironment,
    OsEnvironment,
)
from compose_yml.interpolation.grammar import (
    Mode,
    escape_str,
    interpolate_env,
    interpolate_helper,
    unescape_str,
    validate,
)
from compose_yml.interpolation.raw_or import (
    InterpolatableValue,
    RawOr,
    escape,
    raw,
    value,
)

__all__ = [
    "Environment",
    "MappingEnvironment",
    "OsEnvironment",
    "Mode",
    "escape_str",
    "interpolate_env",
    "interpolate_helper",
    "unescape_str",
    "validate",
    "InterpolatableValue",
    "RawOr",
    "escape",
    "raw",
    "value",
]
