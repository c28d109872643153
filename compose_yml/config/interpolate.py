"""Resolve every ``$VAR`` reference in a configuration tree."""
from functools import singledispatch
from typing import Any, Optional

from compose_yml.interpolation.environment import Environment, OsEnvironment
from compose_yml.interpolation.raw_or import RawOr


def interpolate_all(obj: Any, env: Optional[Environment] = None) -> None:
    """Interpolate ``obj`` in place.

    Stops at the first error. Values resolved before the failure stay
    resolved.
    """
    interpolate_value(obj, env if env is not None else OsEnvironment())


@singledispatch
def interpolate_value(obj: Any, env: Environment) -> None:
    """Scalars and other leaves have nothing to interpolate."""


@interpolate_value.register(RawOr)
def _interpolate_raw_or(obj: RawOr, env: Environment) -> None:
    obj.interpolate_env(env)


@interpolate_value.register(list)
def _interpolate_list(obj: list, env: Environment) -> None:
    for item in obj:
        interpolate_value(item, env)


@interpolate_value.register(dict)
def _interpolate_dict(obj: dict, env: Environment) -> None:
    for item in obj.values():
        interpolate_value(item, env)
