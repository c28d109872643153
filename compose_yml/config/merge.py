"""Override merging, as done by ``docker-compose -f base.yml -f override.yml``.

``merge_override(base, ovr)`` never mutates its arguments:

* a missing (None) side yields a copy of the other side
* lists are concatenated, base entries first
* dicts are merged key by key, recursing into keys present on both sides
* everything else, including :class:`RawOr` leaves, is replaced by ``ovr``

Types with special rules register themselves on :func:`merge_values` or, for
config models, override ``ComposeModel.merge_override``.
"""
import copy
from functools import singledispatch
from typing import Any, TypeVar

T = TypeVar("T")


def merge_override(base: T, ovr: T) -> T:
    """Merge ``ovr`` on top of ``base`` and return a new value."""
    if ovr is None:
        return copy.deepcopy(base)
    if base is None:
        return copy.deepcopy(ovr)
    return merge_values(base, ovr)


@singledispatch
def merge_values(base: Any, ovr: Any) -> Any:
    """Merge two present values; scalars take the override."""
    return copy.deepcopy(ovr)


@merge_values.register(list)
def _merge_lists(base: list, ovr: list) -> list:
    return copy.deepcopy(base) + copy.deepcopy(ovr)


@merge_values.register(dict)
def _merge_dicts(base: dict, ovr: dict) -> dict:
    result = copy.deepcopy(base)
    for key, value in ovr.items():
        if key in result:
            result[key] = merge_override(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result
