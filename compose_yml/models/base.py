"""Common behaviour for every struct in a compose file."""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from compose_yml.config.helpers import node_kind
from compose_yml.config.interpolate import interpolate_all, interpolate_value
from compose_yml.config.merge import merge_override, merge_values
from compose_yml.core.errors import ComposeError, ParseError
from compose_yml.interpolation.environment import Environment


@dataclass
class ComposeModel:
    """Base class for compose structs declared with ``compose_field``.

    Subclasses are plain dataclasses. Decoding rejects unknown keys,
    encoding drops empty values, and ``merge_override`` works field by field.
    """

    @classmethod
    def _codec_fields(cls):
        for f in fields(cls):
            codec = f.metadata.get("codec")
            if codec is not None:
                yield f, codec, f.metadata.get("key") or f.name

    @classmethod
    def from_node(cls, node: Any):
        if not isinstance(node, dict):
            raise ParseError(f"expected a mapping, got {node_kind(node)}")

        known = {key for _, _, key in cls._codec_fields()}
        for key in node:
            if key not in known:
                raise ParseError(f"unknown field `{key}` in {cls.__name__}")

        kwargs = {}
        for f, codec, key in cls._codec_fields():
            if node.get(key) is None:
                continue
            try:
                kwargs[f.name] = codec.decode(node[key])
            except ComposeError as exc:
                exc.prepend_location(key)
                raise
        return cls(**kwargs)

    def to_node(self) -> Dict[str, Any]:
        node = {}
        for f, codec, key in self._codec_fields():
            value = getattr(self, f.name)
            if not codec.is_empty(value):
                node[key] = codec.encode(value)
        return node

    def merge_override(self, ovr):
        """Return a new struct with ``ovr`` merged on top of this one."""
        merged = {
            f.name: merge_override(getattr(self, f.name), getattr(ovr, f.name))
            for f in fields(self)
        }
        return type(self)(**merged)

    def interpolate_all(self, env: Optional[Environment] = None) -> None:
        """Resolve every ``$VAR`` reference below this struct, in place."""
        interpolate_all(self, env)


@merge_values.register(ComposeModel)
def _merge_models(base: ComposeModel, ovr: ComposeModel) -> ComposeModel:
    return base.merge_override(ovr)


@interpolate_value.register(ComposeModel)
def _interpolate_model(obj: ComposeModel, env: Environment) -> None:
    for f in fields(obj):
        interpolate_value(getattr(obj, f.name), env)
