"""Build configuration for a service."""
from dataclasses import dataclass
from typing import Dict, Optional

from compose_yml.interpolation.raw_or import RawOr, raw, value
from compose_yml.models.base import ComposeModel
from compose_yml.models.fields import OptionalKeyValueMapCodec, RawOrCodec, compose_field, map_field
from compose_yml.values.context import Context


@dataclass
class Build(ComposeModel):
    """``build: ./dir`` or ``build: {context: ..., dockerfile: ..., args: ...}``."""

    context: Optional[RawOr[Context]] = compose_field(RawOrCodec(Context))
    dockerfile: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    args: Dict[str, Optional[RawOr[str]]] = map_field(OptionalKeyValueMapCodec(str))

    @classmethod
    def new(cls, context) -> "Build":
        """Build from ``context``, a :class:`Context` or a context string."""
        if isinstance(context, str):
            return cls(context=raw(Context, context))
        return cls(context=value(context))

    @classmethod
    def from_string(cls, text: str) -> "Build":
        return cls(context=raw(Context, text))

    def can_serialize_as_string(self) -> bool:
        return self.context is not None and self.dockerfile is None and not self.args

    def to_string(self) -> str:
        return str(self.context)
