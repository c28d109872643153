"""Per-service resource limits (``ulimits``)."""
from dataclasses import dataclass
from typing import Any, Optional

from compose_yml.config.helpers import node_kind
from compose_yml.core.errors import ParseError


@dataclass
class Ulimit:
    """A single limit (``nofile: 1024``) or a soft/hard pair.

    Replaced wholesale when merging.
    """

    soft: int
    hard: Optional[int] = None

    @classmethod
    def from_node(cls, node: Any) -> "Ulimit":
        if isinstance(node, int) and not isinstance(node, bool):
            return cls(node)
        if isinstance(node, dict):
            unknown = set(node) - {"soft", "hard"}
            if unknown:
                raise ParseError(f"unknown field `{sorted(unknown)[0]}` in Ulimit")
            soft, hard = node.get("soft"), node.get("hard")
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in (soft, hard)):
                raise ParseError("expected integer `soft` and `hard` limits")
            return cls(soft, hard)
        raise ParseError(f"expected an integer or a mapping, got {node_kind(node)}")

    def to_node(self) -> Any:
        if self.hard is None:
            return self.soft
        return {"soft": self.soft, "hard": self.hard}
