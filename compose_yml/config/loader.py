"""YAML parsing and emitting for compose files."""
from typing import Any, Optional, TextIO, Union

import yaml

from compose_yml.core.errors import ParseError


def load_yaml(source: Union[str, TextIO]) -> Any:
    """Parse YAML text or a text stream into plain Python nodes."""
    try:
        return yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid YAML: {exc}") from exc


def dump_yaml(node: Any, stream: Optional[TextIO] = None) -> Optional[str]:
    """Emit nodes as block-style YAML, keeping key order.

    Returns the text when ``stream`` is None.
    """
    return yaml.safe_dump(
        node,
        stream,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
