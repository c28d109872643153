"""Decoders for fields that docker-compose accepts in more than one shape.

All helpers take a node as produced by ``yaml.safe_load`` (dict, list,
scalar or None) and raise :class:`ParseError` when the node has a shape
they do not understand.
"""
from typing import Any, Callable, Dict, List, Optional

from compose_yml.core.errors import ComposeError, ParseError


def node_kind(node: Any) -> str:
    """Describe a node for error messages."""
    if node is None:
        return "null"
    if isinstance(node, bool):
        return "a boolean"
    if isinstance(node, int):
        return "an integer"
    if isinstance(node, float):
        return "a float"
    if isinstance(node, str):
        return "a string"
    if isinstance(node, dict):
        return "a mapping"
    if isinstance(node, list):
        return "a list"
    return type(node).__name__


def is_scalar(node: Any) -> bool:
    return isinstance(node, (str, int, float, bool))


def scalar_to_str(node: Any, expected: str = "a string") -> str:
    """Coerce a YAML scalar to the string docker-compose would see.

    Booleans become ``true``/``false`` and numbers keep their YAML spelling.
    """
    if isinstance(node, str):
        return node
    if isinstance(node, bool):
        return "true" if node else "false"
    if isinstance(node, (int, float)):
        return str(node)
    raise ParseError(f"expected {expected}, got {node_kind(node)}")


def _decode_entry(key: str, decode: Callable[[Any], Any], node: Any):
    try:
        return decode(node)
    except ComposeError as exc:
        exc.prepend_location(key)
        raise


def map_or_key_value_list(node: Any, decode_value: Callable[[str], Any] = str) -> Dict[str, Any]:
    """Decode ``{KEY: value}`` or ``["KEY=value", ...]``.

    Scalar map values are coerced to strings before ``decode_value`` sees
    them. Duplicate keys are rejected in both forms.
    """
    result: Dict[str, Any] = {}
    if isinstance(node, dict):
        for raw_key, raw_value in node.items():
            key = scalar_to_str(raw_key, "a string key")
            if key in result:
                raise ParseError(f"duplicate key `{key}`")
            text = _decode_entry(key, scalar_to_str, raw_value)
            result[key] = _decode_entry(key, decode_value, text)
        return result
    if isinstance(node, list):
        for entry in node:
            text = scalar_to_str(entry, "a KEY=value string")
            key, sep, text_value = text.partition("=")
            if not sep or not key:
                raise ParseError(f"expected KEY=value, got <{text}>")
            if key in result:
                raise ParseError(f"duplicate key `{key}`")
            result[key] = _decode_entry(key, decode_value, text_value)
        return result
    raise ParseError(f"expected a mapping or a list of KEY=value strings, got {node_kind(node)}")


def map_or_key_optional_value_list(
    node: Any, decode_value: Callable[[str], Any] = str
) -> Dict[str, Optional[Any]]:
    """Like :func:`map_or_key_value_list`, but values may be missing.

    A bare ``KEY`` list entry, or a null map value, maps to None.
    """
    result: Dict[str, Optional[Any]] = {}
    if isinstance(node, dict):
        for raw_key, raw_value in node.items():
            key = scalar_to_str(raw_key, "a string key")
            if key in result:
                raise ParseError(f"duplicate key `{key}`")
            if raw_value is None:
                result[key] = None
                continue
            text = _decode_entry(key, scalar_to_str, raw_value)
            result[key] = _decode_entry(key, decode_value, text)
        return result
    if isinstance(node, list):
        for entry in node:
            text = scalar_to_str(entry, "a KEY or KEY=value string")
            key, sep, text_value = text.partition("=")
            if not key:
                raise ParseError(f"expected KEY or KEY=value, got <{text}>")
            if key in result:
                raise ParseError(f"duplicate key `{key}`")
            result[key] = _decode_entry(key, decode_value, text_value) if sep else None
        return result
    raise ParseError(f"expected a mapping or a list of KEY=value strings, got {node_kind(node)}")


def map_or_default_list(
    node: Any,
    decode_value: Callable[[Any], Any],
    default_factory: Callable[[], Any],
) -> Dict[str, Any]:
    """Decode ``{name: value-or-null}`` or ``[name, ...]``.

    Names given in list form, or with a null value, get ``default_factory()``.
    """
    result: Dict[str, Any] = {}
    if isinstance(node, dict):
        for raw_key, raw_value in node.items():
            key = scalar_to_str(raw_key, "a string key")
            if key in result:
                raise ParseError(f"duplicate key `{key}`")
            if raw_value is None:
                result[key] = default_factory()
            else:
                result[key] = _decode_entry(key, decode_value, raw_value)
        return result
    if isinstance(node, list):
        for entry in node:
            key = scalar_to_str(entry, "a name")
            if key in result:
                raise ParseError(f"duplicate entry `{key}`")
            result[key] = default_factory()
        return result
    raise ParseError(f"expected a mapping or a list of names, got {node_kind(node)}")


def item_or_list(node: Any, decode_item: Callable[[Any], Any]) -> List[Any]:
    """Decode a single item or a list of items into a list."""
    if isinstance(node, list):
        items = []
        for index, entry in enumerate(node):
            items.append(_decode_entry(str(index), decode_item, entry))
        return items
    if is_scalar(node):
        return [decode_item(node)]
    raise ParseError(f"expected a single item or a list, got {node_kind(node)}")


def string_or_struct(node: Any, cls) -> Any:
    """Decode either the short string form or the full mapping form of ``cls``."""
    if isinstance(node, str):
        return cls.from_string(node)
    if isinstance(node, dict):
        return cls.from_node(node)
    raise ParseError(f"expected a string or a mapping, got {node_kind(node)}")


def serialize_string_or_struct(obj) -> Any:
    if obj.can_serialize_as_string():
        return obj.to_string()
    return obj.to_node()


def true_or_struct(node: Any, cls) -> Any:
    """Decode ``true`` (meaning a default ``cls``) or a mapping."""
    if node is True:
        return cls()
    if node is False or node is None:
        return None
    if isinstance(node, dict):
        return cls.from_node(node)
    raise ParseError(f"expected true or a mapping, got {node_kind(node)}")


def serialize_true_or_struct(obj) -> Any:
    if obj == type(obj)():
        return True
    return obj.to_node()


def map_struct_or_null(node: Any, cls) -> Dict[str, Any]:
    """Decode ``{name: mapping-or-null}`` where null means a default ``cls``."""
    if not isinstance(node, dict):
        raise ParseError(f"expected a mapping, got {node_kind(node)}")
    result = {}
    for raw_key, raw_value in node.items():
        key = scalar_to_str(raw_key, "a string key")
        if raw_value is None:
            result[key] = cls()
        else:
            result[key] = _decode_entry(key, cls.from_node, raw_value)
    return result


def serialize_map_struct_or_null(mapping: Dict[str, Any]) -> Dict[str, Any]:
    result = {}
    for key, obj in mapping.items():
        node = obj.to_node()
        result[key] = node if node else None
    return result
