"""Field codecs: how each kind of config field maps to and from YAML nodes.

A codec is attached to a dataclass field through :func:`compose_field`.
``ComposeModel`` walks its fields and lets each codec decode or encode the
node stored under the field's YAML key.
"""
from abc import ABC, abstractmethod
from dataclasses import field
from typing import Any, Optional

from compose_yml.config import helpers
from compose_yml.core.errors import ComposeError, ParseError
from compose_yml.interpolation.raw_or import raw


class FieldCodec(ABC):
    """Base codec. Subclasses implement ``decode`` and ``encode``."""

    @abstractmethod
    def decode(self, node: Any) -> Any:
        """Turn a YAML node into the field value."""
        pass

    @abstractmethod
    def encode(self, value: Any) -> Any:
        """Turn the field value back into a YAML node."""
        pass

    def is_empty(self, value: Any) -> bool:
        """Empty values are left out of the serialized mapping."""
        if value is None:
            return True
        return isinstance(value, (list, dict)) and not value


class RawOrCodec(FieldCodec):
    """A string that may hold ``$VAR`` references, parsed as ``value_type``."""

    def __init__(self, value_type: type = str):
        self.value_type = value_type

    def decode(self, node):
        if isinstance(node, bool) or not helpers.is_scalar(node):
            raise ParseError(f"expected a string, got {helpers.node_kind(node)}")
        return raw(self.value_type, helpers.scalar_to_str(node))

    def encode(self, value):
        return str(value)


class ScalarCodec(FieldCodec):
    """A plain YAML scalar of one type (``int``, ``bool``, ``str``)."""

    def __init__(self, scalar_type: type):
        self.scalar_type = scalar_type

    def decode(self, node):
        if self.scalar_type is str:
            return helpers.scalar_to_str(node)
        # bool is a subclass of int, but `cpu_shares: true` is not a number
        if isinstance(node, bool) and self.scalar_type is not bool:
            raise ParseError(f"expected {self.scalar_type.__name__}, got a boolean")
        if not isinstance(node, self.scalar_type):
            raise ParseError(
                f"expected {self.scalar_type.__name__}, got {helpers.node_kind(node)}"
            )
        return node

    def encode(self, value):
        return value


class ListCodec(FieldCodec):
    def __init__(self, item: FieldCodec):
        self.item = item

    def decode(self, node):
        if not isinstance(node, list):
            raise ParseError(f"expected a list, got {helpers.node_kind(node)}")
        items = []
        for index, entry in enumerate(node):
            try:
                items.append(self.item.decode(entry))
            except ComposeError as exc:
                exc.prepend_location(index)
                raise
        return items

    def encode(self, value):
        return [self.item.encode(item) for item in value]


class ItemOrListCodec(ListCodec):
    """A list that may also be written as a single bare item."""

    def decode(self, node):
        return helpers.item_or_list(node, self.item.decode)


class MapCodec(FieldCodec):
    def __init__(self, value: FieldCodec):
        self.value = value

    def decode(self, node):
        if not isinstance(node, dict):
            raise ParseError(f"expected a mapping, got {helpers.node_kind(node)}")
        result = {}
        for raw_key, entry in node.items():
            key = helpers.scalar_to_str(raw_key, "a string key")
            try:
                result[key] = self.value.decode(entry)
            except ComposeError as exc:
                exc.prepend_location(key)
                raise
        return result

    def encode(self, value):
        return {key: self.value.encode(entry) for key, entry in value.items()}


class KeyValueMapCodec(FieldCodec):
    """``environment``/``labels`` style: a mapping or ``KEY=value`` list."""

    def __init__(self, value_type: type = str):
        self.value_type = value_type

    def _decode_value(self, text: str):
        return raw(self.value_type, text)

    def decode(self, node):
        return helpers.map_or_key_value_list(node, self._decode_value)

    def encode(self, value):
        return {key: str(entry) for key, entry in value.items()}


class OptionalKeyValueMapCodec(KeyValueMapCodec):
    """Like :class:`KeyValueMapCodec`, but a bare ``KEY`` has no value."""

    def decode(self, node):
        return helpers.map_or_key_optional_value_list(node, self._decode_value)

    def encode(self, value):
        return {
            key: None if entry is None else str(entry)
            for key, entry in value.items()
        }


class ModelCodec(FieldCodec):
    """A nested struct; ``model`` provides ``from_node`` and ``to_node``."""

    def __init__(self, model):
        self.model = model

    def decode(self, node):
        return self.model.from_node(node)

    def encode(self, value):
        return value.to_node()


class DefaultListMapCodec(ModelCodec):
    """``{name: struct-or-null}`` or ``[name, ...]`` with default structs.

    Written back in list form when every entry is a default struct.
    """

    def decode(self, node):
        return helpers.map_or_default_list(node, self.model.from_node, self.model)

    def encode(self, value):
        default = self.model()
        if all(entry == default for entry in value.values()):
            return list(value)
        return {key: (entry.to_node() or None) for key, entry in value.items()}


class StringOrStructCodec(ModelCodec):
    def decode(self, node):
        return helpers.string_or_struct(node, self.model)

    def encode(self, value):
        return helpers.serialize_string_or_struct(value)


class TrueOrStructCodec(ModelCodec):
    def decode(self, node):
        return helpers.true_or_struct(node, self.model)

    def encode(self, value):
        return helpers.serialize_true_or_struct(value)


class StructOrNullMapCodec(ModelCodec):
    def decode(self, node):
        return helpers.map_struct_or_null(node, self.model)

    def encode(self, value):
        return helpers.serialize_map_struct_or_null(value)

    def is_empty(self, value):
        return not value


def compose_field(
    codec: FieldCodec,
    *,
    key: Optional[str] = None,
    default: Any = None,
    default_factory=None,
):
    """Declare a dataclass field that is read from and written to YAML.

    Args:
        codec: How to convert between the YAML node and the Python value
        key: YAML key, when it differs from the attribute name
        default: Value used when the key is absent
        default_factory: Factory for mutable defaults
    """
    metadata = {"codec": codec, "key": key}
    if default_factory is not None:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def list_field(codec: FieldCodec, *, key: Optional[str] = None):
    return compose_field(codec, key=key, default_factory=list)


def map_field(codec: FieldCodec, *, key: Optional[str] = None):
    return compose_field(codec, key=key, default_factory=dict)
