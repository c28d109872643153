"""Top-level networks and per-service network attachments."""
from dataclasses import dataclass
from typing import Dict, List, Optional

from compose_yml.interpolation.raw_or import RawOr
from compose_yml.models.base import ComposeModel
from compose_yml.models.fields import (
    KeyValueMapCodec,
    ListCodec,
    MapCodec,
    RawOrCodec,
    ScalarCodec,
    TrueOrStructCodec,
    compose_field,
    list_field,
    map_field,
)


@dataclass
class ExternalNetwork(ComposeModel):
    """``external: true`` or ``external: {name: real-name}``."""

    name: Optional[RawOr[str]] = compose_field(RawOrCodec(str))


@dataclass
class Network(ComposeModel):
    driver: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    driver_opts: Dict[str, RawOr[str]] = map_field(MapCodec(RawOrCodec(str)))
    external: Optional[ExternalNetwork] = compose_field(TrueOrStructCodec(ExternalNetwork))
    internal: Optional[bool] = compose_field(ScalarCodec(bool))
    labels: Dict[str, RawOr[str]] = map_field(KeyValueMapCodec(str))


@dataclass
class NetworkInterface(ComposeModel):
    """How a service attaches to one of the file's networks."""

    aliases: List[RawOr[str]] = list_field(ListCodec(RawOrCodec(str)))
    ipv4_address: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    ipv6_address: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
