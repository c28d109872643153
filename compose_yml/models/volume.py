"""Top-level named volumes."""
from dataclasses import dataclass
from typing import Dict, Optional

from compose_yml.interpolation.raw_or import RawOr
from compose_yml.models.base import ComposeModel
from compose_yml.models.fields import (
    MapCodec,
    OptionalKeyValueMapCodec,
    RawOrCodec,
    ScalarCodec,
    compose_field,
    map_field,
)


@dataclass
class Volume(ComposeModel):
    driver: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    driver_opts: Dict[str, RawOr[str]] = map_field(MapCodec(RawOrCodec(str)))
    external: Optional[bool] = compose_field(ScalarCodec(bool))
    labels: Dict[str, Optional[RawOr[str]]] = map_field(OptionalKeyValueMapCodec(str))
