"""Per-service logging driver configuration."""
import copy
from dataclasses import dataclass
from typing import Dict, Optional

from compose_yml.interpolation.raw_or import RawOr
from compose_yml.models.base import ComposeModel
from compose_yml.models.fields import MapCodec, RawOrCodec, compose_field, map_field


@dataclass
class Logging(ComposeModel):
    driver: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    options: Dict[str, RawOr[str]] = map_field(MapCodec(RawOrCodec(str)))

    def merge_override(self, ovr: "Logging") -> "Logging":
        # Options are driver-specific; a new driver drops the old options.
        if ovr.driver is not None and ovr.driver != self.driver:
            return copy.deepcopy(ovr)
        return super().merge_override(ovr)
