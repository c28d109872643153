from dataclasses import dataclass
from typing import Optional

from compose_yml.interpolation.raw_or import RawOr
from compose_yml.models.base import ComposeModel
from compose_yml.models.fields import RawOrCodec, compose_field
from compose_yml.values.file_path import FilePath


@dataclass
class Extends(ComposeModel):
    """Inherit configuration from another service, optionally in another file."""

    service: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    file: Optional[RawOr[FilePath]] = compose_field(RawOrCodec(FilePath))
