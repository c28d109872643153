from dataclasses import dataclass
from typing import Optional

from compose_yml.interpolation.raw_or import RawOr
from compose_yml.models.base import ComposeModel
from compose_yml.models.command_line import CommandLine
from compose_yml.models.fields import ModelCodec, RawOrCodec, ScalarCodec, compose_field


@dataclass
class Healthcheck(ComposeModel):
    """Container health check (format 2.1 and later)."""

    test: Optional[CommandLine] = compose_field(ModelCodec(CommandLine))
    interval: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    timeout: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    retries: Optional[int] = compose_field(ScalarCodec(int))
    start_period: Optional[RawOr[str]] = compose_field(RawOrCodec(str))
    disable: Optional[bool] = compose_field(ScalarCodec(bool))
