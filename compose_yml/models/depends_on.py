from dataclasses import dataclass
from enum import Enum
from typing import Optional

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue, RawOr
from compose_yml.models.base import ComposeModel
from compose_yml.models.fields import RawOrCodec, compose_field


class ServiceCondition(InterpolatableValue, Enum):
    STARTED = "service_started"
    HEALTHY = "service_healthy"

    @classmethod
    def parse(cls, text: str) -> "ServiceCondition":
        try:
            return cls(text)
        except ValueError:
            raise InvalidValueError("service condition", text) from None

    def __str__(self) -> str:
        return self.value


@dataclass
class DependsOnService(ComposeModel):
    """One entry of ``depends_on``; the condition needs format 2.1."""

    condition: Optional[RawOr[ServiceCondition]] = compose_field(RawOrCodec(ServiceCondition))
