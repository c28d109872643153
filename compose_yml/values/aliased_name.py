"""``name[:alias]`` references used by links, external_links and similar fields."""
import re
from dataclasses import dataclass
from typing import Optional

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_ALIASED_NAME_RE = re.compile(r"^([^:]+)(?::([^:]+))?$")


@dataclass(frozen=True)
class AliasedName(InterpolatableValue):
    name: str
    alias: Optional[str] = None

    def __post_init__(self):
        if ":" in self.name:
            raise InvalidValueError("name", self.name)
        if self.alias is not None and ":" in self.alias:
            raise InvalidValueError("alias", self.alias)

    @classmethod
    def parse(cls, text: str) -> "AliasedName":
        match = _ALIASED_NAME_RE.match(text)
        if match is None:
            raise InvalidValueError("aliased name", text)
        return cls(match.group(1), match.group(2))

    def __str__(self) -> str:
        if self.alias is None:
            return self.name
        return f"{self.name}:{self.alias}"
