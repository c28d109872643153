"""Memory sizes such as ``512m`` or ``2g``."""
import re
from dataclasses import dataclass

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_MEMORY_SIZE_RE = re.compile(r"^([0-9]+)([bkmg])?$")

_UNITS = {"b": 1, "k": 1024, "m": 1024 ** 2, "g": 1024 ** 3}


@dataclass(frozen=True, order=True)
class MemorySize(InterpolatableValue):
    """A size in bytes, written back using the largest exact unit."""

    bytes: int

    @classmethod
    def kb(cls, amount: int) -> "MemorySize":
        return cls(amount * _UNITS["k"])

    @classmethod
    def mb(cls, amount: int) -> "MemorySize":
        return cls(amount * _UNITS["m"])

    @classmethod
    def gb(cls, amount: int) -> "MemorySize":
        return cls(amount * _UNITS["g"])

    @classmethod
    def parse(cls, text: str) -> "MemorySize":
        match = _MEMORY_SIZE_RE.match(text)
        if match is None:
            raise InvalidValueError("memory size", text)
        amount, unit = match.groups()
        return cls(int(amount) * _UNITS[unit or "b"])

    def __str__(self) -> str:
        if self.bytes == 0:
            return "0"
        for unit in ("g", "m", "k"):
            if self.bytes % _UNITS[unit] == 0:
                return f"{self.bytes // _UNITS[unit]}{unit}"
        return str(self.bytes)
