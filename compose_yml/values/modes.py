"""``network_mode``, ``pid``, ``ipc`` and ``restart`` values.

Each accepts a few bare keywords plus ``kind:argument`` forms such as
``service:db`` or ``on-failure:3``.
"""
import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_COMPOUND_MODE_RE = re.compile(r"^([-a-z]+):(.+)$")


@dataclass(frozen=True)
class _Mode(InterpolatableValue):
    kind: str
    target: Optional[str] = None

    WANTED: ClassVar[str] = "mode"
    SIMPLE: ClassVar[Tuple[str, ...]] = ()
    COMPOUND: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):
        if self.target is None and self.kind not in self.SIMPLE:
            raise InvalidValueError(self.WANTED, self.kind)
        if self.target is not None and self.kind not in self.COMPOUND:
            raise InvalidValueError(self.WANTED, f"{self.kind}:{self.target}")

    @classmethod
    def parse(cls, text: str):
        if text in cls.SIMPLE:
            return cls(text)
        match = _COMPOUND_MODE_RE.match(text)
        if match is None or match.group(1) not in cls.COMPOUND:
            raise InvalidValueError(cls.WANTED, text)
        return cls(match.group(1), match.group(2))

    @classmethod
    def container(cls, name: str):
        return cls("container", name)

    def __str__(self) -> str:
        if self.target is None:
            return self.kind
        return f"{self.kind}:{self.target}"


@dataclass(frozen=True)
class NetworkMode(_Mode):
    WANTED: ClassVar[str] = "network mode"
    SIMPLE: ClassVar[Tuple[str, ...]] = ("bridge", "host", "none")
    COMPOUND: ClassVar[Tuple[str, ...]] = ("service", "container")

    @classmethod
    def service(cls, name: str) -> "NetworkMode":
        return cls("service", name)


@dataclass(frozen=True)
class PidMode(_Mode):
    WANTED: ClassVar[str] = "pid mode"
    SIMPLE: ClassVar[Tuple[str, ...]] = ("host",)
    COMPOUND: ClassVar[Tuple[str, ...]] = ("container",)


@dataclass(frozen=True)
class IpcMode(_Mode):
    WANTED: ClassVar[str] = "IPC mode"
    SIMPLE: ClassVar[Tuple[str, ...]] = ("host",)
    COMPOUND: ClassVar[Tuple[str, ...]] = ("container",)


@dataclass(frozen=True)
class RestartMode(InterpolatableValue):
    """``no``, ``always``, ``unless-stopped`` or ``on-failure[:max_retries]``."""

    kind: str
    max_retries: Optional[int] = None

    KINDS: ClassVar[Tuple[str, ...]] = ("no", "on-failure", "always", "unless-stopped")

    def __post_init__(self):
        if self.kind not in self.KINDS:
            raise InvalidValueError("restart mode", self.kind)
        if self.max_retries is not None and self.kind != "on-failure":
            raise InvalidValueError("restart mode", f"{self.kind}:{self.max_retries}")

    @classmethod
    def parse(cls, text: str) -> "RestartMode":
        if text in cls.KINDS:
            return cls(text)
        match = _COMPOUND_MODE_RE.match(text)
        if match is None or match.group(1) != "on-failure":
            raise InvalidValueError("restart mode", text)
        try:
            retries = int(match.group(2))
        except ValueError:
            raise InvalidValueError("restart mode", text) from None
        if retries < 0:
            raise InvalidValueError("restart mode", text)
        return cls("on-failure", retries)

    def __str__(self) -> str:
        if self.max_retries is None:
            return self.kind
        return f"{self.kind}:{self.max_retries}"
