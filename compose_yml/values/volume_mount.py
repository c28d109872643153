"""Service volume mounts: ``[host:]container[:mode]``."""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_HOST_VOLUME_RE = re.compile(r"^(?:(\.{0,2}/.*)|~/(.+)|([^./~].*))$", re.DOTALL)


class HostVolumeKind(Enum):
    PATH = "path"
    USER_RELATIVE_PATH = "user_relative_path"
    NAME = "name"


@dataclass(frozen=True)
class HostVolume(InterpolatableValue):
    """The host side of a mount: a path, a ``~/`` path or a named volume."""

    kind: HostVolumeKind
    value: str

    @classmethod
    def path(cls, path: str) -> "HostVolume":
        return cls(HostVolumeKind.PATH, path)

    @classmethod
    def user_relative_path(cls, path: str) -> "HostVolume":
        return cls(HostVolumeKind.USER_RELATIVE_PATH, path)

    @classmethod
    def name(cls, name: str) -> "HostVolume":
        return cls(HostVolumeKind.NAME, name)

    @classmethod
    def parse(cls, text: str) -> "HostVolume":
        match = _HOST_VOLUME_RE.match(text)
        if match is None:
            raise InvalidValueError("host volume", text)
        path, home_path, name = match.groups()
        if path is not None:
            return cls(HostVolumeKind.PATH, path)
        if home_path is not None:
            return cls(HostVolumeKind.USER_RELATIVE_PATH, home_path)
        return cls(HostVolumeKind.NAME, name)

    def __str__(self) -> str:
        if self.kind is HostVolumeKind.PATH:
            if self.value.startswith(("/", "./", "../")):
                return self.value
            return f"./{self.value}"
        if self.kind is HostVolumeKind.USER_RELATIVE_PATH:
            return f"~/{self.value}"
        return self.value


class VolumeModes(InterpolatableValue, Enum):
    READ_WRITE = "rw"
    READ_ONLY = "ro"
    CONSISTENT = "consistent"
    CACHED = "cached"
    DELEGATED = "delegated"

    @classmethod
    def parse(cls, text: str) -> "VolumeModes":
        try:
            return cls(text)
        except ValueError:
            raise InvalidValueError("volume mode", text) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VolumeMount(InterpolatableValue):
    container: str
    host: Optional[HostVolume] = None
    mode: VolumeModes = VolumeModes.READ_WRITE

    def __post_init__(self):
        if self.host is None and self.mode is not VolumeModes.READ_WRITE:
            raise InvalidValueError("volume", f"{self.container}:{self.mode}")

    @classmethod
    def host_path(cls, host: str, container: str) -> "VolumeMount":
        return cls(container, host=HostVolume.path(host))

    @classmethod
    def named(cls, name: str, container: str) -> "VolumeMount":
        return cls(container, host=HostVolume.name(name))

    @classmethod
    def anonymous(cls, container: str) -> "VolumeMount":
        return cls(container)

    @classmethod
    def parse(cls, text: str) -> "VolumeMount":
        items = text.split(":")
        if len(items) == 1:
            return cls(items[0])
        if len(items) == 2:
            return cls(items[1], host=HostVolume.parse(items[0]))
        if len(items) == 3:
            return cls(
                items[1],
                host=HostVolume.parse(items[0]),
                mode=VolumeModes.parse(items[2]),
            )
        raise InvalidValueError("volume", text)

    def __str__(self) -> str:
        pieces = []
        if self.host is not None:
            pieces.append(str(self.host))
        pieces.append(self.container)
        if self.mode is not VolumeModes.READ_WRITE:
            pieces.append(str(self.mode))
        return ":".join(pieces)
