"""``volumes_from`` entries: ``[container:]name[:rw|ro]``."""
import re
from dataclasses import dataclass
from enum import Enum

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_VOLUMES_FROM_RE = re.compile(r"^(container:)?([^:]+)(?::([^:]+))?$")


class VolumePermissions(InterpolatableValue, Enum):
    READ_WRITE = "rw"
    READ_ONLY = "ro"

    @classmethod
    def parse(cls, text: str) -> "VolumePermissions":
        try:
            return cls(text)
        except ValueError:
            raise InvalidValueError("volume permissions", text) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VolumesFrom(InterpolatableValue):
    """Mount the volumes of another service, or of a container when ``is_container``."""

    name: str
    is_container: bool = False
    permissions: VolumePermissions = VolumePermissions.READ_WRITE

    @classmethod
    def service(cls, name: str) -> "VolumesFrom":
        return cls(name)

    @classmethod
    def container(cls, name: str) -> "VolumesFrom":
        return cls(name, is_container=True)

    @classmethod
    def parse(cls, text: str) -> "VolumesFrom":
        match = _VOLUMES_FROM_RE.match(text)
        if match is None:
            raise InvalidValueError("volumes_from", text)
        prefix, name, permissions = match.groups()
        return cls(
            name,
            is_container=prefix is not None,
            permissions=(
                VolumePermissions.parse(permissions)
                if permissions is not None
                else VolumePermissions.READ_WRITE
            ),
        )

    def __str__(self) -> str:
        text = f"container:{self.name}" if self.is_container else self.name
        if self.permissions is not VolumePermissions.READ_WRITE:
            text = f"{text}:{self.permissions}"
        return text
