"""``devices`` entries: ``host_path[:container_path[:permissions]]``."""
import re
from dataclasses import dataclass
from typing import Optional

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_DEVICE_PERMISSIONS_RE = re.compile(r"^(r)?(w)?(m)?$")


@dataclass(frozen=True)
class DevicePermissions(InterpolatableValue):
    read: bool = True
    write: bool = True
    mknod: bool = True

    @classmethod
    def parse(cls, text: str) -> "DevicePermissions":
        match = _DEVICE_PERMISSIONS_RE.match(text)
        if match is None or not text:
            raise InvalidValueError("device permissions", text)
        read, write, mknod = match.groups()
        return cls(read is not None, write is not None, mknod is not None)

    def __str__(self) -> str:
        return (
            ("r" if self.read else "")
            + ("w" if self.write else "")
            + ("m" if self.mknod else "")
        )


@dataclass(frozen=True)
class DeviceMapping(InterpolatableValue):
    host: str
    container: Optional[str] = None
    permissions: Optional[DevicePermissions] = None

    def __post_init__(self):
        if self.permissions is not None and self.container is None:
            raise InvalidValueError("device", f"{self.host}::{self.permissions}")

    @classmethod
    def parse(cls, text: str) -> "DeviceMapping":
        items = text.split(":")
        if len(items) > 3 or not all(items[:2]):
            raise InvalidValueError("device", text)
        container = items[1] if len(items) > 1 else None
        permissions = DevicePermissions.parse(items[2]) if len(items) == 3 else None
        return cls(items[0], container, permissions)

    def __str__(self) -> str:
        pieces = [self.host]
        if self.container is not None:
            pieces.append(self.container)
        if self.permissions is not None:
            pieces.append(str(self.permissions))
        return ":".join(pieces)
