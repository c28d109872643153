"""Docker image references."""
import re
from dataclasses import dataclass, replace
from typing import Optional, Union

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_IMAGE_RE = re.compile(
    r"^(?:([^/:.@]+\.[^/:@]+)(?::([0-9]+))?/)?"  # registry[:port]/
    r"(?:([^/:@.]+)/)?"                         # user/
    r"([^:@]+)"                                 # name
    r"(?::([^/:@]+)|@(.+))?$"                   # :tag or @digest
)


@dataclass(frozen=True)
class RegistryHost:
    host: str
    port: Optional[int] = None

    def __str__(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class Tag:
    tag: str

    def __str__(self) -> str:
        return f":{self.tag}"


@dataclass(frozen=True)
class Digest:
    digest: str

    def __str__(self) -> str:
        return f"@{self.digest}"


@dataclass(frozen=True)
class Image(InterpolatableValue):
    """``[registry[:port]/][user/]name[:tag|@digest]``"""

    name: str
    registry_host: Optional[RegistryHost] = None
    user_name: Optional[str] = None
    version: Optional[Union[Tag, Digest]] = None

    @classmethod
    def parse(cls, text: str) -> "Image":
        match = _IMAGE_RE.match(text)
        if match is None:
            raise InvalidValueError("image", text)
        host, port, user_name, name, tag, digest = match.groups()

        registry_host = None
        if host is not None:
            if port is not None and int(port) > 65535:
                raise InvalidValueError("image", text)
            registry_host = RegistryHost(host, int(port) if port is not None else None)

        version = None
        if tag is not None:
            version = Tag(tag)
        elif digest is not None:
            version = Digest(digest)

        return cls(name, registry_host=registry_host, user_name=user_name, version=version)

    def without_version(self) -> "Image":
        return replace(self, version=None)

    def __str__(self) -> str:
        parts = []
        if self.registry_host is not None:
            parts.append(f"{self.registry_host}/")
        if self.user_name is not None:
            parts.append(f"{self.user_name}/")
        parts.append(self.name)
        if self.version is not None:
            parts.append(str(self.version))
        return "".join(parts)
