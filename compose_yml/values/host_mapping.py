"""``extra_hosts`` entries: ``hostname:ip``."""
import ipaddress
import re
from dataclasses import dataclass

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue
from compose_yml.values.port_mapping import IpAddress

_HOST_MAPPING_RE = re.compile(r"^([^:]+):(.+)$")


@dataclass(frozen=True)
class HostMapping(InterpolatableValue):
    hostname: str
    address: IpAddress

    @classmethod
    def parse(cls, text: str) -> "HostMapping":
        match = _HOST_MAPPING_RE.match(text)
        if match is None:
            raise InvalidValueError("host mapping", text)
        try:
            address = ipaddress.ip_address(match.group(2))
        except ValueError:
            raise InvalidValueError("IP address", text) from None
        return cls(match.group(1), address)

    def __str__(self) -> str:
        return f"{self.hostname}:{self.address}"
