"""Port mappings: ``[host_ip:][host_ports:]container_ports[/protocol]``."""
import ipaddress
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_PORTS_RE = re.compile(r"^([0-9]+)(?:-([0-9]+))?$")

IpAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class Ports(InterpolatableValue):
    """A single port, or an inclusive range when ``last`` is set."""

    first: int
    last: Optional[int] = None

    def __post_init__(self):
        for port in (self.first, self.last):
            if port is not None and not 0 <= port <= 65535:
                raise InvalidValueError("port", str(port))

    @classmethod
    def parse(cls, text: str) -> "Ports":
        match = _PORTS_RE.match(text)
        if match is None:
            raise InvalidValueError("ports", text)
        first, last = match.groups()
        try:
            return cls(int(first), int(last) if last is not None else None)
        except InvalidValueError:
            raise InvalidValueError("port", text) from None

    def __str__(self) -> str:
        if self.last is None:
            return str(self.first)
        return f"{self.first}-{self.last}"


class Protocol(InterpolatableValue, Enum):
    TCP = "tcp"
    UDP = "udp"

    @classmethod
    def parse(cls, text: str) -> "Protocol":
        try:
            return cls(text)
        except ValueError:
            raise InvalidValueError("protocol", text) from None

    def __str__(self) -> str:
        return self.value


def _as_ports(ports) -> Optional[Ports]:
    if ports is None or isinstance(ports, Ports):
        return ports
    return Ports(ports)


@dataclass(frozen=True)
class PortMapping(InterpolatableValue):
    container_ports: Ports
    host_ports: Optional[Ports] = None
    host_address: Optional[IpAddress] = None
    protocol: Protocol = Protocol.TCP

    def __post_init__(self):
        if self.host_address is not None and self.host_ports is None:
            raise InvalidValueError("port mapping", f"{self.host_address}::{self.container_ports}")

    @classmethod
    def new(cls, host_ports, container_ports) -> "PortMapping":
        """Map ``host_ports`` (int or :class:`Ports`) to ``container_ports``."""
        return cls(_as_ports(container_ports), host_ports=_as_ports(host_ports))

    @classmethod
    def any_to(cls, container_ports) -> "PortMapping":
        """Publish ``container_ports`` on an arbitrary host port."""
        return cls(_as_ports(container_ports))

    @classmethod
    def parse(cls, text: str) -> "PortMapping":
        fields = text.split("/")
        if len(fields) == 1:
            protocol = Protocol.TCP
        elif len(fields) == 2:
            protocol = Protocol.parse(fields[1])
        else:
            raise InvalidValueError("port mapping", text)

        parts = fields[0].rsplit(":", 2)
        container_ports = Ports.parse(parts[-1])
        if len(parts) == 1:
            return cls(container_ports, protocol=protocol)

        host_ports = Ports.parse(parts[-2])
        host_address = None
        if len(parts) == 3:
            try:
                host_address = ipaddress.ip_address(parts[0])
            except ValueError:
                raise InvalidValueError("IP address", text) from None
        return cls(
            container_ports,
            host_ports=host_ports,
            host_address=host_address,
            protocol=protocol,
        )

    def __str__(self) -> str:
        pieces = []
        if self.host_address is not None:
            pieces.append(f"{self.host_address}:")
        if self.host_ports is not None:
            pieces.append(f"{self.host_ports}:")
        pieces.append(str(self.container_ports))
        if self.protocol is not Protocol.TCP:
            pieces.append(f"/{self.protocol}")
        return "".join(pieces)
