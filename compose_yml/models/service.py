"""A single service definition."""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from compose_yml.config.env_file import EnvFile
from compose_yml.core.logger import get_logger
from compose_yml.interpolation.raw_or import RawOr
from compose_yml.models.base import ComposeModel
from compose_yml.models.build import Build
from compose_yml.models.command_line import CommandLine
from compose_yml.models.depends_on import DependsOnService
from compose_yml.models.extends import Extends
from compose_yml.models.fields import (
    DefaultListMapCodec,
    ItemOrListCodec,
    KeyValueMapCodec,
    ListCodec,
    MapCodec,
    ModelCodec,
    RawOrCodec,
    ScalarCodec,
    StringOrStructCodec,
    compose_field,
    list_field,
    map_field,
)
from compose_yml.models.healthcheck import Healthcheck
from compose_yml.models.logging_config import Logging
from compose_yml.models.network import NetworkInterface
from compose_yml.models.ulimit import Ulimit
from compose_yml.values import (
    AliasedName,
    DeviceMapping,
    FilePath,
    HostMapping,
    Image,
    IpcMode,
    MemorySize,
    NetworkMode,
    PidMode,
    PortMapping,
    RestartMode,
    VolumeMount,
    VolumesFrom,
)

logger = get_logger(__name__)


def _raw(value_type=str):
    return compose_field(RawOrCodec(value_type))


def _raw_list(value_type=str):
    return list_field(ListCodec(RawOrCodec(value_type)))


@dataclass
class Service(ComposeModel):
    build: Optional[Build] = compose_field(StringOrStructCodec(Build))
    cap_add: List[RawOr[str]] = _raw_list()
    cap_drop: List[RawOr[str]] = _raw_list()
    command: Optional[CommandLine] = compose_field(ModelCodec(CommandLine))
    cgroup_parent: Optional[RawOr[str]] = _raw()
    container_name: Optional[RawOr[str]] = _raw()
    devices: List[RawOr[DeviceMapping]] = _raw_list(DeviceMapping)
    depends_on: Dict[str, DependsOnService] = map_field(DefaultListMapCodec(DependsOnService))
    dns: List[RawOr[str]] = list_field(ItemOrListCodec(RawOrCodec(str)))
    dns_search: List[RawOr[str]] = list_field(ItemOrListCodec(RawOrCodec(str)))
    tmpfs: List[RawOr[str]] = list_field(ItemOrListCodec(RawOrCodec(str)))
    entrypoint: Optional[CommandLine] = compose_field(ModelCodec(CommandLine))
    env_files: List[RawOr[FilePath]] = list_field(
        ItemOrListCodec(RawOrCodec(FilePath)), key="env_file"
    )
    environment: Dict[str, RawOr[str]] = map_field(KeyValueMapCodec(str))
    expose: List[RawOr[str]] = _raw_list()
    extends: Optional[Extends] = compose_field(ModelCodec(Extends))
    external_links: List[RawOr[AliasedName]] = _raw_list(AliasedName)
    extra_hosts: List[RawOr[HostMapping]] = _raw_list(HostMapping)
    group_add: List[RawOr[str]] = _raw_list()
    healthcheck: Optional[Healthcheck] = compose_field(ModelCodec(Healthcheck))
    image: Optional[RawOr[Image]] = _raw(Image)
    labels: Dict[str, RawOr[str]] = map_field(KeyValueMapCodec(str))
    links: List[RawOr[AliasedName]] = _raw_list(AliasedName)
    logging: Optional[Logging] = compose_field(ModelCodec(Logging))
    network_mode: Optional[RawOr[NetworkMode]] = _raw(NetworkMode)
    networks: Dict[str, NetworkInterface] = map_field(DefaultListMapCodec(NetworkInterface))
    pid: Optional[RawOr[PidMode]] = _raw(PidMode)
    ports: List[RawOr[PortMapping]] = _raw_list(PortMapping)
    security_opt: List[RawOr[str]] = _raw_list()
    stop_signal: Optional[RawOr[str]] = _raw()
    ulimits: Dict[str, Ulimit] = map_field(MapCodec(ModelCodec(Ulimit)))
    volumes: List[RawOr[VolumeMount]] = _raw_list(VolumeMount)
    volumes_from: List[RawOr[VolumesFrom]] = _raw_list(VolumesFrom)
    volume_driver: Optional[RawOr[str]] = _raw()
    cpu_shares: Optional[int] = compose_field(ScalarCodec(int))
    cpu_quota: Optional[int] = compose_field(ScalarCodec(int))
    domainname: Optional[RawOr[str]] = _raw()
    hostname: Optional[RawOr[str]] = _raw()
    ipc: Optional[RawOr[IpcMode]] = _raw(IpcMode)
    mac_address: Optional[RawOr[str]] = _raw()
    mem_limit: Optional[RawOr[MemorySize]] = _raw(MemorySize)
    memswap_limit: Optional[RawOr[MemorySize]] = _raw(MemorySize)
    oom_score_adj: Optional[int] = compose_field(ScalarCodec(int))
    privileged: Optional[bool] = compose_field(ScalarCodec(bool))
    read_only: Optional[bool] = compose_field(ScalarCodec(bool))
    restart: Optional[RawOr[RestartMode]] = _raw(RestartMode)
    shm_size: Optional[RawOr[MemorySize]] = _raw(MemorySize)
    stdin_open: Optional[bool] = compose_field(ScalarCodec(bool))
    tty: Optional[bool] = compose_field(ScalarCodec(bool))
    user: Optional[RawOr[str]] = _raw()
    working_dir: Optional[RawOr[str]] = _raw()

    def inline_all(self, base: Union[str, Path]) -> None:
        """Copy ``env_file`` variables into ``environment`` and drop ``env_file``.

        Paths are resolved relative to ``base``. Variables already set in
        ``environment`` win over the ones loaded from files, and later files
        win over earlier ones.
        """
        inlined: Dict[str, RawOr[str]] = {}
        for env_file in self.env_files:
            path = Path(base) / env_file.value().path
            inlined.update(EnvFile.load(path).to_environment())

        for name in self.environment:
            if name in inlined:
                logger.warning(f"environment entry {name} overrides the value from env_file")
        inlined.update(self.environment)

        self.environment = inlined
        self.env_files = []
