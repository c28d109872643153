"""Typed values that appear as strings inside compose files."""
from compose_yml.values.aliased_name import AliasedName
from compose_yml.values.context import Context
from compose_yml.values.device import DeviceMapping, DevicePermissions
from compose_yml.values.file_path import FilePath
from compose_yml.values.git_url import GitUrl
from compose_yml.values.host_mapping import HostMapping
from compose_yml.values.image import Digest, Image, RegistryHost, Tag
from compose_yml.values.memory_size import MemorySize
from compose_yml.values.modes import IpcMode, NetworkMode, PidMode, RestartMode
from compose_yml.values.port_mapping import PortMapping, Ports, Protocol
from compose_yml.values.volume_mount import (
    HostVolume,
    HostVolumeKind,
    VolumeModes,
    VolumeMount,
)
from compose_yml.values.volumes_from import VolumePermissions, VolumesFrom

__all__ = [
    "AliasedName",
    "Context",
    "DeviceMapping",
    "DevicePermissions",
    "FilePath",
    "GitUrl",
    "HostMapping",
    "Digest",
    "Image",
    "RegistryHost",
    "Tag",
    "MemorySize",
    "IpcMode",
    "NetworkMode",
    "PidMode",
    "RestartMode",
    "PortMapping",
    "Ports",
    "Protocol",
    "HostVolume",
    "HostVolumeKind",
    "VolumeModes",
    "VolumeMount",
    "VolumePermissions",
    "VolumesFrom",
]
