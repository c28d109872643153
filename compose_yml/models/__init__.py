"""Typed structs for every section of a compose file."""
from compose_yml.models.base import ComposeModel
from compose_yml.models.build import Build
from compose_yml.models.command_line import CommandLine, Parsed, ShellCode
from compose_yml.models.depends_on import DependsOnService, ServiceCondition
from compose_yml.models.extends import Extends
from compose_yml.models.file import File
from compose_yml.models.healthcheck import Healthcheck
from compose_yml.models.logging_config import Logging
from compose_yml.models.network import ExternalNetwork, Network, NetworkInterface
from compose_yml.models.service import Service
from compose_yml.models.ulimit import Ulimit
from compose_yml.models.volume import Volume

__all__ = [
    "ComposeModel",
    "Build",
    "CommandLine",
    "Parsed",
    "ShellCode",
    "DependsOnService",
    "ServiceCondition",
    "Extends",
    "File",
    "Healthcheck",
    "Logging",
    "ExternalNetwork",
    "Network",
    "NetworkInterface",
    "Service",
    "Ulimit",
    "Volume",
]
