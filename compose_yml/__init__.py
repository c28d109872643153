"""Typed, round-trip faithful reader and writer for docker-compose.yml files."""
from compose_yml.config.env_file import EnvFile
from compose_yml.config.interpolate import interpolate_all
from compose_yml.config.merge import merge_override
from compose_yml.core.errors import (
    ComposeError,
    EnvFileError,
    InterpolationDisabledError,
    InterpolationError,
    InvalidSyntaxError,
    InvalidValueError,
    ParseError,
    ReadFileError,
    SchemaValidationError,
    UndefinedVariableError,
    UnparsableValueError,
    UnsupportedVersionError,
    WriteFileError,
)
from compose_yml.interpolation import (
    Environment,
    InterpolatableValue,
    MappingEnvironment,
    OsEnvironment,
    RawOr,
    escape,
    escape_str,
    raw,
    value,
)
from compose_yml.models import (
    Build,
    CommandLine,
    ComposeModel,
    File,
    Logging,
    Network,
    Service,
    Volume,
)

__version__ = "0.1.0"

__all__ = [
    "EnvFile",
    "interpolate_all",
    "merge_override",
    "ComposeError",
    "EnvFileError",
    "InterpolationDisabledError",
    "InterpolationError",
    "InvalidSyntaxError",
    "InvalidValueError",
    "ParseError",
    "ReadFileError",
    "SchemaValidationError",
    "UndefinedVariableError",
    "UnparsableValueError",
    "UnsupportedVersionError",
    "WriteFileError",
    "Environment",
    "InterpolatableValue",
    "MappingEnvironment",
    "OsEnvironment",
    "RawOr",
    "escape",
    "escape_str",
    "raw",
    "value",
    "Build",
    "CommandLine",
    "ComposeModel",
    "File",
    "Logging",
    "Network",
    "Service",
    "Volume",
]
