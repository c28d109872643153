"""Schema validation for serialized compose documents.

The typed decoder already rejects unknown keys and malformed values; these
pydantic models add the cross-field and version-dependent rules.
"""
import re
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from compose_yml.core.errors import SchemaValidationError, UnsupportedVersionError
from compose_yml.core.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_VERSIONS = ("2", "2.1", "2.2", "2.3", "2.4")

_SERVICE_NAME_RE = re.compile(r"^[a-zA-Z0-9._-]+$")


def version_tuple(version: str) -> Tuple[int, ...]:
    return tuple(int(part) for part in version.split("."))


def _require_version(info: ValidationInfo, minimum: Tuple[int, ...], what: str) -> None:
    version = (info.context or {}).get("version", version_tuple(SUPPORTED_VERSIONS[-1]))
    if version < minimum:
        wanted = ".".join(str(part) for part in minimum)
        raise ValueError(f"{what} requires version {wanted} or later")


class _Schema(BaseModel):
    model_config = ConfigDict(extra="forbid")


class UlimitPairSchema(_Schema):
    soft: int
    hard: int


class HealthcheckSchema(_Schema):
    test: Optional[Union[str, List[str]]] = None
    interval: Optional[str] = None
    timeout: Optional[str] = None
    retries: Optional[int] = None
    start_period: Optional[str] = None
    disable: Optional[bool] = None


class DependsOnConditionSchema(_Schema):
    condition: Optional[Literal["service_started", "service_healthy"]] = None


class ServiceSchema(BaseModel):
    # Remaining service keys were already checked by the typed decoder.
    model_config = ConfigDict(extra="allow")

    healthcheck: Optional[HealthcheckSchema] = None
    depends_on: Optional[
        Union[List[str], Dict[str, Optional[DependsOnConditionSchema]]]
    ] = None
    ulimits: Optional[Dict[str, Union[int, UlimitPairSchema]]] = None

    @field_validator("healthcheck")
    @classmethod
    def check_healthcheck_version(cls, value, info: ValidationInfo):
        if value is not None:
            _require_version(info, (2, 1), "healthcheck")
        return value

    @field_validator("depends_on")
    @classmethod
    def check_depends_on_version(cls, value, info: ValidationInfo):
        if isinstance(value, dict):
            if any(entry is not None and entry.condition for entry in value.values()):
                _require_version(info, (2, 1), "depends_on conditions")
        return value


class ExternalSchema(_Schema):
    name: Optional[str] = None


class NetworkSchema(_Schema):
    driver: Optional[str] = None
    driver_opts: Optional[Dict[str, str]] = None
    external: Optional[Union[bool, ExternalSchema]] = None
    internal: Optional[bool] = None
    labels: Optional[Dict[str, str]] = None

    @model_validator(mode="after")
    def check_external(self):
        if self.external and (self.driver or self.driver_opts):
            raise ValueError("external networks cannot set driver or driver_opts")
        return self


class VolumeSchema(_Schema):
    driver: Optional[str] = None
    driver_opts: Optional[Dict[str, str]] = None
    external: Optional[bool] = None
    labels: Optional[Dict[str, Optional[str]]] = None

    @model_validator(mode="after")
    def check_external(self):
        if self.external and (self.driver or self.driver_opts):
            raise ValueError("external volumes cannot set driver or driver_opts")
        return self


class FileSchema(_Schema):
    version: str
    services: Optional[Dict[str, ServiceSchema]] = None
    volumes: Optional[Dict[str, Optional[VolumeSchema]]] = None
    networks: Optional[Dict[str, Optional[NetworkSchema]]] = None

    @field_validator("services")
    @classmethod
    def check_service_names(cls, value):
        for name in value or {}:
            if not _SERVICE_NAME_RE.match(name):
                raise ValueError(f"invalid service name '{name}'")
        return value


def _format_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]


def validate_node(node: Dict[str, Any]) -> None:
    """Validate a serialized compose document.

    Raises:
        UnsupportedVersionError: The document is not format 2.0 to 2.4
        SchemaValidationError: The document breaks a schema rule
    """
    version = str(node.get("version", ""))
    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(version)

    try:
        FileSchema.model_validate(node, context={"version": version_tuple(version)})
    except ValidationError as exc:
        errors = [_format_error(error) for error in exc.errors()]
        logger.debug(f"Schema validation failed with {len(errors)} error(s)")
        raise SchemaValidationError(errors) from exc
