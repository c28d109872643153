"""The top-level ``docker-compose.yml`` document."""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from compose_yml.config.loader import dump_yaml, load_yaml
from compose_yml.config.validator import validate_node
from compose_yml.core.config import get_settings
from compose_yml.core.errors import ComposeError, ParseError, ReadFileError, WriteFileError
from compose_yml.core.logger import get_logger
from compose_yml.interpolation.environment import Environment
from compose_yml.models.base import ComposeModel
from compose_yml.models.fields import (
    MapCodec,
    ModelCodec,
    ScalarCodec,
    StructOrNullMapCodec,
    compose_field,
    map_field,
)
from compose_yml.models.network import Network
from compose_yml.models.service import Service
from compose_yml.models.volume import Volume

logger = get_logger(__name__)

DEFAULT_VERSION = "2.4"


@dataclass
class File(ComposeModel):
    """A complete compose file: version, services, volumes and networks.

    Reading and writing both validate the document unless validation is
    turned off (``validate=False`` or ``COMPOSE_YML_VALIDATE=0``).
    """

    version: str = compose_field(ScalarCodec(str), default=DEFAULT_VERSION)
    services: Dict[str, Service] = map_field(MapCodec(ModelCodec(Service)))
    volumes: Dict[str, Volume] = map_field(StructOrNullMapCodec(Volume))
    networks: Dict[str, Network] = map_field(StructOrNullMapCodec(Network))

    @classmethod
    def from_node(cls, node: Any) -> "File":
        if isinstance(node, dict) and node.get("version") is None:
            raise ParseError("missing field `version`")
        return super().from_node(node)

    def validate(self) -> None:
        """Check the document against the schema for its version."""
        validate_node(self.to_node())

    @classmethod
    def read(cls, stream: Union[str, TextIO], validate: Optional[bool] = None) -> "File":
        """Read a compose file from YAML text or a text stream."""
        file = cls.from_node(load_yaml(stream))
        if _should_validate(validate):
            file.validate()
        return file

    @classmethod
    def parse(cls, text: str, validate: Optional[bool] = None) -> "File":
        return cls.read(text, validate=validate)

    def write(self, stream: Optional[TextIO] = None, validate: Optional[bool] = None) -> Optional[str]:
        """Write the file as YAML; returns the text when ``stream`` is None."""
        if _should_validate(validate):
            self.validate()
        return dump_yaml(self.to_node(), stream)

    def to_yaml(self, validate: Optional[bool] = None) -> str:
        return self.write(validate=validate)

    @classmethod
    def read_from_path(cls, path: Union[str, Path], validate: Optional[bool] = None) -> "File":
        path = Path(path)
        logger.debug(f"Reading compose file {path}")
        try:
            with path.open(encoding="utf-8") as handle:
                return cls.read(handle, validate=validate)
        except (OSError, ComposeError) as exc:
            raise ReadFileError(path, exc) from exc

    def write_to_path(self, path: Union[str, Path], validate: Optional[bool] = None) -> None:
        path = Path(path)
        logger.debug(f"Writing compose file {path}")
        try:
            text = self.write(validate=validate)
            path.write_text(text, encoding="utf-8")
        except (OSError, ComposeError) as exc:
            raise WriteFileError(path, exc) from exc

    def inline_all(self, base: Union[str, Path]) -> None:
        """Inline every service's ``env_file`` into its ``environment``."""
        for name, service in self.services.items():
            if service.env_files:
                logger.debug(f"Inlining env files for service {name}")
            service.inline_all(base)

    def make_standalone(self, base: Union[str, Path], env: Optional[Environment] = None) -> None:
        """Remove every dependency on the environment and on side files."""
        self.interpolate_all(env)
        self.inline_all(base)


def _should_validate(validate: Optional[bool]) -> bool:
    if validate is None:
        return get_settings().validate_schema
    return validate
