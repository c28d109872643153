"""Reader for ``.env`` / ``env_file`` files."""
import re
from pathlib import Path
from typing import Dict, Iterable, TextIO, Union

from compose_yml.core.errors import EnvFileError, ReadFileError
from compose_yml.core.logger import get_logger
from compose_yml.interpolation.raw_or import RawOr, escape

logger = get_logger(__name__)

_BLANK_RE = re.compile(r"^\s*(?:#.*)?$")
_VARIABLE_RE = re.compile(r"^([_A-Za-z][_A-Za-z0-9]*)=(.*)")


class EnvFile:
    """Variables declared in an env file, one ``NAME=value`` per line.

    Values are taken verbatim: no quote stripping and no interpolation.
    """

    def __init__(self, variables: Dict[str, str] = None):
        self.vars: Dict[str, str] = dict(variables or {})

    @classmethod
    def read(cls, stream: Union[TextIO, Iterable[str]]) -> "EnvFile":
        variables = {}
        for line in stream:
            line = line.rstrip("\r\n")
            if _BLANK_RE.match(line):
                continue
            match = _VARIABLE_RE.match(line)
            if match is None:
                raise EnvFileError(line)
            variables[match.group(1)] = match.group(2)
        return cls(variables)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "EnvFile":
        """Read an env file from disk; any failure is reported with the path."""
        path = Path(path)
        logger.debug(f"Loading env file {path}")
        try:
            with path.open(encoding="utf-8") as handle:
                return cls.read(handle)
        except (OSError, EnvFileError) as exc:
            raise ReadFileError(path, exc) from exc

    def to_environment(self) -> Dict[str, RawOr[str]]:
        """Return the variables as escaped ``environment`` entries."""
        return {name: escape(str, value) for name, value in self.vars.items()}
