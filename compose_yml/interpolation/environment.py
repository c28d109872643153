"""Sources of variable values used during interpolation."""
import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional

from compose_yml.core.logger import get_logger

logger = get_logger(__name__)


class Environment(ABC):
    """Something that can look up environment variables by name."""

    @abstractmethod
    def var(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None if it is not defined."""


class OsEnvironment(Environment):
    """Look variables up in the current process environment."""

    def var(self, name: str) -> Optional[str]:
        value = os.environ.get(name)
        if value is None:
            logger.debug(f"Environment variable {name} is not set")
        else:
            logger.debug(f"Read environment variable {name}")
        return value


class MappingEnvironment(Environment):
    """Look variables up in an in-memory mapping."""

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self.variables = dict(variables or {})

    def var(self, name: str) -> Optional[str]:
        return self.variables.get(name)

    def __repr__(self) -> str:
        return f"MappingEnvironment({sorted(self.variables)})"
