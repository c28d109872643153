"""``command``, ``entrypoint`` and ``healthcheck.test`` values."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List

from compose_yml.config.helpers import node_kind, scalar_to_str
from compose_yml.config.interpolate import interpolate_value
from compose_yml.core.errors import ComposeError, ParseError
from compose_yml.interpolation.environment import Environment
from compose_yml.interpolation.raw_or import RawOr, raw


class CommandLine(ABC):
    """A command given either as shell code (a string) or as an argv list.

    Command lines are replaced wholesale when merging, never concatenated.
    """

    @classmethod
    def from_node(cls, node: Any) -> "CommandLine":
        if isinstance(node, str):
            return ShellCode(raw(str, node))
        if isinstance(node, list):
            args = []
            for index, entry in enumerate(node):
                try:
                    args.append(raw(str, scalar_to_str(entry)))
                except ComposeError as exc:
                    exc.prepend_location(index)
                    raise
            return Parsed(args)
        raise ParseError(f"expected a string or a list of strings, got {node_kind(node)}")

    @abstractmethod
    def to_node(self) -> Any:
        pass


@dataclass
class ShellCode(CommandLine):
    command: RawOr[str]

    def to_node(self) -> str:
        return str(self.command)


@dataclass
class Parsed(CommandLine):
    args: List[RawOr[str]] = field(default_factory=list)

    def to_node(self) -> List[str]:
        return [str(arg) for arg in self.args]


@interpolate_value.register(ShellCode)
def _interpolate_shell_code(obj: ShellCode, env: Environment) -> None:
    obj.command.interpolate_env(env)


@interpolate_value.register(Parsed)
def _interpolate_parsed(obj: Parsed, env: Environment) -> None:
    interpolate_value(obj.args, env)
