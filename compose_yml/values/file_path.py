"""Filesystem paths that keep their exact spelling."""
from dataclasses import dataclass
from pathlib import Path

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue


@dataclass(frozen=True)
class FilePath(InterpolatableValue):
    """A path as written in the compose file.

    ``pathlib`` would normalize ``./foo`` to ``foo``; the original text is
    kept so that files round-trip unchanged.
    """

    text: str

    @classmethod
    def parse(cls, text: str) -> "FilePath":
        if not text:
            raise InvalidValueError("path", text)
        return cls(text)

    @property
    def path(self) -> Path:
        return Path(self.text)

    def __str__(self) -> str:
        return self.text
