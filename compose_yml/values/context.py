"""Build contexts: either a local directory or a git URL."""
from dataclasses import dataclass
from typing import Union

from compose_yml.interpolation.raw_or import InterpolatableValue
from compose_yml.values.file_path import FilePath
from compose_yml.values.git_url import GitUrl


@dataclass(frozen=True)
class Context(InterpolatableValue):
    source: Union[FilePath, GitUrl]

    @classmethod
    def dir(cls, path: str) -> "Context":
        return cls(FilePath.parse(path))

    @classmethod
    def git(cls, url: str) -> "Context":
        return cls(GitUrl(url))

    @classmethod
    def parse(cls, text: str) -> "Context":
        if GitUrl.should_treat_as_url(text):
            return cls(GitUrl(text))
        return cls(FilePath.parse(text))

    @property
    def is_git(self) -> bool:
        return isinstance(self.source, GitUrl)

    def is_compatible_with(self, other: "Context") -> bool:
        """Return True if both contexts can share a single checkout.

        Two git URLs are compatible when they point at the same repository
        and branch; their subdirectories may differ.
        """
        if self.is_git and other.is_git:
            return (
                self.source.repository() == other.source.repository()
                and self.source.branch() == other.source.branch()
            )
        if not self.is_git and not other.is_git:
            return self.source == other.source
        return False

    def __str__(self) -> str:
        return str(self.source)
