"""Git repository URLs, as accepted by ``docker build``."""
import re
from dataclasses import dataclass
from typing import Optional

from compose_yml.core.errors import InvalidValueError
from compose_yml.interpolation.raw_or import InterpolatableValue

_URL_PREFIX_RE = re.compile(r"^(?:https?://|git://|github\.com/|git@)")
_URL_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
_SHORTHAND_RE = re.compile(r"^(?:git@([^:]+):(.*))|(github\.com/.*)")
_REPOSITORY_RE = re.compile(r"([^#]*)")
_BRANCH_RE = re.compile(r".*#([^:]+)")
_SUBDIRECTORY_RE = re.compile(r".*#.*:(.+)")


@dataclass(frozen=True, order=True)
class GitUrl(InterpolatableValue):
    """A git URL with an optional ``#branch``, ``#:subdir`` or ``#branch:subdir``.

    Besides real URLs this accepts the shorthands docker understands,
    ``git@host:path`` and ``github.com/user/repo``.
    """

    url: str

    def __post_init__(self):
        if not self.should_treat_as_url(self.url):
            raise InvalidValueError("git URL", self.url)

    @staticmethod
    def should_treat_as_url(text: str) -> bool:
        """Return True if docker would treat ``text`` as a git URL."""
        return _URL_PREFIX_RE.match(text) is not None

    @classmethod
    def parse(cls, text: str) -> "GitUrl":
        return cls(text)

    def to_url(self) -> str:
        """Convert shorthand forms into a regular URL."""
        if _URL_SCHEME_RE.match(self.url):
            return self.url
        match = _SHORTHAND_RE.match(self.url)
        if match is None:
            raise InvalidValueError("git URL", self.url)
        if match.group(1) is not None:
            return f"git://git@{match.group(1)}/{match.group(2)}"
        return f"https://{match.group(3)}"

    def repository(self) -> str:
        return _REPOSITORY_RE.match(self.url).group(1)

    def branch(self) -> Optional[str]:
        match = _BRANCH_RE.match(self.url)
        return match.group(1) if match else None

    def subdirectory(self) -> Optional[str]:
        match = _SUBDIRECTORY_RE.match(self.url)
        return match.group(1) if match else None

    def __str__(self) -> str:
        return self.url
