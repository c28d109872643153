"""Error types raised while reading, transforming and writing compose files."""
from typing import List, Optional


class ComposeError(Exception):
    """Base class for every compose_yml error.

    ``location`` holds the chain of YAML keys leading to the failing node.
    Decoders prepend keys as the error propagates outwards, so a message
    reads like ``services.web.image: Invalid image: <...>``.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.location: List[str] = []

    def prepend_location(self, key) -> "ComposeError":
        self.location.insert(0, str(key))
        return self

    def __str__(self) -> str:
        if self.location:
            return f"{'.'.join(self.location)}: {self.message}"
        return self.message


class InvalidValueError(ComposeError, ValueError):
    """A string could not be parsed as the wanted value type."""

    def __init__(self, wanted: str, input: str):
        super().__init__(f"Invalid {wanted}: <{input}>")
        self.wanted = wanted
        self.input = input


class InterpolationError(ComposeError):
    """Base class for errors produced by the interpolation grammar."""


class InvalidSyntaxError(InterpolationError):
    def __init__(self, input: str):
        super().__init__(f"invalid interpolation syntax: <{input}>")
        self.input = input


class UndefinedVariableError(InterpolationError):
    def __init__(self, name: str):
        super().__init__(f"undefined environment variable in interpolation: {name}")
        self.name = name


class InterpolationDisabledError(InterpolationError):
    def __init__(self, input: str):
        super().__init__(
            f"cannot parse without interpolating environment variables: <{input}>"
        )
        self.input = input


class UnparsableValueError(InterpolationError):
    """Interpolation succeeded but the result is not a valid value."""

    def __init__(self, error: InvalidValueError):
        super().__init__(f"cannot escape invalid value: {error.message}")
        self.error = error


class ParseError(ComposeError):
    """The YAML node had a shape the decoder does not accept."""


class SchemaValidationError(ComposeError):
    """The serialized document failed schema validation."""

    def __init__(self, errors: List[str]):
        summary = "; ".join(errors) if errors else "unknown error"
        super().__init__(f"schema validation failed: {summary}")
        self.errors = errors


class UnsupportedVersionError(ComposeError):
    def __init__(self, version: str):
        super().__init__(f"unsupported docker-compose.yml version: {version}")
        self.version = version


class EnvFileError(ComposeError):
    def __init__(self, line: str):
        super().__init__(f"cannot parse env variable declaration: <{line}>")
        self.line = line


class ReadFileError(ComposeError):
    def __init__(self, path, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"error reading file '{path}'{detail}")
        self.path = path


class WriteFileError(ComposeError):
    def __init__(self, path, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"error writing to file '{path}'{detail}")
        self.path = path
