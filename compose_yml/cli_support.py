"""Shared utilities for compose-yml CLI modules."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from compose_yml.config.env_file import EnvFile
from compose_yml.core.config import get_settings
from compose_yml.core.errors import ComposeError
from compose_yml.interpolation.environment import MappingEnvironment
from compose_yml.models.file import File


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up file logging for CLI commands."""
    from compose_yml.core.logger import setup_file_logging as _setup_file_logging
    _setup_file_logging(log_file=log_file, verbose=verbose)


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    console.print(f"[red]{prefix}[/red] {message}")


def handle_cli_error(e: Exception, console: Console, exit_code: int = 1) -> None:
    """Report a library error and stop the command."""
    print_error(console, str(e))
    raise typer.Exit(exit_code) from e


def load_environment(source: Path, env_file: Optional[Path] = None) -> MappingEnvironment:
    """Build the interpolation environment for ``source``.

    Variables come from ``env_file`` (or the settings' dotenv file next to
    ``source``, when present); the process environment takes precedence.
    """
    variables = {}
    dotenv = env_file or source.parent / get_settings().env_file_name
    if env_file is not None or dotenv.exists():
        variables.update(EnvFile.load(dotenv).vars)
    variables.update(os.environ)
    return MappingEnvironment(variables)


def read_file(console: Console, source: Path) -> File:
    try:
        return File.read_from_path(source)
    except ComposeError as exc:
        handle_cli_error(exc, console)


def emit_file(console: Console, file: File, output: Optional[Path]) -> None:
    """Write ``file`` to ``output``, or to stdout when no output is given."""
    try:
        if output is None:
            typer.echo(file.to_yaml(), nl=False)
            return
        file.write_to_path(output)
    except ComposeError as exc:
        handle_cli_error(exc, console)
    print_success(console, f"Wrote {output}")
