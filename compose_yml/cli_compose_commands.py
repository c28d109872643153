"""Commands that read, transform and write compose files."""
from __future__ import annotations

from functools import reduce
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from compose_yml.cli_support import (
    emit_file,
    handle_cli_error,
    load_environment,
    print_success,
    read_file,
)
from compose_yml.core.errors import ComposeError
from compose_yml.core.logger import get_logger

logger = get_logger(__name__)

_console: Console = Console(stderr=True)

OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Write here instead of stdout")


def register_compose_commands(app: typer.Typer, console: Console) -> None:
    """Attach compose commands to the primary CLI."""
    global _console
    _console = console
    app.command("normalize")(compose_normalize)
    app.command("validate")(compose_validate)
    app.command("merge")(compose_merge)
    app.command("interpolate")(compose_interpolate)
    app.command("standalone")(compose_standalone)


def compose_normalize(
    source: Path = typer.Argument(..., help="Path to docker-compose.yml"),
    output: Optional[Path] = OUTPUT_OPTION,
) -> None:
    """Read a compose file and write it back in canonical form."""
    emit_file(_console, read_file(_console, source), output)


def compose_validate(
    source: Path = typer.Argument(..., help="Path to docker-compose.yml"),
) -> None:
    """Check that a compose file parses and passes schema validation."""
    file = read_file(_console, source)
    print_success(_console, f"{source} is valid ({len(file.services)} services)")


def compose_merge(
    base: Path = typer.Argument(..., help="Base docker-compose.yml"),
    overrides: List[Path] = typer.Argument(..., help="Override files, applied in order"),
    output: Optional[Path] = OUTPUT_OPTION,
) -> None:
    """Merge override files on top of a base file."""
    files = [read_file(_console, path) for path in [base, *overrides]]
    logger.debug(f"Merging {len(overrides)} override file(s) into {base}")
    merged = reduce(lambda acc, ovr: acc.merge_override(ovr), files)
    emit_file(_console, merged, output)


def compose_interpolate(
    source: Path = typer.Argument(..., help="Path to docker-compose.yml"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Dotenv file with variable values"),
    output: Optional[Path] = OUTPUT_OPTION,
) -> None:
    """Replace every $VAR reference with its value."""
    file = read_file(_console, source)
    try:
        file.interpolate_all(load_environment(source, env_file))
    except ComposeError as exc:
        handle_cli_error(exc, _console)
    emit_file(_console, file, output)


def compose_standalone(
    source: Path = typer.Argument(..., help="Path to docker-compose.yml"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Dotenv file with variable values"),
    output: Optional[Path] = OUTPUT_OPTION,
) -> None:
    """Interpolate variables and inline env_file entries."""
    file = read_file(_console, source)
    try:
        file.make_standalone(source.parent, load_environment(source, env_file))
    except ComposeError as exc:
        handle_cli_error(exc, _console)
    emit_file(_console, file, output)
