#!/usr/bin/env python3
"""compose-yml CLI - normalize, validate, merge and interpolate compose files."""
from typing import Optional

import typer
from rich.console import Console

from compose_yml.cli_compose_commands import register_compose_commands
from compose_yml.cli_support import setup_file_logging
from compose_yml.core.config import get_settings

app = typer.Typer(
    name="compose-yml",
    help="""compose-yml - typed docker-compose.yml tooling

Quick start:
  compose-yml validate docker-compose.yml
  compose-yml merge docker-compose.yml docker-compose.override.yml
  compose-yml standalone docker-compose.yml -o standalone.yml
""",
    add_completion=False,
)

console = Console(stderr=True)


@app.callback()
def main(
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug-level file logging"),
) -> None:
    log_file = log_file or get_settings().log_file
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)


register_compose_commands(app, console)

if __name__ == "__main__":
    app()
