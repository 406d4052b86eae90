"""Config command implementation.

Shows and initializes the respath configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from respath.config import (
    ConfigError,
    get_default_config,
    load_config_or_default,
    save_config,
)
from respath.core.paths import get_config_path
from respath.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the respath configuration.",
    no_args_is_help=True,
)


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Config file to read."),
    ] = None,
) -> None:
    """Print the effective configuration."""
    path = config_path or get_config_path()
    try:
        config = load_config_or_default(path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    source = str(path) if path.exists() else "built-in defaults"
    print_info(f"Configuration ({escape(source)})")
    console.print(f"  virtual_directory: {escape(config.virtual_directory)}")
    search_path = ", ".join(str(p) for p in config.search_path) or "(sys.path)"
    console.print(f"  search_path: {escape(search_path)}")
    origins = ", ".join(config.origins) or "(none)"
    console.print(f"  origins: {escape(origins)}")


@app.command()
def init(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Config file to write."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default configuration file."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        print_error(f"Config already exists: {escape(str(path))} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {escape(str(saved))}")
