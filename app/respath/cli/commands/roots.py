"""Roots command implementation.

Shows which search roots publish a virtual directory, without listing
their contents.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from respath.cli.types import OutputFormat, build_provider
from respath.config import ConfigError, load_config_or_default
from respath.enumerator import ResourceEnumerator
from respath.errors import ResourceError
from respath.roots.base import RootScheme
from respath.utils.formatting import console, create_root_table, print_error, print_warning

_SCHEME_STYLES: dict[RootScheme, str] = {
    RootScheme.PLAIN_TREE: "scheme.plain",
    RootScheme.ARCHIVE: "scheme.archive",
    RootScheme.UNSUPPORTED: "scheme.unsupported",
}


def show_roots(
    name: Annotated[
        str | None,
        typer.Argument(help="Virtual directory name (default: from config)."),
    ] = None,
    path: Annotated[
        list[Path] | None,
        typer.Option(
            "--path",
            "-p",
            help="Search path entry (directory or zip archive). Defaults to sys.path.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: plain, table, or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Config file to use instead of ~/.config/respath/config.toml.",
        ),
    ] = None,
) -> None:
    """Show the search roots that publish a virtual directory."""
    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    virtual_directory = name or config.virtual_directory
    enumerator = ResourceEnumerator(build_provider(config, paths=path))

    try:
        search_roots = enumerator.roots(virtual_directory)
    except ValueError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=2) from e
    except ResourceError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if not search_roots:
        print_warning(f"No search roots publish {escape(virtual_directory)!r}.")
        return

    if output_format == OutputFormat.JSON:
        data = [{"scheme": r.scheme.value, "location": r.location} for r in search_roots]
        console.print_json(json.dumps(data))
        return

    if output_format == OutputFormat.PLAIN:
        for search_root in search_roots:
            typer.echo(f"{search_root.scheme.value}\t{search_root.location}")
        return

    table = create_root_table(f"Search roots for {escape(virtual_directory)}")
    for search_root in search_roots:
        style = _SCHEME_STYLES[search_root.scheme]
        table.add_row(f"[{style}]{search_root.scheme.value}[/]", escape(search_root.location))
    console.print(table)
