"""List command implementation.

Enumerates the resources published under a virtual directory and
prints one relative path per line.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from respath.cli.types import OutputFormat, build_provider
from respath.config import ConfigError, load_config_or_default
from respath.enumerator import ResourceEnumerator, union_roots
from respath.errors import ResourceError
from respath.models.entry import ResourceEntry
from respath.models.result import EnumerationResult
from respath.utils.formatting import console, create_entry_table, print_error, print_info


def list_resources(
    ctx: typer.Context,
    name: Annotated[
        str | None,
        typer.Argument(help="Virtual directory name (default: from config)."),
    ] = None,
    root: Annotated[
        list[str] | None,
        typer.Option(
            "--root",
            "-r",
            help="Origin address or directory to enumerate instead of the search path.",
        ),
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
    ] = OutputFormat.PLAIN,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export results to JSON file.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Config file to use instead of ~/.config/respath/config.toml.",
        ),
    ] = None,
) -> None:
    """List every resource published under a virtual directory.

    Examples:
        respath list payloads                       # Search sys.path
        respath list payloads --path ./lib          # Search a custom path
        respath list --root jar:file:///opt/app.jar!/payloads
        respath list payloads --format json         # Output as JSON
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    virtual_directory = name or config.virtual_directory
    provider = build_provider(config, roots=root, paths=path)
    enumerator = ResourceEnumerator(provider)

    try:
        search_roots = enumerator.roots(virtual_directory)
        entries = union_roots(search_roots)
    except ValueError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=2) from e
    except ResourceError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    result = EnumerationResult.create(
        entries=entries,
        virtual_directory=virtual_directory,
        origins=[r.location for r in search_roots],
    )

    if export_path is not None:
        _export_result(result, export_path, quiet)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(result.to_dict()))
        return

    if output_format == OutputFormat.TABLE:
        _print_table(list(result.entries), virtual_directory)
        if not quiet:
            console.print(
                f"\n[dim]Found {len(result.entries)} resources "
                f"across {len(search_roots)} roots[/dim]"
            )
        return

    # Plain output: one path per line, no markup, suitable for piping
    for entry in result.entries:
        typer.echo(entry.path)


# === Private helper functions ===


def _print_table(entries: list[ResourceEntry], virtual_directory: str) -> None:
    """Display entries as a Rich table."""
    table = create_entry_table(f"Resources under {escape(virtual_directory)}")
    for entry in entries:
        table.add_row(escape(entry.parent or "."), escape(entry.name))
    console.print(table)


def _export_result(result: EnumerationResult, export_path: Path, quiet: bool) -> None:
    """Write the result to a JSON file.

    Raises:
        typer.Exit: If the path is a directory or cannot be written.
    """
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {escape(str(export_path))}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(result.to_dict(), indent=2))
    except OSError as e:
        print_error(f"Failed to export: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if not quiet:
        print_info(f"Results exported to {escape(str(export_path))}")
