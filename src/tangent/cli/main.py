"""Tangent CLI - run File Bridge commands and the bridge server."""

from __future__ import annotations

import json
import sys
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from tangent import __version__
from tangent.bridge import BridgeError, invoke
from tangent.client import BridgeClient, notebook_display_name, now_ms
from tangent.models.recent import RecentFileList
from tangent.utils.config import get_settings
from tangent.utils.log import configure_logging

console = Console()
err_console = Console(stderr=True)

api_option = click.option(
    "--api", default=None, help="Bridge server URL (runs commands locally if not specified)"
)


def _call(api: str | None, command: str, **args: Any) -> Any:
    """Run a bridge command locally or through the server, exiting on failure."""
    try:
        if api:
            with BridgeClient(base_url=api) as client:
                return client.invoke(command, **args)
        return invoke(command, args)
    except BridgeError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="tangent")
@click.option("--verbose", "-v", is_flag=True, help="Log bridge activity")
def cli(verbose: bool) -> None:
    """Tangent - file bridge for the Tangent notebook app.

    \b
    Notebook Files:
        read <path>              Print a notebook file
        write <path>             Write stdin (or --input) to a notebook file
        save-dir                 Print (and create) the default save directory

    \b
    Recent Files:
        recent list              Show recently opened notebooks
        recent add <path>        Record a notebook as recently opened

    \b
    Server:
        serve                    Run the bridge server for the UI shell
    """
    configure_logging(verbose or get_settings().debug)


@cli.command("read")
@click.argument("path")
@api_option
def read(path: str, api: str | None) -> None:
    """Print the contents of a notebook file.

    Example:
        tangent read ~/Documents/Tangent\\ Notebooks/climate.js
    """
    content = _call(api, "read_notebook_file", path=path)
    click.echo(content, nl=False)


@cli.command("write")
@click.argument("path")
@click.option("--input", "-i", "source", type=click.File("r", encoding="utf-8"), default="-",
              help="File to copy content from (default: stdin)")
@click.option("--record/--no-record", default=False, help="Also add the file to recent files")
@api_option
def write(path: str, source: Any, record: bool, api: str | None) -> None:
    """Overwrite a notebook file with new content.

    \b
    Examples:
        tangent write notes.js < draft.js
        tangent write notes.js --input draft.js --record
    """
    content = source.read()
    _call(api, "write_notebook_file", path=path, content=content)
    if record:
        _call(api, "add_recent_file", path=path, name=notebook_display_name(path), timestamp=now_ms())
    console.print(f"[green]Wrote {len(content)} characters to {path}[/green]")


@cli.command("save-dir")
@api_option
def save_dir(api: str | None) -> None:
    """Print the default save directory, creating it if missing."""
    click.echo(_call(api, "get_default_save_directory"))


@cli.group()
def recent() -> None:
    """Inspect and update the recent files list.

    \b
    Commands:
        list              Show recent files, most recent first
        add <path>        Move a file to the front of the list
    """
    pass


@recent.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output entries as JSON")
@api_option
def recent_list(as_json: bool, api: str | None) -> None:
    """Show recently opened notebooks."""
    entries = RecentFileList.validate_python(_call(api, "get_recent_files"))

    if as_json:
        click.echo(json.dumps(RecentFileList.dump_python(entries), indent=2))
        return

    if not entries:
        console.print("[dim]No recent files[/dim]")
        return

    table = Table(title="Recent Files")
    table.add_column("Name", style="cyan")
    table.add_column("Path")
    table.add_column("Timestamp", justify="right", style="dim")
    for entry in entries:
        table.add_row(entry.name, entry.path, str(entry.timestamp))
    console.print(table)


@recent.command("add")
@click.argument("path")
@click.option("--name", "-n", default=None, help="Display name (default: file name)")
@click.option("--timestamp", "-t", type=int, default=None, help="Epoch milliseconds (default: now)")
@api_option
def recent_add(path: str, name: str | None, timestamp: int | None, api: str | None) -> None:
    """Record a notebook as recently opened."""
    name = name or notebook_display_name(path)
    timestamp = timestamp if timestamp is not None else now_ms()
    _call(api, "add_recent_file", path=path, name=name, timestamp=timestamp)
    console.print(f"[green]Added {name}[/green] [dim]({path})[/dim]")


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: settings api_host)")
@click.option("--port", "-p", type=int, default=None, help="Port (default: settings api_port)")
@click.option("--reload", is_flag=True, help="Reload on code changes (development)")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the bridge server the UI shell connects to."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(f"[dim]Starting Tangent bridge on http://{host}:{port}[/dim]")
    uvicorn.run(
        "tangent.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="debug" if settings.debug else "info",
    )


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
