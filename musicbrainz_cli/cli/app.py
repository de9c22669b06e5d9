"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import os
import time
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from musicbrainz_cli import __version__
from musicbrainz_cli.api.client import MusicBrainzClient
from musicbrainz_cli.exceptions import MusicBrainzCliError
from musicbrainz_cli.models.config import ClientConfig
from musicbrainz_cli.storage.config_manager import ConfigManager

from .formatters import (
    format_error_with_suggestions,
    print_artist,
    print_artist_results,
    print_config,
    print_recording,
    print_recording_results,
    print_release,
    print_release_results,
)

T = TypeVar("T")

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("musicbrainz_cli")

app = typer.Typer(
    name="musicbrainz-cli",
    help=(
        "Search and look up artists, recordings and releases on MusicBrainz. Use"
        " 'musicbrainz-cli <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "musicbrainz-cli"


def get_config_file() -> Path:
    return get_config_dir() / "config.ini"


class SearchKind(str, Enum):
    recordings = "recordings"
    artists = "artists"
    releases = "releases"


class LookupKind(str, Enum):
    recording = "recording"
    artist = "artist"
    release = "release"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """MusicBrainz catalog CLI"""
    if version:
        console.print(
            f"[bold]musicbrainz-cli[/bold] version [cyan]{__version__}[/cyan]"
        )
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("musicbrainz_cli").setLevel(log_level)

    if show_config:
        config_file = get_config_file()
        config_manager = ConfigManager(config_file)
        try:
            config_data = config_manager.get_config_as_dict()
        except MusicBrainzCliError as e:
            console.print(format_error_with_suggestions(e))
            raise typer.Exit(code=1) from e
        print_config(config_file, config_data)
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    user_agent: str = typer.Option(
        ...,
        "--user-agent",
        "-u",
        help="Identify your application, e.g. 'MyApp/1.0 (me@example.com)'.",
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration."
    ),
):
    """Create the configuration file."""
    config_file = get_config_file()
    if (
        config_file.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    try:
        ConfigManager(config_file).save_new_config({"user_agent": user_agent})
    except MusicBrainzCliError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    console.print(f"[bold green]✓ Configuration saved to '{config_file}'[/bold green]")
    console.print("Try: [cyan]musicbrainz-cli search artists 'Radiohead'[/cyan]")


def _load_config() -> ClientConfig:
    return ConfigManager(get_config_file()).load_config()


def _run_with_client(operation: Callable[[MusicBrainzClient], Awaitable[T]]) -> T:
    """Runs one client operation, closing the client afterwards."""

    async def _run_async() -> T:
        config = _load_config()
        async with MusicBrainzClient(config) as client:
            start_time = time.monotonic()
            result = await operation(client)
            log.debug(f"Request finished in {time.monotonic() - start_time:.2f}s")
            return result

    try:
        return asyncio.run(_run_async())
    except MusicBrainzCliError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e


@app.command()
def search(
    kind: SearchKind = typer.Argument(..., help="What to search for."),
    query: str = typer.Argument(..., help="Free-text (Lucene) search query."),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", min=1, help="Results per page (default 25, max 100)."
    ),
    offset: Optional[int] = typer.Option(
        None, "--offset", min=0, help="Number of results to skip."
    ),
):
    """Search the MusicBrainz catalog."""
    if kind is SearchKind.recordings:
        print_recording_results(
            _run_with_client(lambda c: c.search_recordings(query, limit, offset))
        )
    elif kind is SearchKind.artists:
        print_artist_results(
            _run_with_client(lambda c: c.search_artists(query, limit, offset))
        )
    else:
        print_release_results(
            _run_with_client(lambda c: c.search_releases(query, limit, offset))
        )


@app.command()
def lookup(
    kind: LookupKind = typer.Argument(..., help="Entity type."),
    mbid: str = typer.Argument(..., help="MusicBrainz identifier (UUID)."),
):
    """Look up a single entity by its MBID."""
    if kind is LookupKind.recording:
        print_recording(_run_with_client(lambda c: c.lookup_recording(mbid)))
    elif kind is LookupKind.artist:
        print_artist(_run_with_client(lambda c: c.lookup_artist(mbid)))
    else:
        print_release(_run_with_client(lambda c: c.lookup_release(mbid)))
