"""
Functions for formatting and displaying catalog data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from musicbrainz_cli.models.entities import (
    Artist,
    ArtistSearchResult,
    Recording,
    RecordingSearchResult,
    Release,
    ReleaseSearchResult,
)
from musicbrainz_cli.utils.formatting import (
    format_duration,
    format_life_span,
    format_track_length,
)


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "RateLimitExceededError": [
            "• MusicBrainz is overloaded or throttling this client.",
            "• Wait a minute and try again.",
            "• Make sure your User-Agent identifies your application.",
        ],
        "NotFoundError": [
            "• Check the MBID; it may have been merged into another entity.",
            "• Search for the entity first to find its current MBID.",
        ],
        "InvalidMbidError": [
            "• MBIDs are UUIDs, e.g. 5b11f4ce-a62d-471e-81fc-a69a8278c7da.",
        ],
        "TransportError": [
            "• A network connection issue occurred.",
            "• Check your internet connection.",
            "• Increase `timeout` in the configuration file.",
        ],
        "ApiError": [
            "• MusicBrainz rejected the request.",
            "• Check the query syntax (Lucene) and try again.",
        ],
        "ParseError": [
            "• The response did not match the expected format.",
            "• The MusicBrainz API may have changed; try again later.",
        ],
        "ConfigurationError": [
            "• Run `musicbrainz-cli init --force` to rewrite the configuration.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config_data: dict[str, Any]):
    """Displays the current configuration."""
    console = Console()
    content = ""
    for key, value in config_data.items():
        content += f"{key} = {escape(str(value))}\n"

    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{escape(str(config_path))}[/dim])",
            border_style="cyan",
        )
    )


def _text(value: str | None) -> str:
    """Escapes catalog text for Rich markup; empty values become a dash."""
    return escape(value) if value else "-"


def _results_title(kind: str, count: int, offset: int, shown: int) -> str:
    if not shown:
        return f"{kind}: no results"
    return f"{kind} {offset + 1}–{offset + shown} of {count}"


def print_recording_results(result: RecordingSearchResult):
    """Displays a page of recording search hits."""
    console = Console()
    table = Table(
        title=_results_title(
            "Recordings", result.count, result.offset, len(result.recordings)
        ),
        box=box.SIMPLE_HEAVY,
    )
    table.add_column("Score", justify="right", style="green")
    table.add_column("Title", style="bold")
    table.add_column("Artist", style="cyan")
    table.add_column("Length", justify="right")
    table.add_column("First Released", style="dim")
    table.add_column("MBID", style="dim")

    for hit in result.recordings:
        table.add_row(
            str(hit.score),
            escape(hit.title),
            _text(hit.artist_credit_phrase),
            format_track_length(hit.length),
            _text(hit.first_release_date),
            str(hit.id),
        )
    console.print(table)


def print_artist_results(result: ArtistSearchResult):
    """Displays a page of artist search hits."""
    console = Console()
    table = Table(
        title=_results_title(
            "Artists", result.count, result.offset, len(result.artists)
        ),
        box=box.SIMPLE_HEAVY,
    )
    table.add_column("Score", justify="right", style="green")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Country")
    table.add_column("Active", style="dim")
    table.add_column("MBID", style="dim")

    for hit in result.artists:
        name = escape(hit.name)
        if hit.disambiguation:
            name += f" [dim]({escape(hit.disambiguation)})[/dim]"
        life_span = hit.life_span
        table.add_row(
            str(hit.score),
            name,
            _text(hit.artist_type),
            _text(hit.country),
            (
                escape(format_life_span(life_span.begin, life_span.end))
                if life_span
                else "-"
            ),
            str(hit.id),
        )
    console.print(table)


def print_release_results(result: ReleaseSearchResult):
    """Displays a page of release search hits."""
    console = Console()
    table = Table(
        title=_results_title(
            "Releases", result.count, result.offset, len(result.releases)
        ),
        box=box.SIMPLE_HEAVY,
    )
    table.add_column("Score", justify="right", style="green")
    table.add_column("Title", style="bold")
    table.add_column("Artist", style="cyan")
    table.add_column("Type")
    table.add_column("Date", style="dim")
    table.add_column("Country")
    table.add_column("MBID", style="dim")

    for hit in result.releases:
        group = hit.release_group
        table.add_row(
            str(hit.score),
            escape(hit.title),
            _text(hit.artist_credit_phrase),
            _text(group.primary_type if group else None),
            _text(hit.date),
            _text(hit.country),
            str(hit.id),
        )
    console.print(table)


def _details_table() -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan", justify="right")
    table.add_column()
    return table


def print_recording(recording: Recording):
    """Displays a recording lookup."""
    console = Console()
    table = _details_table()
    table.add_row("Artist:", _text(recording.artist_credit_phrase))
    table.add_row("Length:", format_track_length(recording.length))
    table.add_row("First Released:", _text(recording.first_release_date))
    if recording.disambiguation:
        table.add_row("Note:", escape(recording.disambiguation))
    table.add_row("MBID:", f"[dim]{recording.id}[/dim]")

    if recording.releases:
        table.add_row("", "")
        table.add_row(
            "Releases:",
            "\n".join(
                f"{escape(r.title)} [dim]({escape(r.date or '?')}, "
                f"{escape(r.country or '?')})[/dim]"
                for r in recording.releases
            ),
        )

    console.print(
        Panel(
            table,
            title=f"🎵 [bold]{escape(recording.title)}[/bold]",
            border_style="green",
        )
    )


def print_artist(artist: Artist):
    """Displays an artist lookup."""
    console = Console()
    table = _details_table()
    table.add_row("Sort Name:", _text(artist.sort_name))
    table.add_row("Type:", _text(artist.artist_type))
    table.add_row("Country:", _text(artist.country))
    if artist.life_span:
        table.add_row(
            "Active:",
            escape(format_life_span(artist.life_span.begin, artist.life_span.end)),
        )
    if artist.disambiguation:
        table.add_row("Note:", escape(artist.disambiguation))
    table.add_row("MBID:", f"[dim]{artist.id}[/dim]")
    table.add_row("", "")
    table.add_row("Recordings:", str(len(artist.recordings)))
    table.add_row("Releases:", str(len(artist.releases)))

    total_ms = sum(r.length or 0 for r in artist.recordings)
    if total_ms:
        table.add_row("Total Length:", format_duration(total_ms / 1000))

    console.print(
        Panel(
            table,
            title=f"🎤 [bold]{escape(artist.name)}[/bold]",
            border_style="green",
        )
    )


def print_release(release: Release):
    """Displays a release lookup."""
    console = Console()
    table = _details_table()
    table.add_row("Artist:", _text(release.artist_credit_phrase))
    table.add_row("Status:", _text(release.status))
    table.add_row("Date:", _text(release.date))
    table.add_row("Country:", _text(release.country))
    if release.release_group:
        group = release.release_group
        table.add_row(
            "Release Group:",
            f"{_text(group.title)} ({escape(group.primary_type or '?')})",
        )
    table.add_row("MBID:", f"[dim]{release.id}[/dim]")

    console.print(
        Panel(
            table,
            title=f"💿 [bold]{escape(release.title)}[/bold]",
            border_style="green",
        )
    )
