"""
Tests for Rich rendering of catalog data.
"""

import io

import pytest
from rich.console import Console

from musicbrainz_cli.cli import formatters
from musicbrainz_cli.models import ArtistSearchResult, Recording

from .conftest import RECORDING_ID, RELEASE_ID, RICK_ASTLEY_ID


@pytest.fixture
def captured(monkeypatch):
    """Routes every Console the formatters create into one buffer."""
    buffer = io.StringIO()

    def make_console(*args, **kwargs):
        return Console(file=buffer, width=200, color_system=None)

    monkeypatch.setattr(formatters, "Console", make_console)
    return buffer


def artist_results(name: str, disambiguation: str | None = None) -> ArtistSearchResult:
    return ArtistSearchResult.model_validate(
        {
            "count": 1,
            "offset": 0,
            "artists": [
                {
                    "id": RICK_ASTLEY_ID,
                    "score": 100,
                    "name": name,
                    "disambiguation": disambiguation,
                    "life-span": {"begin": "[1966]"},
                }
            ],
        }
    )


def recording(title: str, credited: str) -> Recording:
    return Recording.model_validate(
        {
            "id": RECORDING_ID,
            "title": title,
            "disambiguation": "[live]",
            "artist-credit": [
                {"name": credited, "artist": {"id": RICK_ASTLEY_ID, "name": credited}}
            ],
            "releases": [{"id": RELEASE_ID, "title": "[untitled]", "country": "[XW]"}],
        }
    )


class TestCatalogTextIsNotMarkup:
    """Bracketed catalog names are shown literally, never parsed as Rich tags."""

    @pytest.mark.parametrize("name", ["[unknown]", "Foo [/bar]", "[b]old"])
    def test_artist_results_show_names_verbatim(self, captured, name):
        formatters.print_artist_results(artist_results(name, disambiguation="[x]"))

        out = captured.getvalue()
        assert name in out
        assert "([x])" in out
        assert "[1966]" in out

    @pytest.mark.parametrize(
        ("title", "credited"), [("[untitled]", "[unknown]"), ("Foo [/bar]", "A [/b]")]
    )
    def test_recording_shows_title_and_credits_verbatim(
        self, captured, title, credited
    ):
        formatters.print_recording(recording(title, credited))

        out = captured.getvalue()
        assert title in out
        assert credited in out
        assert "[live]" in out
        assert "[untitled]" in out
        assert "[XW]" in out

    def test_config_values_are_shown_verbatim(self, captured, tmp_path):
        formatters.print_config(
            tmp_path / "config.ini", {"user_agent": "App/1.0 [/beta]"}
        )

        assert "App/1.0 [/beta]" in captured.getvalue()
