"""
Helper functions for formatting catalog data into human-readable strings.
"""

from typing import Optional


def format_duration(seconds: float) -> str:
    """
    Formats a duration in seconds into a human-readable string (e.g., '2h 34m 12s').
    """
    s = int(seconds)
    hours, remainder = divmod(s, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def format_track_length(length_ms: Optional[int]) -> str:
    """Formats a MusicBrainz track length (milliseconds) as 'm:ss'."""
    if length_ms is None or length_ms < 0:
        return "-"
    minutes, secs = divmod(round(length_ms / 1000), 60)
    return f"{minutes}:{secs:02d}"


def format_life_span(begin: Optional[str], end: Optional[str]) -> str:
    """Formats an artist life span such as '1966 – 2016' or '1987 –'."""
    if not begin and not end:
        return "-"
    if not end:
        return f"{begin} –"
    return f"{begin or '?'} – {end}"
