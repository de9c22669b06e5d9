"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application: client configuration and the MusicBrainz
catalog entities.
"""

from .config import ClientConfig
from .entities import (
    Artist,
    ArtistCredit,
    ArtistRef,
    ArtistSearchHit,
    ArtistSearchResult,
    LifeSpan,
    Recording,
    RecordingRef,
    RecordingSearchHit,
    RecordingSearchResult,
    Release,
    ReleaseGroupRef,
    ReleaseRef,
    ReleaseSearchHit,
    ReleaseSearchResult,
)
from .status import DownloadStatus

__all__ = [
    "Artist",
    "ArtistCredit",
    "ArtistRef",
    "ArtistSearchHit",
    "ArtistSearchResult",
    "ClientConfig",
    "DownloadStatus",
    "LifeSpan",
    "Recording",
    "RecordingRef",
    "RecordingSearchHit",
    "RecordingSearchResult",
    "Release",
    "ReleaseGroupRef",
    "ReleaseRef",
    "ReleaseSearchHit",
    "ReleaseSearchResult",
]
