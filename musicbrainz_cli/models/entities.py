"""
Pydantic models for MusicBrainz catalog entities.

Wire payloads use hyphenated keys (`sort-name`, `artist-credit`, ...). Each
model maps them to snake_case attributes through field aliases. Unknown keys
are ignored and missing optional keys default to None or an empty list.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    """Common configuration for all catalog entities."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class ArtistRef(CatalogModel):
    """Reference to an artist, as nested inside other entities."""

    id: UUID
    name: str
    sort_name: Optional[str] = Field(default=None, alias="sort-name")
    disambiguation: Optional[str] = None


class ArtistCredit(CatalogModel):
    """One credited artist on a recording or release."""

    name: str
    artist: ArtistRef
    joinphrase: str = ""


class CreditedEntity(CatalogModel):
    artist_credit: list[ArtistCredit] = Field(
        default_factory=list, alias="artist-credit"
    )

    @property
    def artist_credit_phrase(self) -> str:
        """Renders the credits the way MusicBrainz displays them."""
        return "".join(f"{c.name}{c.joinphrase}" for c in self.artist_credit)


class LifeSpan(CatalogModel):
    begin: Optional[str] = None
    end: Optional[str] = None
    ended: Optional[bool] = None


class ReleaseGroupRef(CatalogModel):
    id: UUID
    title: Optional[str] = None
    primary_type: Optional[str] = Field(default=None, alias="primary-type")


class RecordingRef(CatalogModel):
    id: UUID
    title: str
    length: Optional[int] = None
    disambiguation: Optional[str] = None


class ReleaseRef(CatalogModel):
    id: UUID
    title: str
    status: Optional[str] = None
    date: Optional[str] = None
    country: Optional[str] = None
    release_group: Optional[ReleaseGroupRef] = Field(
        default=None, alias="release-group"
    )


class Artist(CatalogModel):
    """Full artist entity returned by a lookup with recordings and releases."""

    id: UUID
    name: str
    sort_name: Optional[str] = Field(default=None, alias="sort-name")
    artist_type: Optional[str] = Field(default=None, alias="type")
    country: Optional[str] = None
    disambiguation: Optional[str] = None
    life_span: Optional[LifeSpan] = Field(default=None, alias="life-span")
    recordings: list[RecordingRef] = Field(default_factory=list)
    releases: list[ReleaseRef] = Field(default_factory=list)


class Recording(CreditedEntity):
    """Full recording entity returned by a lookup with artists and releases."""

    id: UUID
    title: str
    length: Optional[int] = None
    disambiguation: Optional[str] = None
    first_release_date: Optional[str] = Field(
        default=None, alias="first-release-date"
    )
    releases: list[ReleaseRef] = Field(default_factory=list)


class Release(CreditedEntity):
    """Full release entity returned by a lookup with artists."""

    id: UUID
    title: str
    status: Optional[str] = None
    date: Optional[str] = None
    country: Optional[str] = None
    release_group: Optional[ReleaseGroupRef] = Field(
        default=None, alias="release-group"
    )


# Search results


class RecordingSearchHit(CreditedEntity):
    id: UUID
    score: int
    title: str
    length: Optional[int] = None
    first_release_date: Optional[str] = Field(
        default=None, alias="first-release-date"
    )
    releases: list[ReleaseRef] = Field(default_factory=list)


class ArtistSearchHit(CatalogModel):
    id: UUID
    score: int
    name: str
    sort_name: Optional[str] = Field(default=None, alias="sort-name")
    artist_type: Optional[str] = Field(default=None, alias="type")
    country: Optional[str] = None
    disambiguation: Optional[str] = None
    life_span: Optional[LifeSpan] = Field(default=None, alias="life-span")


class ReleaseSearchHit(CreditedEntity):
    id: UUID
    score: int
    title: str
    status: Optional[str] = None
    date: Optional[str] = None
    country: Optional[str] = None
    release_group: Optional[ReleaseGroupRef] = Field(
        default=None, alias="release-group"
    )


class RecordingSearchResult(CatalogModel):
    """A page of recording search hits, ordered by score."""

    created: Optional[str] = None
    count: int
    offset: int
    recordings: list[RecordingSearchHit]


class ArtistSearchResult(CatalogModel):
    """A page of artist search hits, ordered by score."""

    created: Optional[str] = None
    count: int
    offset: int
    artists: list[ArtistSearchHit]


class ReleaseSearchResult(CatalogModel):
    """A page of release search hits, ordered by score."""

    created: Optional[str] = None
    count: int
    offset: int
    releases: list[ReleaseSearchHit]
