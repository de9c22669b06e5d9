"""
Shared fixtures for the musicbrainz-cli test suite.
"""

import json
from typing import Union

import pytest

from musicbrainz_cli.api.transport import TransportResponse

RICK_ASTLEY_ID = "db92a151-1ac2-438b-bc43-b82e149ddd50"
RECORDING_ID = "8f3471b5-7e6a-48da-86a9-c1c07a0f47ae"
RELEASE_ID = "c0c5b3b9-5e19-4d39-b7a3-8d1a8c1b4c0e"
RELEASE_GROUP_ID = "4a3a3d7c-4c1f-3e8c-9b2f-6c7a1b0d3e11"


class FakeTransport:
    """Replays scripted responses and records every requested URL."""

    def __init__(self, *responses: Union[TransportResponse, Exception]):
        self._responses = list(responses)
        self.urls: list[str] = []
        self.closed = False

    @property
    def calls(self) -> int:
        return len(self.urls)

    async def get(self, url: str) -> TransportResponse:
        self.urls.append(url)
        if len(self._responses) > 1:
            response = self._responses.pop(0)
        else:
            response = self._responses[0]
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True


class RecordingSleep:
    """Stands in for asyncio.sleep and records requested durations."""

    def __init__(self):
        self.durations: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.durations.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.durations)


def json_response(payload: dict, status: int = 200) -> TransportResponse:
    return TransportResponse(status=status, body=json.dumps(payload).encode("utf-8"))


def status_response(status: int, body: bytes = b"") -> TransportResponse:
    return TransportResponse(status=status, body=body)


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def artist_credit_payload():
    return [
        {
            "name": "Rick Astley",
            "joinphrase": " & ",
            "artist": {
                "id": RICK_ASTLEY_ID,
                "name": "Rick Astley",
                "sort-name": "Astley, Rick",
            },
        },
        {
            "name": "Friends",
            "artist": {
                "id": "0b1f3e8d-2d1c-4b7e-9a0e-5e6f7a8b9c0d",
                "name": "Friends",
            },
        },
    ]


@pytest.fixture
def recording_search_payload(artist_credit_payload):
    return {
        "created": "2024-01-15T12:00:00.000Z",
        "count": 312,
        "offset": 0,
        "recordings": [
            {
                "id": RECORDING_ID,
                "score": 100,
                "title": "Never Gonna Give You Up",
                "length": 213573,
                "first-release-date": "1987-07-27",
                "artist-credit": artist_credit_payload,
                "releases": [
                    {
                        "id": RELEASE_ID,
                        "title": "Whenever You Need Somebody",
                        "status": "Official",
                        "date": "1987-11-16",
                        "country": "GB",
                        "release-group": {
                            "id": RELEASE_GROUP_ID,
                            "title": "Whenever You Need Somebody",
                            "primary-type": "Album",
                        },
                    }
                ],
                "video": None,
            }
        ],
    }


@pytest.fixture
def artist_search_payload():
    return {
        "created": "2024-01-15T12:00:00.000Z",
        "count": 1,
        "offset": 0,
        "artists": [
            {
                "id": RICK_ASTLEY_ID,
                "score": 100,
                "name": "Rick Astley",
                "sort-name": "Astley, Rick",
                "type": "Person",
                "country": "GB",
                "life-span": {"begin": "1966-02-06", "ended": None},
            }
        ],
    }


@pytest.fixture
def release_search_payload(artist_credit_payload):
    return {
        "count": 1,
        "offset": 5,
        "releases": [
            {
                "id": RELEASE_ID,
                "score": 97,
                "title": "Whenever You Need Somebody",
                "date": "1987-11-16",
                "artist-credit": artist_credit_payload[:1],
                "release-group": {"id": RELEASE_GROUP_ID, "primary-type": "Album"},
            }
        ],
    }


@pytest.fixture
def artist_lookup_payload():
    return {
        "id": RICK_ASTLEY_ID,
        "name": "Rick Astley",
        "sort-name": "Astley, Rick",
        "type": "Person",
        "country": "GB",
        "disambiguation": "",
        "life-span": {"begin": "1966-02-06", "end": None, "ended": False},
        "recordings": [
            {"id": RECORDING_ID, "title": "Never Gonna Give You Up", "length": 213573}
        ],
        "releases": [{"id": RELEASE_ID, "title": "Whenever You Need Somebody"}],
    }
