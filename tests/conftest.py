"""Shared pytest fixtures for the jackett-search test suite."""

from __future__ import annotations

from typing import Any

import pytest

from jackett_search.config import Settings

WORST_COOKS_TITLES = [
    "Worst Cooks in America S22E00 Halloween Redemption 2 720p WEBRip x264-KOMPOST",
    "Worst Cooks in America S22E00 Halloween Redemption 2 XviD-AFG",
    "Worst Cooks in America S22E00 Halloween Redemption 2 480p x264-mSD",
]


def _link(title: str) -> str:
    return f"http://jackett.example:9117/dl/iptorrents/?jackett_apikey=abc123&path=Q2ZESjhB&file={title.replace(' ', '+')}"


def _record(title: str, guid: int, category_desc: str, categories: list[int], size: int, seeders: int) -> dict[str, Any]:
    return {
        "FirstSeen": "0001-01-01T00:00:00",
        "Tracker": "IPTorrents",
        "TrackerId": "iptorrents",
        "CategoryDesc": category_desc,
        "BlackholeLink": None,
        "Title": title,
        "Guid": f"https://iptorrents.com/t/{guid}",
        "Link": _link(title),
        "Details": f"https://iptorrents.com/t/{guid}",
        "PublishDate": "2021-09-27T05:57:24.8597709+00:00",
        "Category": categories,
        "Size": size,
        "Files": None,
        "Grabs": 20,
        "Description": "Tags: 6.4 2010 Comedy Game-Show Reality-TV Uploaded by: TvTeam",
        "RageID": None,
        "TVDBId": None,
        "Imdb": None,
        "Seeders": seeders,
        "Peers": 0,
        "InfoHash": None,
        "MagnetUri": None,
        "MinimumRatio": 1,
        "MinimumSeedTime": 1209600,
        "DownloadVolumeFactor": 1,
        "UploadVolumeFactor": 1,
        "Gain": 1.318359375,
    }


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(url="http://jackett:9117", api_key="test-key", timeout=5)


@pytest.fixture()
def worst_cooks_payload() -> dict[str, Any]:
    """Three-record response as returned by a real Jackett instance."""
    return {
        "Results": [
            _record(WORST_COOKS_TITLES[0], 4492053, "TV/WEB-DL", [5010, 100022], 930086912, 5),
            _record(WORST_COOKS_TITLES[1], 4492061, "TV/SD", [5030, 100004], 707788800, 2),
            _record(WORST_COOKS_TITLES[2], 4492066, "TV/SD", [5030, 100078], 248512512, 1),
        ],
        "Indexers": [
            {"ID": "iptorrents", "Name": "IPTorrents", "Status": 2, "Results": 255, "Error": None},
        ],
    }


@pytest.fixture()
def sparse_payload(worst_cooks_payload: dict[str, Any]) -> dict[str, Any]:
    """Same response, but the second record omits or nulls every optional field."""
    second = dict(worst_cooks_payload["Results"][1])
    for key in ("Seeders", "Peers", "MinimumRatio"):
        second.pop(key)
    second["MinimumSeedTime"] = None
    return {"Results": [worst_cooks_payload["Results"][0], second, worst_cooks_payload["Results"][2]]}
