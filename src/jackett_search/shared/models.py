"""Frozen Pydantic models returned to callers."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel

from jackett_search.shared.enums import Audio, Codec, Quality, Resolution


class Metadata(BaseModel):
    """Structured fields recovered from a free-text release name."""

    model_config = {"frozen": True}

    title: str
    year: int | None = None
    season: int | None = None
    episode: int | None = None
    resolution: Resolution | None = None
    quality: Quality | None = None
    codec: Codec | None = None
    audio: Audio | None = None


class Torrent(BaseModel):
    """A normalized search result."""

    model_config = {"frozen": True}

    name: str
    size: int
    categories: tuple[int, ...]
    link: str
    seeders: int | None = None
    peers: int | None = None
    minimum_ratio: float | None = None
    minimum_seed_time: timedelta | None = None
    metadata: Metadata | None = None
