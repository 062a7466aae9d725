"""Wire-format models mirroring Jackett's JSON results payload."""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any

from pydantic import BaseModel, Field, NonNegativeInt, ValidationError

from jackett_search.shared.exceptions import DecodeError

U32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
U64 = Annotated[int, Field(ge=0, le=2**64 - 1)]
# Longest seed time a timedelta can hold
SeedSeconds = Annotated[int, Field(ge=0, le=timedelta.max // timedelta(seconds=1))]


class WireTorrent(BaseModel):
    """One entry of ``Results`` exactly as Jackett reports it.

    Unknown fields (``Tracker``, ``Guid``, ``PublishDate`` ...) are ignored;
    ``null`` and a missing key are equivalent for the optional ones.
    """

    model_config = {"frozen": True, "populate_by_name": True, "strict": True}

    name: str = Field(alias="Title")
    size: U64 = Field(alias="Size")
    categories: list[U32] = Field(alias="Category")
    link: str = Field(alias="Link")
    seeders: NonNegativeInt | None = Field(default=None, alias="Seeders")
    peers: NonNegativeInt | None = Field(default=None, alias="Peers")
    minimum_ratio: float | None = Field(default=None, alias="MinimumRatio")
    minimum_seed_time: SeedSeconds | None = Field(default=None, alias="MinimumSeedTime")

    def torrent_fields(self) -> dict[str, Any]:
        """Field mapping shared by every conversion strategy."""
        return {
            "name": self.name,
            "size": self.size,
            "categories": tuple(self.categories),
            "link": self.link,
            "seeders": self.seeders,
            "peers": self.peers,
            "minimum_ratio": self.minimum_ratio,
            "minimum_seed_time": (
                timedelta(seconds=self.minimum_seed_time) if self.minimum_seed_time is not None else None
            ),
        }


class QueryResult(BaseModel):
    """Top-level results envelope; ``Indexers`` and friends are ignored."""

    model_config = {"frozen": True, "populate_by_name": True, "strict": True}

    results: list[WireTorrent] = Field(alias="Results")


def decode_query_result(body: bytes | str) -> QueryResult:
    """Decode a raw response body.

    Raises:
        DecodeError: If the body is not JSON or does not match the results schema.
    """
    try:
        return QueryResult.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(f"invalid Jackett response: {exc.error_count()} error(s): {exc}") from exc
