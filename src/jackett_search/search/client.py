"""Jackett API client for torrent indexer search."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import TracebackType
from typing import Any

import httpx

from jackett_search.config import Settings
from jackett_search.search.conversion import PermissiveConverter, converter_for
from jackett_search.search.interfaces import TorrentConverter
from jackett_search.search.urls import (
    AUDIO_CATEGORIES,
    MOVIE_CATEGORIES,
    TV_CATEGORIES,
    build_url,
    encode_categories,
)
from jackett_search.search.wire import decode_query_result
from jackett_search.shared.exceptions import HttpStatusError, TransportError

logger = logging.getLogger(__name__)


class JackettClient:
    """Search torrent indexers via Jackett's aggregated results endpoint.

    The client owns one pooled ``httpx.AsyncClient`` and never mutates its
    configuration after construction, so a single instance may serve any
    number of concurrent searches. Results come back as ``list[Torrent]`` with
    a ``PermissiveConverter`` (the default) or as ``list[Torrent | ParseError]``
    with a ``ValidatingConverter``.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        converter: TorrentConverter | None = None,
        timeout: int = 30,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self._converter: TorrentConverter = converter or PermissiveConverter()
        # A caller-supplied pool stays open on close(); the caller owns it
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept-Encoding": "gzip"},
        )
        logger.info("jackett client ready for %s (%s)", base_url, type(self._converter).__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> JackettClient:
        """Build a client from ``Settings``, choosing the conversion mode it configures."""
        return cls(
            settings.search_endpoint,
            settings.api_key,
            converter=converter_for(settings),
            timeout=settings.timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def converter(self) -> TorrentConverter:
        return self._converter

    async def close(self) -> None:
        """Close the pooled HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> JackettClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _fetch(self, query: str, categories: Sequence[str] | None) -> bytes:
        url = build_url(self._base_url, self._api_key, query, categories)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            return resp.content
        except httpx.HTTPStatusError as exc:
            raise HttpStatusError(exc.response.status_code, exc.response.text) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Jackett request failed: {exc!r}") from exc

    async def _get(self, query: str, categories: Sequence[str] | None) -> list[Any]:
        body = await self._fetch(query, categories)
        records = decode_query_result(body).results
        results = self._converter.convert(records)
        logger.info("jackett returned %d results for query=%r", len(results), query)
        return results

    async def search(self, query: str, categories: Sequence[str] | None = None) -> list[Any]:
        """Search all indexers, optionally restricted to ``categories``.

        Args:
            query: Free-text search string.
            categories: Category codes to filter on; each is percent-encoded.
                ``None`` searches every category.

        Returns:
            One item per upstream result, in upstream order.

        Raises:
            TransportError: If the request could not be sent or the response read.
            HttpStatusError: If Jackett answered with a non-2xx status.
            DecodeError: If the body is not a valid results payload.
        """
        if categories is None:
            return await self._get(query, None)
        logger.debug("searching categories %s", list(categories))
        return await self._get(query, encode_categories(categories))

    async def movie_search(self, query: str) -> list[Any]:
        """Search the built-in movie categories."""
        return await self._get(query, MOVIE_CATEGORIES)

    async def tv_search(self, query: str) -> list[Any]:
        """Search the built-in TV categories."""
        return await self._get(query, TV_CATEGORIES)

    async def audio_search(self, query: str) -> list[Any]:
        """Search the built-in audio categories."""
        return await self._get(query, AUDIO_CATEGORIES)
