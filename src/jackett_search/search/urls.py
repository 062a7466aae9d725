"""Query URL construction for the Jackett results endpoint."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from urllib.parse import quote

# Torznab category codes understood by Jackett
MOVIE_CATEGORIES: tuple[str, ...] = ("2000", "2010", "2030", "2040", "2045", "2050", "2060", "2070", "2080")
TV_CATEGORIES: tuple[str, ...] = ("5000", "5010", "5020", "5030", "5040", "5060", "5070", "5080")
AUDIO_CATEGORIES: tuple[str, ...] = ("3000", "3010", "3020", "3030", "3040", "3050")


def _encode(value: str) -> str:
    # Only RFC 3986 unreserved characters stay literal; space becomes %20, not "+"
    return quote(value, safe="")


def encode_categories(categories: Iterable[str]) -> list[str]:
    """Percent-encode caller-supplied category codes, keeping their order."""
    return [_encode(code) for code in categories]


def category_parameters(categories: Iterable[str]) -> str:
    """Render each (already encoded) code as a repeated ``&Category[]=`` segment."""
    return "".join(f"&Category[]={code}" for code in categories)


def build_url(base_url: str, api_key: str, query: str, categories: Sequence[str] | None = None) -> str:
    """Build a fully-formed Jackett search URL.

    ``base_url`` and ``api_key`` are inserted verbatim, ``query`` is
    percent-encoded, and ``categories`` are expected to be encoded already.
    """
    return f"{base_url}?apikey={api_key}&Query={_encode(query)}{category_parameters(categories or ())}"
