"""Interfaces for the search module."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from jackett_search.search.wire import WireTorrent
from jackett_search.shared.models import Metadata


@runtime_checkable
class NameParser(Protocol):
    """Protocol for release-name metadata parsers."""

    def __call__(self, name: str) -> Metadata:
        """Parse a release name.

        Args:
            name: Free-text release name.

        Returns:
            Structured metadata.

        Raises:
            ParseError: If the name does not follow release naming conventions.
        """
        ...


@runtime_checkable
class TorrentConverter(Protocol):
    """Protocol for turning wire records into caller-facing results."""

    def convert(self, records: Sequence[WireTorrent]) -> list[Any]:
        """Convert records one-to-one, preserving order.

        Args:
            records: Decoded ``Results`` entries.

        Returns:
            One item per record, in the same order.
        """
        ...
