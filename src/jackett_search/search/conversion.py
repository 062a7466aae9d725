"""Conversion strategies from wire records to ``Torrent`` results."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from jackett_search.config import Settings
from jackett_search.metadata.release_name import parse_release_name, try_parse_release_name
from jackett_search.search.interfaces import NameParser, TorrentConverter
from jackett_search.search.wire import WireTorrent
from jackett_search.shared.exceptions import ParseError
from jackett_search.shared.models import Torrent

logger = logging.getLogger(__name__)

SearchOutcome = Torrent | ParseError


class PermissiveConverter:
    """Total conversion: every record becomes a ``Torrent``.

    With ``parse_names`` enabled, metadata is attached when the release name
    parses and left unset otherwise.
    """

    def __init__(self, *, parse_names: bool = False) -> None:
        self._parse_names = parse_names

    def convert(self, records: Sequence[WireTorrent]) -> list[Torrent]:
        torrents: list[Torrent] = []
        for record in records:
            metadata = try_parse_release_name(record.name) if self._parse_names else None
            torrents.append(Torrent(**record.torrent_fields(), metadata=metadata))
        return torrents


class ValidatingConverter:
    """Per-record fallible conversion.

    Each release name goes through ``parser`` exactly once. A rejected name
    yields its ``ParseError`` in that record's slot instead of a ``Torrent``.
    """

    def __init__(self, parser: NameParser = parse_release_name) -> None:
        self._parser = parser

    def convert(self, records: Sequence[WireTorrent]) -> list[SearchOutcome]:
        outcomes: list[SearchOutcome] = []
        for record in records:
            try:
                metadata = self._parser(record.name)
            except ParseError as exc:
                logger.debug("rejected release name %r: %s", record.name, exc.reason)
                outcomes.append(exc)
                continue
            outcomes.append(Torrent(**record.torrent_fields(), metadata=metadata))
        return outcomes


def converter_for(settings: Settings) -> TorrentConverter:
    """Pick the conversion strategy configured in ``settings``."""
    if settings.require_parse_names:
        return ValidatingConverter()
    return PermissiveConverter(parse_names=settings.parse_names)
