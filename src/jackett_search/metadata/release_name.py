"""Regex-based parsing of scene-style release names."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TypeVar

from jackett_search.shared.enums import Audio, Codec, Quality, Resolution
from jackett_search.shared.exceptions import ParseError
from jackett_search.shared.models import Metadata

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


def _tag(pattern: str) -> re.Pattern[str]:
    # Tags must not be glued to other letters or digits ("x264" inside "x2645" is not a tag)
    return re.compile(rf"(?<![a-z0-9])(?:{pattern})(?![a-z0-9])", re.IGNORECASE)


_SEASON_EPISODE_RE = re.compile(r"(?<![a-z0-9])s(\d{1,2})(?:e(\d{1,3}))?(?![a-z0-9])", re.IGNORECASE)
_YEAR_RE = re.compile(r"(?<![a-z0-9])(19\d{2}|20\d{2})(?![a-z0-9])", re.IGNORECASE)

_RESOLUTIONS: list[tuple[re.Pattern[str], Resolution]] = [
    (_tag(r"2160p|4k|uhd"), Resolution.UHD_2160),
    (_tag(r"1080[pi]"), Resolution.HD_1080),
    (_tag(r"720p"), Resolution.HD_720),
    (_tag(r"576p"), Resolution.SD_576),
    (_tag(r"480p"), Resolution.SD_480),
]

# Order matters: a "BluRay REMUX" is a remux, a "WEB-DL" is not a "WEBRip".
_QUALITIES: list[tuple[re.Pattern[str], Quality]] = [
    (_tag(r"remux"), Quality.REMUX),
    (_tag(r"blu[ -]?ray|bdrip|brrip|bdremux"), Quality.BLURAY),
    (_tag(r"web[ -]?dl|webdl"), Quality.WEB_DL),
    (_tag(r"web[ -]?rip"), Quality.WEBRIP),
    (_tag(r"hdtv|pdtv"), Quality.HDTV),
    (_tag(r"dvd[ -]?rip"), Quality.DVDRIP),
    (_tag(r"hd[ -]?ts|telesync|ts"), Quality.TELESYNC),
    (_tag(r"hd[ -]?cam|cam[ -]?rip|cam"), Quality.CAM),
]

_CODECS: list[tuple[re.Pattern[str], Codec]] = [
    (_tag(r"[xh] ?265|hevc"), Codec.H265),
    (_tag(r"[xh] ?264|avc"), Codec.H264),
    (_tag(r"xvid|divx"), Codec.XVID),
    (_tag(r"av1"), Codec.AV1),
]

# Optional channel layout glued to the codec: "DDP5.1", "AAC2.0" (dots are already spaces)
_CHANNELS = r"(?:\d(?: \d)?)?"

_AUDIO: list[tuple[re.Pattern[str], Audio]] = [
    (_tag(r"truehd|atmos"), Audio.TRUEHD),
    (_tag(r"dts(?:[ -]?hd)?(?:[ -]?ma)?"), Audio.DTS),
    (_tag(rf"(?:ddp|dd\+){_CHANNELS}|e-?ac-?3"), Audio.EAC3),
    (_tag(rf"ac-?3|dd{_CHANNELS}"), Audio.AC3),
    (_tag(rf"aac{_CHANNELS}"), Audio.AAC),
    (_tag(r"flac"), Audio.FLAC),
    (_tag(r"mp3"), Audio.MP3),
]


def _first(candidates: list[tuple[re.Pattern[str], _E]], text: str) -> tuple[_E | None, int | None]:
    """Return the first matching enum member and where its tag starts."""
    for pattern, member in candidates:
        match = pattern.search(text)
        if match:
            return member, match.start()
    return None, None


def _clean_title(raw: str) -> str:
    title = re.sub(r"\s+", " ", raw).strip(" -[](){}")
    return title.strip()


def parse_release_name(name: str) -> Metadata:
    """Parse a release name such as ``Show.Name.S01E02.720p.WEBRip.x264-GRP``.

    Dots and underscores are treated as word separators. The title is whatever
    precedes the first recognised marker (season/episode, year or a tag).

    Args:
        name: Free-text release name as reported by the indexer.

    Returns:
        Parsed ``Metadata``.

    Raises:
        ParseError: If the name is blank, carries no resolution, quality or codec
            tag, or has no title in front of its tags.
    """
    text = re.sub(r"[._]", " ", name).strip()
    if not text:
        raise ParseError(name, "empty release name")

    resolution, resolution_at = _first(_RESOLUTIONS, text)
    quality, quality_at = _first(_QUALITIES, text)
    codec, codec_at = _first(_CODECS, text)
    audio, audio_at = _first(_AUDIO, text)

    if resolution is None and quality is None and codec is None:
        raise ParseError(name, "no resolution, quality or codec tag")

    season = episode = None
    season_at = None
    se_match = _SEASON_EPISODE_RE.search(text)
    if se_match:
        season = int(se_match.group(1))
        episode = int(se_match.group(2)) if se_match.group(2) is not None else None
        season_at = se_match.start()

    year = None
    year_at = None
    # A leading year is part of the title ("2012 2009 1080p"), so skip position 0
    for year_match in _YEAR_RE.finditer(text):
        if year_match.start() > 0:
            year = int(year_match.group(1))
            year_at = year_match.start()
            break

    markers = [pos for pos in (season_at, year_at, resolution_at, quality_at, codec_at, audio_at) if pos is not None]
    title = _clean_title(text[: min(markers)])
    if not title:
        raise ParseError(name, "no title before release tags")

    return Metadata(
        title=title,
        year=year,
        season=season,
        episode=episode,
        resolution=resolution,
        quality=quality,
        codec=codec,
        audio=audio,
    )


def try_parse_release_name(name: str) -> Metadata | None:
    """Best-effort variant of ``parse_release_name`` that returns ``None`` on failure."""
    try:
        return parse_release_name(name)
    except ParseError as exc:
        logger.debug("no metadata for %r: %s", name, exc.reason)
        return None
