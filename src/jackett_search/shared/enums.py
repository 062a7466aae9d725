"""Release-name metadata enumerations."""

from __future__ import annotations

from enum import Enum, unique


@unique
class Resolution(str, Enum):
    """Vertical video resolution advertised in a release name."""

    SD_480 = "480p"
    SD_576 = "576p"
    HD_720 = "720p"
    HD_1080 = "1080p"
    UHD_2160 = "2160p"


@unique
class Quality(str, Enum):
    """Source the release was captured or ripped from."""

    CAM = "cam"
    TELESYNC = "telesync"
    HDTV = "hdtv"
    DVDRIP = "dvdrip"
    WEBRIP = "webrip"
    WEB_DL = "web-dl"
    BLURAY = "bluray"
    REMUX = "remux"


@unique
class Codec(str, Enum):
    """Video codec."""

    XVID = "xvid"
    H264 = "h264"
    H265 = "h265"
    AV1 = "av1"


@unique
class Audio(str, Enum):
    """Audio codec."""

    MP3 = "mp3"
    AAC = "aac"
    AC3 = "ac3"
    EAC3 = "eac3"
    DTS = "dts"
    TRUEHD = "truehd"
    FLAC = "flac"
