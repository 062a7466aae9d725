"""Hierarchical exception types for the Jackett search client."""

from __future__ import annotations


class JackettError(Exception):
    """Base exception for all jackett-search errors."""


# ── Operation failures ─────────────────────────────────────────


class TransportError(JackettError):
    """Connection, send or read failed before a full response arrived."""


class HttpStatusError(JackettError):
    """Jackett answered with a non-success status code."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Jackett returned {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body


class DecodeError(JackettError):
    """Response body was not JSON or did not match the results schema."""


# ── Per-record outcomes ────────────────────────────────────────


class ParseError(JackettError):
    """Release name could not be parsed into structured metadata."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"failed to parse torrent name {name!r}: {reason}")
        self.name = name
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.name, self.reason) == (other.name, other.reason)

    def __hash__(self) -> int:
        return hash((self.name, self.reason))
