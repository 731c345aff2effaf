# osrsnav/errors.py
"""Error taxonomy for the nav client."""

from __future__ import annotations


class NavError(Exception):
    """Base class for every error raised by osrsnav."""


class TransportFailure(NavError):
    """Connection or IO level failure talking to the nav service."""


class UnexpectedStatus(NavError):
    """The nav service answered with something other than HTTP 200."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class MalformedEdge(NavError):
    """A path edge could not be decoded (bad discriminator or field)."""


class UnsupportedEncoding(NavError):
    """A scalar token had a JSON kind the codec does not accept."""


class UnknownSkill(NavError):
    """A skill name does not resolve to a known Skill."""


class UnsupportedEdge(NavError):
    """An edge type has no native vertex mapping."""
