"""Exceptions raised while reading map documents."""

from __future__ import annotations


class IndoorMapError(Exception):
    """Base class for all map reading failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SourceUnavailableError(IndoorMapError):
    """The document could not be obtained at all (missing or unreadable)."""


class MalformedContentError(IndoorMapError):
    """The document was obtained but its content cannot be decoded."""
