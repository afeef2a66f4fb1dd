"""
Purpose:
- Small exception hierarchy for the search service.
- Callers isolate DownstreamError per site, StorageError per user lookup;
  anything else bubbles to the route and becomes a 500.
"""

from __future__ import annotations


class SearchAppError(Exception):
    """Base class for errors raised by this service."""

    def __init__(self, message: str, *, source: str | None = None):
        super().__init__(message)
        self.message = message
        self.source = source


class ConfigError(SearchAppError):
    """Resource site config could not be read or parsed."""


class DownstreamError(SearchAppError):
    """A resource site failed, timed out, or returned an unusable body."""


class StorageError(SearchAppError):
    """User settings store is misconfigured or its data is unreadable."""
