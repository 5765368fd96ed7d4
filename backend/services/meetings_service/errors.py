"""Exceptions raised by the meeting provider client."""

from __future__ import annotations


class ProviderClientError(Exception):
    """Base class for meeting provider client failures."""


class ConfigError(ProviderClientError):
    """A required credential or the base URL is missing or empty."""


class TransportError(ProviderClientError):
    """The HTTP exchange with the provider could not be completed."""


class DateParseError(ProviderClientError, ValueError):
    """A date-time string could not be interpreted."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"Cannot parse date-time {raw!r}: {reason}")
        self.raw = raw
        self.reason = reason


__all__ = ["ConfigError", "DateParseError", "ProviderClientError", "TransportError"]
