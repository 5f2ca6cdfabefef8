"""Exceptions raised by the solver and its clients."""

from __future__ import annotations


class AcmeLinodeError(Exception):
    """Base class for all solver errors."""


class NoRecordError(AcmeLinodeError, LookupError):
    """No TXT record matches the requested entry."""

    def __init__(self, zone_id: int, entry: str) -> None:
        super().__init__(f"no matching DNS record found for entry '{entry}' in zone ID {zone_id}")
        self.zone_id = zone_id
        self.entry = entry


class ZoneNotFoundError(AcmeLinodeError, LookupError):
    """No Linode domain matches the requested zone."""


class InvalidSecretReference(AcmeLinodeError, ValueError):
    """A secret reference is missing its name or key."""

    def __init__(self) -> None:
        super().__init__("invalid secret reference: must contain name and key values")


class SecretLookupError(AcmeLinodeError):
    """The referenced Secret could not be read or lacks the key."""


class ConfigError(AcmeLinodeError, ValueError):
    """The per-request solver configuration could not be decoded."""


class InitializationError(AcmeLinodeError):
    """The solver could not build its cluster client."""
