"""
Registry Errors
Error taxonomy surfaced by the registry and its adapters.
Every error carries a human-readable reason string.
"""
from typing import Optional


class RegistryError(Exception):
    """Base class for all employee registry errors."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ValidationError(RegistryError):
    """Bad input shape or range (empty name, age out of range, ...)."""


class NotFoundError(RegistryError):
    """The target of an id-based lookup, update or delete is absent."""

    def __init__(self, reason: str, employee_id: Optional[str] = None):
        super().__init__(reason)
        self.employee_id = employee_id


class ExternalSourceError(RegistryError):
    """The import source is unreachable or returned a malformed response."""
