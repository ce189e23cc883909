"""Error types shared by the memory adapter and the config manager."""

from __future__ import annotations


class SupaclawError(Exception):
    """Base class for all supaclaw errors."""


class ConfigurationError(SupaclawError):
    """Backend URL or service-role key is missing."""


class RemoteError(SupaclawError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"Supabase request failed ({status}): {body}")


class NotFoundError(SupaclawError):
    """A record the operation depends on does not exist."""


class ParseError(SupaclawError):
    """A ``path=value`` command argument could not be parsed."""

    def __init__(self, argument: str, reason: str = "Use section.key=value") -> None:
        self.argument = argument
        super().__init__(f"Invalid format: {argument}. {reason}")
