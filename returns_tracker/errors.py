# returns_tracker/errors.py
"""Exception hierarchy shared by the API client, services and controllers."""

from __future__ import annotations

from typing import Dict, Optional


class ReturnsTrackerError(Exception):
    """Base class for all returns tracker errors."""
    pass


class NetworkError(ReturnsTrackerError):
    """The request never produced a response (DNS, refused, timeout...)."""
    pass


class HttpStatusError(ReturnsTrackerError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        super().__init__(message or f"HTTP error! status: {status_code}")
        self.status_code = status_code


class ApiError(ReturnsTrackerError):
    """The envelope came back with ``success=false``."""
    pass


class SchemaError(ApiError):
    """The response did not match the expected envelope shape."""
    pass


class ValidationError(ReturnsTrackerError):
    """One or more form fields are invalid. Raised before any network call."""

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("; ".join(errors.values()))
        self.errors = dict(errors)

    def for_field(self, field: str) -> Optional[str]:
        return self.errors.get(field)


class ConfigError(ReturnsTrackerError):
    """Error related to configuration."""
    pass
