"""
Custom exceptions for the SimpleFIN CLI.
"""

from pathlib import Path
from typing import Optional


class SimpleFinError(Exception):
    """Base exception for SimpleFIN CLI errors."""
    pass


class ConfigurationError(SimpleFinError):
    """Raised when CLI settings are invalid or missing."""
    pass


class TransportError(SimpleFinError):
    """Raised when a request cannot be sent or its response cannot be read."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class HTTPStatusError(SimpleFinError):
    """Raised when the aggregation endpoint answers with a non-200 status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(
            f"received non-OK HTTP status code {status_code} from {url}"
        )
        self.status_code = status_code
        self.url = url


class MalformedPayload(SimpleFinError):
    """Raised when a response body is not JSON or does not match the payload shape."""

    def __init__(self, message: str, field_path: Optional[str] = None):
        super().__init__(message)
        self.field_path = field_path


class PersistenceError(SimpleFinError):
    """Raised when the JSON results cannot be written to disk."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
