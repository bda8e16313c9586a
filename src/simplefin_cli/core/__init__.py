"""
Core functionality for the SimpleFIN CLI.
"""

from simplefin_cli.core.client import SimpleFinClient
from simplefin_cli.core.correlator import correlate_errors
from simplefin_cli.core.decoder import decode_payload, serialize_document
from simplefin_cli.core.exceptions import (
    ConfigurationError,
    HTTPStatusError,
    MalformedPayload,
    PersistenceError,
    SimpleFinError,
    TransportError,
)
from simplefin_cli.core.storage import write_document

__all__ = [
    "SimpleFinClient",
    "correlate_errors",
    "decode_payload",
    "serialize_document",
    "write_document",
    "SimpleFinError",
    "ConfigurationError",
    "HTTPStatusError",
    "MalformedPayload",
    "PersistenceError",
    "TransportError",
]
