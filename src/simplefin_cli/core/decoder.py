"""
JSON decoder and serializer for SimpleFIN /accounts payloads.

Decoding is tolerant of missing and unknown keys but strict about JSON
types: a number where a string belongs, or a fractional timestamp, is a
malformed payload rather than something to coerce.
"""

import json
import logging
from typing import Any, Union

from pydantic import ValidationError

from simplefin_cli.core.exceptions import MalformedPayload
from simplefin_cli.models.base import PAYLOAD_CONTEXT
from simplefin_cli.models.document import FinancialDocument

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def format_field_path(loc: tuple) -> str:
    """
    Join a pydantic error location into a dotted field path.

    Args:
        loc: Location tuple such as ("accounts", 0, "balance-date")

    Returns:
        Dotted path such as "accounts.0.balance-date"
    """
    return ".".join(str(part) for part in loc)


def decode_payload(data: Union[bytes, str]) -> FinancialDocument:
    """
    Decode a response body into a FinancialDocument.

    Args:
        data: Response body, expected to be UTF-8 JSON

    Returns:
        Decoded document with every possible_error flag cleared

    Raises:
        MalformedPayload: If the body is not UTF-8 JSON, nests too deeply, or
            a field has the wrong type
    """
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        raw = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise MalformedPayload(f"error decoding JSON: {e}") from e
    except RecursionError as e:
        raise MalformedPayload("error decoding JSON: nesting too deep") from e

    try:
        document = FinancialDocument.model_validate(raw, context=PAYLOAD_CONTEXT)
    except ValidationError as e:
        first = e.errors()[0]
        field_path = format_field_path(first["loc"]) or None
        if field_path is None:
            message = f"malformed payload: {first['msg']}"
        else:
            message = f"malformed payload at {field_path}: {first['msg']}"
        raise MalformedPayload(message, field_path=field_path) from e
    except RecursionError as e:
        raise MalformedPayload("malformed payload: nesting too deep") from e

    logger.debug(
        "Decoded %d accounts and %d errors",
        len(document.accounts),
        len(document.errors),
    )
    return document


def serialize_document(document: FinancialDocument) -> bytes:
    """
    Serialize a document back to pretty-printed JSON.

    Uses the same key names as the payload, so the output decodes back to
    an equal document (possible_error aside, which is never decoded).

    Args:
        document: Document to serialize

    Returns:
        UTF-8 encoded JSON with two-space indentation
    """
    text = document.model_dump_json(by_alias=True, indent=2)
    return (text + "\n").encode("utf-8")
