"""
Write decoded documents to disk.
"""

import logging
from pathlib import Path
from typing import Union

from simplefin_cli.core.decoder import serialize_document
from simplefin_cli.core.exceptions import PersistenceError
from simplefin_cli.models.document import FinancialDocument

logger = logging.getLogger(__name__)


def write_document(document: FinancialDocument, path: Union[str, Path]) -> Path:
    """
    Write a document as pretty-printed JSON.

    Args:
        document: Document to write
        path: Output file; its parent directory must already exist

    Returns:
        Path that was written

    Raises:
        PersistenceError: If the file cannot be written
    """
    path = Path(path)
    payload = serialize_document(document)

    try:
        with open(path, "wb") as f:
            f.write(payload)
    except OSError as e:
        raise PersistenceError(f"error writing JSON results to {path}: {e}", path) from e

    logger.info("Wrote %d bytes to %s", len(payload), path)
    return path
