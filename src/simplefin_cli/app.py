"""
Fetch, annotate, persist and render a SimpleFIN account summary.
"""

import logging
import sys
from typing import Optional, TextIO

import httpx

from simplefin_cli.config import Settings
from simplefin_cli.core.client import SimpleFinClient
from simplefin_cli.core.correlator import correlate_errors
from simplefin_cli.core.decoder import decode_payload
from simplefin_cli.core.storage import write_document
from simplefin_cli.models.document import FinancialDocument
from simplefin_cli.render.accounts import render_table

logger = logging.getLogger(__name__)


def process_accounts(
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
    stream: Optional[TextIO] = None,
) -> FinancialDocument:
    """
    Run one fetch-decode-correlate-render pass.

    Any failure propagates before the table is rendered.

    Args:
        settings: Access URL, proxy, output file and timeout
        transport: Optional httpx transport, used in tests
        stream: Output stream for the table (stdout by default)

    Returns:
        The decoded, error-flagged document

    Raises:
        SimpleFinError: On transport, status, payload or write failures
    """
    stream = stream if stream is not None else sys.stdout

    client = SimpleFinClient(
        settings.url,
        proxy=settings.proxy,
        timeout=settings.timeout,
        transport=transport,
    )
    body = client.fetch_accounts()

    document = correlate_errors(decode_payload(body))
    flagged = sum(1 for acc in document.accounts if acc.possible_error)
    if flagged:
        logger.debug("%d of %d accounts flagged", flagged, len(document.accounts))

    if settings.out is not None:
        path = write_document(document, settings.out)
        stream.write(f"JSON results written to: {path}\n")

    render_table(document.accounts, stream)
    return document
