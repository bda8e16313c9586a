"""
Correlate top-level error notices with the accounts they concern.
"""

import logging

from simplefin_cli.models.document import FinancialDocument

logger = logging.getLogger(__name__)


def correlate_errors(document: FinancialDocument) -> FinancialDocument:
    """
    Flag accounts whose organization is named in an error notice.

    An account is flagged when its organization name occurs verbatim
    (case-sensitive substring) in any error string. This is a heuristic:
    short names can match unrelated errors, and an empty organization name
    matches every error. Flags are only ever set, never cleared.

    Args:
        document: Decoded document, updated in place

    Returns:
        The same document, for chaining
    """
    for error in document.errors:
        matched = 0
        for account in document.accounts:
            if account.org.name in error:
                account.possible_error = True
                matched += 1
        if matched:
            logger.debug("Error %r matched %d accounts", error, matched)
        else:
            logger.debug("Error %r matched no accounts", error)

    return document
