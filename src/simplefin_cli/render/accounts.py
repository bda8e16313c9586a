"""
Grouped account table for terminal output.
"""

from typing import Iterable, List, Optional, TextIO

from simplefin_cli.models.account import Account
from simplefin_cli.render.table import CENTER, LEFT, RIGHT, TableWriter

WARNING_GLYPH = "⚠"
HEADER = ("Bank", "Account Name", "Balance", "Currency", "")


def sort_accounts(accounts: Iterable[Account]) -> List[Account]:
    """
    Order accounts by organization name, then account name.

    The sort is stable, so accounts with equal keys keep their input order.
    The input is not modified.
    """
    return sorted(accounts, key=lambda acc: (acc.org.name, acc.name))


def build_account_table(accounts: Iterable[Account]) -> TableWriter:
    """
    Build the table for a list of (already error-flagged) accounts.

    A separator goes between rows whenever the organization name changes.
    The Bank column is centered and auto-merged, Balance is right-aligned.
    """
    table = TableWriter(aligns=(CENTER, LEFT, RIGHT, LEFT, LEFT), auto_merge=(0,))
    table.append_header(HEADER)

    previous_org: Optional[str] = None
    for account in sort_accounts(accounts):
        if previous_org is not None and account.org.name != previous_org:
            table.append_separator()
        previous_org = account.org.name

        table.append_row(
            (
                account.org.name,
                account.name,
                account.balance,
                account.currency,
                WARNING_GLYPH if account.possible_error else "",
            )
        )

    return table


def render_table(accounts: Iterable[Account], stream: Optional[TextIO] = None) -> None:
    """
    Write the grouped account table.

    Args:
        accounts: Accounts to show; an empty list renders only the header
        stream: Output stream (stdout by default)
    """
    build_account_table(accounts).render(stream)
