"""
Terminal rendering for SimpleFIN account data.
"""

from simplefin_cli.render.accounts import build_account_table, render_table, sort_accounts
from simplefin_cli.render.table import TableWriter

__all__ = ["TableWriter", "build_account_table", "render_table", "sort_accounts"]
