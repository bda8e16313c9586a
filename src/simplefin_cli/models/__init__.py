"""
Pydantic models for SimpleFIN data structures.
"""

from simplefin_cli.models.account import Account, Organization, Transaction
from simplefin_cli.models.document import FinancialDocument

__all__ = ["FinancialDocument", "Account", "Organization", "Transaction"]
