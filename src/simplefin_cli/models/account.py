"""
Account, organization and transaction models for SimpleFIN data.
"""

from typing import Any, ClassVar, Dict, FrozenSet, List

from pydantic import Field, field_validator, model_serializer

from simplefin_cli.models.base import SimpleFinModel, fill_nulls


class Organization(SimpleFinModel):
    """
    The institution backing an account.

    Embedded by value in every Account. Accounts belong to the same
    organization only when their names are equal.
    """

    domain: str = ""
    name: str = ""
    sfin_url: str = Field(default="", alias="sfin-url")
    url: str = ""


class Transaction(SimpleFinModel):
    """A posted transaction. Amount is a decimal string, never a float."""

    model_config = {"frozen": True}

    id: str = ""
    posted: int = 0  # Unix seconds
    amount: str = ""
    description: str = ""


class Account(SimpleFinModel):
    """
    Represents a bank account from the /accounts payload.

    Balances are kept as the exact decimal strings the endpoint sent.
    ``extra`` and ``holdings`` are institution-specific JSON passed through
    untouched. ``possible_error`` is derived locally: it can be set when
    constructing an Account, but a decoded payload never supplies it.
    """

    decode_ignored: ClassVar[FrozenSet[str]] = frozenset({"possible_error"})

    org: Organization = Field(default_factory=Organization)
    id: str = ""
    name: str = ""
    currency: str = ""

    # Balances
    balance: str = ""
    available_balance: str = Field(default="", alias="available-balance")
    balance_date: int = Field(default=0, alias="balance-date")  # Unix seconds

    transactions: List[Transaction] = Field(default_factory=list)
    extra: Dict[str, Any] = Field(default_factory=dict)
    holdings: List[Any] = Field(default_factory=list)

    possible_error: bool = False

    @field_validator("transactions", mode="before")
    @classmethod
    def null_transactions(cls, value: Any) -> Any:
        return fill_nulls(value, {})

    @model_serializer(mode="wrap")
    def omit_empty(self, handler: Any) -> Dict[str, Any]:
        data = handler(self)
        if not self.extra:
            data.pop("extra", None)
        if not self.possible_error:
            data.pop("possible_error", None)
        return data
