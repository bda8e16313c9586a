"""
Root document returned by the /accounts endpoint.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_serializer

from simplefin_cli.models.account import Account
from simplefin_cli.models.base import SimpleFinModel, fill_nulls


class FinancialDocument(SimpleFinModel):
    """
    Error notices, accounts and optional API messages from one response.

    Every key is optional in the payload.
    """

    errors: List[str] = Field(default_factory=list)
    accounts: List[Account] = Field(default_factory=list)
    x_api_message: Optional[List[str]] = Field(default=None, alias="x-api-message")

    @field_validator("errors", "x_api_message", mode="before")
    @classmethod
    def null_strings(cls, value: Any) -> Any:
        return fill_nulls(value, "")

    @field_validator("accounts", mode="before")
    @classmethod
    def null_accounts(cls, value: Any) -> Any:
        return fill_nulls(value, {})

    @model_serializer(mode="wrap")
    def omit_empty(self, handler: Any) -> Dict[str, Any]:
        data = handler(self)
        if self.x_api_message is None:
            data.pop("x-api-message", None)
            data.pop("x_api_message", None)
        return data
