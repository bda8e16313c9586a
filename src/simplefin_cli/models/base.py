"""
Shared base model for SimpleFIN payload objects.
"""

from typing import Any, ClassVar, Dict, FrozenSet, Set

from pydantic import BaseModel, ValidationInfo, model_validator

# Validation context marking input that came from the /accounts endpoint
PAYLOAD_CONTEXT: Dict[str, bool] = {"payload": True}


def from_payload(info: ValidationInfo) -> bool:
    """Whether a validation run is decoding an endpoint payload."""
    return bool(info.context and info.context.get("payload"))


class SimpleFinModel(BaseModel):
    """
    Base for every object decoded from the /accounts payload.

    The endpoint is loose about key casing ("Accounts" and "accounts" both
    occur), so object keys are matched to fields case-insensitively before
    validation. An exact-case key wins over a case-folded duplicate, JSON
    nulls leave the field at its default, and unknown keys are dropped.
    """

    model_config = {"strict": True, "populate_by_name": True}

    # Keys written on output but never taken from a payload
    decode_ignored: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def match_keys(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data

        ignored = cls.decode_ignored if from_payload(info) else frozenset()
        lookup: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            lookup[name.lower()] = alias
            lookup[alias.lower()] = alias

        matched: Dict[str, Any] = {}
        exact: Set[str] = set()
        for key, value in data.items():
            if not isinstance(key, str) or value is None:
                continue
            alias = lookup.get(key.lower())
            if alias is None or alias in ignored:
                continue
            if key == alias:
                exact.add(alias)
            elif alias in exact:
                continue
            matched[alias] = value
        return matched


def fill_nulls(value: Any, zero: Any) -> Any:
    """
    Replace null list items with a zero value.

    A null inside a list of strings becomes "", inside a list of objects an
    empty object; anything that is not a list is returned unchanged.
    """
    if not isinstance(value, list):
        return value
    return [zero if item is None else item for item in value]
