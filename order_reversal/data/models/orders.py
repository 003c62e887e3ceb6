from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Plain base-10 numbers only: no exponent, hex, underscores or fractional ids
INTEGER_TEXT = re.compile(r"[+-]?\d+", re.ASCII)
DECIMAL_TEXT = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)

FIELD_ORDER = ("id", "customer_name", "amount")


class OrderRecord(BaseModel):
    """One line of the order file.

    Fields may be given by keyword or positionally, in the order
    id, customer_name, amount.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Order identifier (uniqueness is not enforced)")
    customer_name: str = Field(description="Free-text order description, kept verbatim")
    amount: Decimal = Field(description="Order amount", allow_inf_nan=False)

    def __init__(self, *args: Any, **data: Any) -> None:
        if len(args) > len(FIELD_ORDER):
            raise TypeError(f"OrderRecord takes at most {len(FIELD_ORDER)} positional arguments ({len(args)} given)")
        for name, value in zip(FIELD_ORDER, args):
            if name in data:
                raise TypeError(f"OrderRecord got multiple values for argument '{name}'")
            data[name] = value
        super().__init__(**data)

    @field_validator("id", mode="before")
    @classmethod
    def parse_id_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip()
            if not INTEGER_TEXT.fullmatch(text):
                raise ValueError(f"not an integer: {value!r}")
            return int(text)
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip()
            if not DECIMAL_TEXT.fullmatch(text):
                raise ValueError(f"not a decimal number: {value!r}")
            return Decimal(text)
        return value

    def __str__(self) -> str:
        return f"{self.id}. Item: {self.customer_name}. Price: {self.amount}"
