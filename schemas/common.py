# app/schemas/common.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

CENT = Decimal("0.01")

# Numeric(12, 2) holds at most ten integer digits
MAX_AMOUNT = Decimal("1e10")


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str


def as_utc(v: datetime) -> datetime:
    # naive values (input, or read back from SQLite) are taken as UTC
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


def parse_positive_amount(value: Any, label: str) -> Decimal:
    """Accept a decimal string or number > 0 with at most two decimal places."""
    message = f"{label} must be a positive number"
    if isinstance(value, bool) or value is None:
        raise ValueError(message)

    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite() or amount <= 0:
            raise ValueError(message)
        if amount >= MAX_AMOUNT:
            raise ValueError(f"{label} is too large")
        quantized = amount.quantize(CENT)
    except ArithmeticError:
        raise ValueError(message)

    if amount != quantized:
        raise ValueError(f"{label} must have at most two decimal places")
    return quantized
