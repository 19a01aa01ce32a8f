"""Receipt validation - checks submitted documents before they are scored."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from .errors import InvalidReceiptError
from .models import LineItem, Receipt

logger = logging.getLogger(__name__)

# word characters, whitespace, hyphen, backslash and ampersand
RETAILER_PATTERN = re.compile(r"[\w\s\-\\&]+")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")
DATE_FORMAT = "%Y-%m-%d"
# amounts below 10**13 with at most 20 decimal places
MAX_AMOUNT_ADJUSTED_EXPONENT = 12
MIN_AMOUNT_EXPONENT = -20


def parse_amount(value: Any) -> Decimal:
    """Parse a currency amount sent either as a JSON string or a JSON number.

    Args:
        value: raw amount from the document

    Returns:
        The amount as an exact Decimal

    Raises:
        ValueError: if the value is not a finite, non-negative number, or is
            too large or too precise to be a currency amount
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError("amount must be a string or a number")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"amount is not a number: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"amount is not finite: {value!r}")
    if amount < 0:
        raise ValueError(f"amount is negative: {value!r}")
    if amount.adjusted() > MAX_AMOUNT_ADJUSTED_EXPONENT:
        raise ValueError(f"amount is too large: {value!r}")
    if amount.as_tuple().exponent < MIN_AMOUNT_EXPONENT:
        raise ValueError(f"amount has too many decimal places: {value!r}")
    return amount


class ItemPayload(BaseModel):
    """Wire shape of a receipt line item."""

    model_config = ConfigDict(frozen=True)

    shortDescription: StrictStr
    price: Decimal

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Decimal:
        return parse_amount(value)

    def to_line_item(self) -> LineItem:
        return LineItem(short_description=self.shortDescription, price=self.price)


class ReceiptPayload(BaseModel):
    """Wire shape of a submitted receipt."""

    model_config = ConfigDict(frozen=True)

    retailer: StrictStr
    purchaseDate: date
    purchaseTime: time
    total: Decimal
    items: List[ItemPayload] = Field(min_length=1)

    @field_validator("retailer")
    @classmethod
    def _check_retailer(cls, value: str) -> str:
        if not RETAILER_PATTERN.fullmatch(value):
            raise ValueError("retailer contains unsupported characters")
        return value

    @field_validator("purchaseDate", mode="before")
    @classmethod
    def _parse_purchase_date(cls, value: Any) -> date:
        if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
            raise ValueError("purchaseDate must be formatted YYYY-MM-DD")
        return datetime.strptime(value, DATE_FORMAT).date()

    @field_validator("purchaseTime", mode="before")
    @classmethod
    def _parse_purchase_time(cls, value: Any) -> time:
        match = TIME_PATTERN.fullmatch(value) if isinstance(value, str) else None
        if match is None:
            raise ValueError("purchaseTime must be formatted HH:MM")
        return time(hour=int(match.group(1)), minute=int(match.group(2)))

    @field_validator("total", mode="before")
    @classmethod
    def _parse_total(cls, value: Any) -> Decimal:
        return parse_amount(value)

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchaseDate,
            purchase_time=self.purchaseTime,
            total=self.total,
            items=tuple(item.to_line_item() for item in self.items),
        )


def validate_receipt(document: Any) -> Receipt:
    """Validate a submitted receipt document.

    Args:
        document: decoded JSON body of the request

    Returns:
        The validated receipt

    Raises:
        InvalidReceiptError: if any field is missing or malformed. The
            per-field detail is attached as ``errors`` for logging only.
    """
    try:
        payload = ReceiptPayload.model_validate(document)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        logger.debug(f"Receipt rejected with {exc.error_count()} error(s): {errors}")
        raise InvalidReceiptError(f"{exc.error_count()} validation error(s)", errors=errors) from exc
    return payload.to_receipt()


def is_valid_receipt(document: Any) -> bool:
    """Return True if the document would be accepted by validate_receipt."""
    try:
        validate_receipt(document)
    except InvalidReceiptError:
        return False
    return True


__all__ = [
    "ItemPayload",
    "ReceiptPayload",
    "is_valid_receipt",
    "parse_amount",
    "validate_receipt",
]
