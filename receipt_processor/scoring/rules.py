"""Points rules. Pure code, each rule a function of the validated receipt.

One point for every alphanumeric character in the retailer name.
50 points if the total is a round dollar amount with no cents.
25 points if the total is a multiple of 0.25.
5 points for every two items on the receipt.
If the trimmed length of the item description is a multiple of 3, multiply
the price by 0.2 and round up to the nearest integer.
6 points if the day in the purchase date is odd.
10 points if the time of purchase is after 2:00pm and before 4:00pm.
"""

from __future__ import annotations

import logging
from decimal import ROUND_CEILING, Context, Decimal, localcontext
from typing import Callable, Tuple

from ..models import Receipt

logger = logging.getLogger(__name__)

ROUND_TOTAL_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

QUARTER = Decimal("0.25")
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
# exclusive bounds on the purchase hour; minutes are not considered
AFTERNOON_START_HOUR = 13
AFTERNOON_END_HOUR = 16
# exact for every amount validation accepts (13 integer digits, 20 decimal places)
AMOUNT_CONTEXT = Context(prec=64)

Rule = Callable[[Receipt], int]


def retailer_name_points(receipt: Receipt) -> int:
    return sum(1 for char in receipt.retailer if char.isascii() and char.isalnum())


def round_total_points(receipt: Receipt) -> int:
    total = receipt.total
    return ROUND_TOTAL_POINTS if total == total.to_integral_value() else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    with localcontext(AMOUNT_CONTEXT):
        remainder = receipt.total % QUARTER
    return QUARTER_MULTIPLE_POINTS if remainder == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    return (receipt.item_count // 2) * ITEM_PAIR_POINTS


def item_description_points(receipt: Receipt) -> int:
    """Price bonus for items whose trimmed description length is a multiple of 3.

    A blank description trims to length 0 and therefore qualifies.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % DESCRIPTION_LENGTH_FACTOR == 0:
            with localcontext(AMOUNT_CONTEXT):
                bonus = (item.price * DESCRIPTION_PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING)
            points += int(bonus)
    return points


def odd_day_points(receipt: Receipt) -> int:
    return ODD_DAY_POINTS if receipt.purchase_date.day % 2 == 1 else 0


def afternoon_points(receipt: Receipt) -> int:
    hour = receipt.purchase_time.hour
    return AFTERNOON_POINTS if AFTERNOON_START_HOUR < hour < AFTERNOON_END_HOUR else 0


RULES: Tuple[Rule, ...] = (
    retailer_name_points,
    round_total_points,
    quarter_multiple_points,
    item_pair_points,
    item_description_points,
    odd_day_points,
    afternoon_points,
)


def score_breakdown(receipt: Receipt) -> dict[str, int]:
    """Points contributed by each rule, keyed by rule name."""
    return {rule.__name__: rule(receipt) for rule in RULES}


def score_receipt(receipt: Receipt) -> int:
    """Total points for a validated receipt."""
    points = 0
    for name, value in score_breakdown(receipt).items():
        if value:
            logger.debug("%s: +%s", name, value)
        points += value
    return points


__all__ = [
    "RULES",
    "Rule",
    "afternoon_points",
    "item_description_points",
    "item_pair_points",
    "odd_day_points",
    "quarter_multiple_points",
    "retailer_name_points",
    "round_total_points",
    "score_breakdown",
    "score_receipt",
]
