"""Discount rules and price computation.

Pure functions over domain models; safe to call from any thread.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from events.domain.errors import (
    InvalidDateRangeError,
    InvalidDiscountValueError,
    InvalidPercentageError,
    InvalidPriceError,
)
from events.domain.models import Discount, DiscountTerms, DiscountType
from events.domain.value_objects import Money

CENT = Decimal("0.01")
HUNDRED = Decimal(100)


@dataclass(frozen=True)
class PriceQuote:
    """Outcome of pricing one ticket."""

    original_price: Money
    final_price: Money
    discount_amount: Money


def is_discount_valid(discount: Discount, now: datetime) -> bool:
    """Active and inside ``[valid_from, valid_to]``, both ends inclusive."""
    return discount.active and discount.valid_from <= now <= discount.valid_to


def compute_final_price(base_price: Money, discount: Discount | None) -> PriceQuote:
    """Apply ``discount`` to ``base_price``.

    The final price is floored at zero and the reported discount amount is
    the reduction actually applied, so it never exceeds the base price.

    Raises:
        InvalidPriceError: If the base price is not positive.
    """
    if base_price.amount <= 0:
        raise InvalidPriceError()

    if discount is None:
        return PriceQuote(
            original_price=base_price,
            final_price=base_price,
            discount_amount=Money.zero(),
        )

    if discount.discount_type is DiscountType.PERCENTAGE:
        raw_amount = (base_price.amount * discount.value / HUNDRED).quantize(
            CENT, rounding=ROUND_HALF_UP
        )
    else:
        raw_amount = discount.value

    final_amount = max(Decimal("0.00"), base_price.amount - raw_amount)
    return PriceQuote(
        original_price=base_price,
        final_price=Money(final_amount),
        discount_amount=Money(base_price.amount - final_amount),
    )


def validate_discount_terms(terms: DiscountTerms) -> None:
    """Reject terms that could never be stored.

    Raises:
        InvalidDateRangeError: If ``valid_to`` is not after ``valid_from``.
        InvalidPercentageError: If a percentage is outside (0, 100].
        InvalidDiscountValueError: If a fixed amount is not positive.
    """
    if terms.valid_to <= terms.valid_from:
        raise InvalidDateRangeError()

    if terms.discount_type is DiscountType.PERCENTAGE:
        if terms.value <= 0 or terms.value > HUNDRED:
            raise InvalidPercentageError()
    elif terms.value <= 0:
        raise InvalidDiscountValueError()
