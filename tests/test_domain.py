"""Unit tests for domain primitives and the discount engine.

These test invariants that must hold at construction time and the pure
pricing rules.
Run with: pytest tests/test_domain.py -v
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from events.domain import (
    Capacity,
    Discount,
    DiscountId,
    DiscountTerms,
    DiscountType,
    Event,
    EventId,
    EventStatus,
    Money,
    Ticket,
    TicketId,
    TicketTypeId,
)
from events.domain.errors import (
    InvalidDateRangeError,
    InvalidDiscountValueError,
    InvalidPercentageError,
    InvalidPriceError,
)
from events.domain.pricing import compute_final_price, is_discount_valid, validate_discount_terms

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)


def make_discount(
    discount_type: DiscountType = DiscountType.PERCENTAGE,
    value: str = "15",
    active: bool = True,
    valid_from: datetime = NOW - timedelta(days=1),
    valid_to: datetime = NOW + timedelta(days=1),
) -> Discount:
    return Discount(
        id=DiscountId(uuid4()),
        ticket_type_id=TicketTypeId(uuid4()),
        discount_type=discount_type,
        value=Decimal(value),
        valid_from=valid_from,
        valid_to=valid_to,
        active=active,
        description=None,
        created_by=1,
        created_at=NOW,
        updated_at=NOW,
    )


def money(amount: str) -> Money:
    return Money(Decimal(amount))


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        assert money("10.50").amount == Decimal("10.50")

    def test_money_accepts_zero(self):
        assert Money.zero().amount == Decimal("0")

    def test_money_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            money("-0.01")

    def test_money_str_format(self):
        assert str(money("5")) == "5.00"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_zero(self):
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestIds:
    def test_from_string_valid_uuid(self):
        raw = uuid4()
        assert EventId.from_string(str(raw)) == EventId(raw)

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            DiscountId.from_string("not-a-uuid")


class TestComputeFinalPrice:
    """Tests for the discount engine."""

    def test_no_discount_keeps_base_price(self):
        quote = compute_final_price(money("100.00"), None)

        assert quote.final_price == money("100.00")
        assert quote.discount_amount == Money.zero()

    def test_percentage_discount(self):
        quote = compute_final_price(money("100.00"), make_discount(value="15"))

        assert quote.original_price == money("100.00")
        assert quote.final_price == money("85.00")
        assert quote.discount_amount == money("15.00")

    def test_percentage_amount_rounds_half_up_to_cents(self):
        """50% of 10.05 is 5.025, which rounds up to 5.03."""
        quote = compute_final_price(money("10.05"), make_discount(value="50"))

        assert quote.discount_amount == money("5.03")
        assert quote.final_price == money("5.02")

    def test_full_percentage_discount_is_free(self):
        quote = compute_final_price(money("42.00"), make_discount(value="100"))

        assert quote.final_price == money("0.00")
        assert quote.discount_amount == money("42.00")

    def test_fixed_amount_discount(self):
        discount = make_discount(DiscountType.FIXED_AMOUNT, value="10.00")

        quote = compute_final_price(money("25.00"), discount)

        assert quote.final_price == money("15.00")
        assert quote.discount_amount == money("10.00")

    def test_fixed_amount_above_price_floors_at_zero(self):
        """The discount actually applied never exceeds the base price."""
        discount = make_discount(DiscountType.FIXED_AMOUNT, value="30.00")

        quote = compute_final_price(money("25.00"), discount)

        assert quote.final_price == money("0.00")
        assert quote.discount_amount == money("25.00")

    def test_zero_base_price_is_rejected(self):
        with pytest.raises(InvalidPriceError):
            compute_final_price(money("0.00"), make_discount())

    def test_original_minus_final_equals_discount_amount(self):
        for base in ("0.01", "9.99", "49.99", "100.00", "1234.56"):
            for discount in (
                make_discount(value="33.33"),
                make_discount(DiscountType.FIXED_AMOUNT, value="20.00"),
            ):
                quote = compute_final_price(money(base), discount)
                assert (
                    quote.original_price.amount - quote.final_price.amount
                    == quote.discount_amount.amount
                )
                assert quote.discount_amount.amount <= quote.original_price.amount


class TestDiscountValidity:
    def test_valid_inside_window(self):
        assert is_discount_valid(make_discount(), NOW)

    def test_window_bounds_are_inclusive(self):
        discount = make_discount(valid_from=NOW, valid_to=NOW + timedelta(hours=1))

        assert is_discount_valid(discount, NOW)
        assert is_discount_valid(discount, NOW + timedelta(hours=1))

    def test_invalid_outside_window(self):
        discount = make_discount(valid_from=NOW, valid_to=NOW + timedelta(hours=1))

        assert not is_discount_valid(discount, NOW - timedelta(microseconds=1))
        assert not is_discount_valid(discount, NOW + timedelta(hours=1, microseconds=1))

    def test_inactive_discount_is_never_valid(self):
        assert not is_discount_valid(make_discount(active=False), NOW)


class TestValidateDiscountTerms:
    def terms(self, discount_type=DiscountType.PERCENTAGE, value="10", valid_to=None):
        return DiscountTerms(
            discount_type=discount_type,
            value=Decimal(value),
            valid_from=NOW,
            valid_to=valid_to or NOW + timedelta(days=7),
        )

    def test_accepts_full_percentage(self):
        validate_discount_terms(self.terms(value="100"))

    def test_rejects_empty_date_range(self):
        with pytest.raises(InvalidDateRangeError):
            validate_discount_terms(self.terms(valid_to=NOW))

    @pytest.mark.parametrize("value", ["0", "-5", "100.01"])
    def test_rejects_percentage_out_of_range(self, value):
        with pytest.raises(InvalidPercentageError):
            validate_discount_terms(self.terms(value=value))

    def test_rejects_non_positive_fixed_amount(self):
        with pytest.raises(InvalidDiscountValueError):
            validate_discount_terms(self.terms(DiscountType.FIXED_AMOUNT, value="0"))


class TestEventOnSale:
    def event(self, status=EventStatus.PUBLISHED, sales_start=None, sales_end=None) -> Event:
        return Event(
            id=EventId(uuid4()),
            organizer_id=1,
            name="Launch",
            status=status,
            sales_start=sales_start,
            sales_end=sales_end,
            created_at=NOW,
        )

    def test_published_without_window_is_on_sale(self):
        assert self.event().is_on_sale(NOW)

    def test_draft_is_not_on_sale(self):
        assert not self.event(status=EventStatus.DRAFT).is_on_sale(NOW)

    def test_outside_sales_window_is_not_on_sale(self):
        event = self.event(sales_start=NOW + timedelta(days=1))

        assert not event.is_on_sale(NOW)
        assert event.is_on_sale(NOW + timedelta(days=1))


class TestTicket:
    def ticket(self, original: str, paid: str, applied: str) -> Ticket:
        return Ticket(
            id=TicketId(uuid4()),
            ticket_type_id=TicketTypeId(uuid4()),
            purchaser_id=1,
            original_price=money(original),
            price_paid=money(paid),
            discount_applied=money(applied),
            created_at=NOW,
        )

    def test_consistent_pricing_snapshot(self):
        ticket = self.ticket("100.00", "85.00", "15.00")

        assert ticket.discount_applied == money("15.00")

    def test_rejects_inconsistent_pricing_snapshot(self):
        with pytest.raises(ValueError):
            self.ticket("100.00", "85.00", "10.00")
