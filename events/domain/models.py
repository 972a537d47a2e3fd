"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from events.domain.value_objects import (
    Capacity,
    DiscountId,
    EventId,
    Money,
    TicketId,
    TicketTypeId,
)


class EventStatus(Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class DiscountType(Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    organizer_id: int
    name: str
    status: EventStatus
    sales_start: datetime | None
    sales_end: datetime | None
    created_at: datetime

    def is_on_sale(self, now: datetime) -> bool:
        """Published and inside the sales window (open-ended where unset)."""
        if self.status is not EventStatus.PUBLISHED:
            return False
        if self.sales_start is not None and now < self.sales_start:
            return False
        if self.sales_end is not None and now > self.sales_end:
            return False
        return True


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    event_id: EventId
    name: str
    price: Money
    total_available: Capacity
    created_at: datetime


@dataclass(frozen=True)
class DiscountTerms:
    """The organizer-supplied part of a discount.

    ``active`` and ``description`` are optional: on create an omitted
    ``active`` means active, on update omitted fields keep their value.
    """

    discount_type: DiscountType
    value: Decimal
    valid_from: datetime
    valid_to: datetime
    active: bool | None = None
    description: str | None = None


@dataclass(frozen=True)
class Discount:
    """Domain representation of a Discount."""

    id: DiscountId
    ticket_type_id: TicketTypeId
    discount_type: DiscountType
    value: Decimal
    valid_from: datetime
    valid_to: datetime
    active: bool
    description: str | None
    created_by: int | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a purchased Ticket.

    Pricing fields are a snapshot taken at purchase time.
    """

    id: TicketId
    ticket_type_id: TicketTypeId
    purchaser_id: int
    original_price: Money
    price_paid: Money
    discount_applied: Money
    created_at: datetime

    def __post_init__(self) -> None:
        if self.original_price.amount - self.price_paid.amount != self.discount_applied.amount:
            raise ValueError("Discount applied must equal original price minus price paid")
        if self.discount_applied.amount > self.original_price.amount:
            raise ValueError("Discount applied cannot exceed original price")
