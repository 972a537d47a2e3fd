from events.domain.models import (
    Discount,
    DiscountTerms,
    DiscountType,
    Event,
    EventStatus,
    Ticket,
    TicketType,
)
from events.domain.value_objects import (
    Capacity,
    DiscountId,
    EventId,
    Money,
    TicketId,
    TicketTypeId,
)

__all__ = [
    "Event",
    "EventStatus",
    "TicketType",
    "Discount",
    "DiscountTerms",
    "DiscountType",
    "Ticket",
    "EventId",
    "TicketTypeId",
    "DiscountId",
    "TicketId",
    "Money",
    "Capacity",
]
