"""Ticket purchase: resolves the price of a ticket type and issues tickets."""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from events.domain import EventId, Ticket, TicketType, TicketTypeId
from events.domain.errors import (
    EventNotFoundError,
    EventNotOnSaleError,
    InvalidQuantityError,
    TicketsSoldOutError,
    TicketTypeNotFoundError,
)
from events.domain.pricing import PriceQuote, compute_final_price, is_discount_valid
from events.services.discount_service import parse_id
from events.stores.interfaces import DiscountStore, EventStore, TicketStore

logger = logging.getLogger(__name__)


class TicketPurchaseService:
    """Prices and issues tickets at purchase time."""

    def __init__(
        self,
        event_store: EventStore,
        discount_store: DiscountStore,
        ticket_store: TicketStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._events = event_store
        self._discounts = discount_store
        self._tickets = ticket_store
        self._clock = clock

    def quote(self, event_id: str, ticket_type_id: str) -> PriceQuote:
        """Return the price a purchase made now would pay."""
        ticket_type = self._require_ticket_type(event_id, ticket_type_id)
        return self._price(ticket_type, self._clock())

    def purchase(
        self, purchaser_id: int, event_id: str, ticket_type_id: str, quantity: int = 1
    ) -> list[Ticket]:
        """Issue ``quantity`` tickets priced at this instant.

        Raises:
            EventNotOnSaleError: If the event is not published or outside its
                sales window. Checked before any pricing happens.
            TicketsSoldOutError: If not enough tickets remain.
        """
        if quantity < 1:
            raise InvalidQuantityError()

        ticket_type = self._require_ticket_type(event_id, ticket_type_id)
        event = self._events.get_event(ticket_type.event_id)
        if event is None:
            raise EventNotFoundError()

        now = self._clock()
        if not event.is_on_sale(now):
            raise EventNotOnSaleError()

        quote = self._price(ticket_type, now)
        tickets = self._tickets.issue_tickets(ticket_type.id, purchaser_id, quote, quantity)
        if tickets is None:
            raise TicketsSoldOutError()

        logger.info(
            "User %s purchased %d ticket(s) of type %s at %s (original %s, discount %s)",
            purchaser_id,
            quantity,
            ticket_type_id,
            quote.final_price,
            quote.original_price,
            quote.discount_amount,
        )
        return tickets

    def _price(self, ticket_type: TicketType, now: datetime) -> PriceQuote:
        discount = self._discounts.get_active_discount(ticket_type.id)
        if discount is not None and not is_discount_valid(discount, now):
            logger.debug("Discount %s is outside its validity window", discount.id.value)
            discount = None
        return compute_final_price(ticket_type.price, discount)

    def _require_ticket_type(self, event_id: str, ticket_type_id: str) -> TicketType:
        event_key = parse_id(EventId, event_id)
        ticket_type = self._events.get_ticket_type(parse_id(TicketTypeId, ticket_type_id))
        if ticket_type is None or ticket_type.event_id != event_key:
            raise TicketTypeNotFoundError()
        return ticket_type
