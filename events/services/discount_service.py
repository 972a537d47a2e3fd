"""Discount service - all discount business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from events.domain import (
    Discount,
    DiscountId,
    DiscountTerms,
    EventId,
    Money,
    TicketType,
    TicketTypeId,
)
from events.domain.errors import (
    ActiveDiscountExistsError,
    DiscountNotFoundError,
    EventNotFoundError,
    InvalidIdError,
    NotEventOrganizerError,
    TicketTypeNotFoundError,
)
from events.domain.pricing import PriceQuote, compute_final_price, validate_discount_terms
from events.stores.interfaces import DiscountStore, EventStore

logger = logging.getLogger(__name__)


def parse_id(factory, value: str):
    """Build an identifier value object, mapping bad input to InvalidIdError."""
    try:
        return factory.from_string(value)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidIdError() from exc


class DiscountService:
    """Service for organizer-managed ticket type discounts."""

    def __init__(
        self,
        event_store: EventStore,
        discount_store: DiscountStore,
    ) -> None:
        self._events = event_store
        self._discounts = discount_store

    def create_discount(
        self, organizer_id: int, event_id: str, ticket_type_id: str, terms: DiscountTerms
    ) -> Discount:
        """Create a discount for a ticket type the organizer owns.

        Raises:
            NotEventOrganizerError: If the organizer does not own the event.
            TicketTypeNotFoundError: If the ticket type is not part of the event.
            ValidationFailedError: If the terms are invalid.
            ActiveDiscountExistsError: If the new discount is active and
                another active discount exists for the ticket type.
        """
        logger.info(
            "Creating discount for ticket type %s by organizer %s", ticket_type_id, organizer_id
        )
        ticket_type = self._require_ticket_type(organizer_id, event_id, ticket_type_id)
        validate_discount_terms(terms)

        active = True if terms.active is None else terms.active
        if active and self._discounts.get_active_discount(ticket_type.id) is not None:
            raise ActiveDiscountExistsError()

        discount = self._discounts.create_discount(ticket_type.id, terms, created_by=organizer_id)
        logger.info("Created discount %s for ticket type %s", discount.id.value, ticket_type_id)
        return discount

    def update_discount(
        self,
        organizer_id: int,
        event_id: str,
        ticket_type_id: str,
        discount_id: str,
        terms: DiscountTerms,
    ) -> Discount:
        """Replace a discount's terms.

        Activating a discount never deactivates another one implicitly.

        Raises:
            DiscountNotFoundError: If the discount is missing or belongs to
                another ticket type.
            ActiveDiscountExistsError: If activation would leave two active
                discounts on the ticket type.
        """
        logger.info("Updating discount %s by organizer %s", discount_id, organizer_id)
        ticket_type = self._require_ticket_type(organizer_id, event_id, ticket_type_id)
        existing = self._require_discount(ticket_type, discount_id)
        validate_discount_terms(terms)

        if terms.active is True and not existing.active:
            current = self._discounts.get_active_discount(ticket_type.id)
            if current is not None and current.id != existing.id:
                raise ActiveDiscountExistsError()

        updated = self._discounts.update_discount(existing.id, terms)
        logger.info("Updated discount %s", discount_id)
        return updated

    def delete_discount(
        self, organizer_id: int, event_id: str, ticket_type_id: str, discount_id: str
    ) -> None:
        logger.info("Deleting discount %s by organizer %s", discount_id, organizer_id)
        ticket_type = self._require_ticket_type(organizer_id, event_id, ticket_type_id)
        existing = self._require_discount(ticket_type, discount_id)
        self._discounts.delete_discount(existing.id)
        logger.info("Deleted discount %s", discount_id)

    def get_discount(
        self, organizer_id: int, event_id: str, ticket_type_id: str, discount_id: str
    ) -> Discount:
        ticket_type = self._require_ticket_type(organizer_id, event_id, ticket_type_id)
        return self._require_discount(ticket_type, discount_id)

    def list_discounts(
        self, organizer_id: int, event_id: str, ticket_type_id: str
    ) -> list[Discount]:
        ticket_type = self._require_ticket_type(organizer_id, event_id, ticket_type_id)
        return self._discounts.list_discounts(ticket_type.id)

    def find_active_discount(self, ticket_type_id: TicketTypeId) -> Discount | None:
        """Return the discount flagged active, whether or not it is in its window."""
        return self._discounts.get_active_discount(ticket_type_id)

    def calculate_final_price(self, base_price: Money, discount: Discount | None) -> PriceQuote:
        return compute_final_price(base_price, discount)

    def _require_ticket_type(
        self, organizer_id: int, event_id: str, ticket_type_id: str
    ) -> TicketType:
        event_key = parse_id(EventId, event_id)
        ticket_type_key = parse_id(TicketTypeId, ticket_type_id)

        if self._events.get_event(event_key) is None:
            raise EventNotFoundError()
        if not self._events.is_organizer(organizer_id, event_key):
            logger.warning(
                "Access denied: user %s is not the organizer of event %s", organizer_id, event_id
            )
            raise NotEventOrganizerError()

        ticket_type = self._events.get_ticket_type(ticket_type_key)
        if ticket_type is None or ticket_type.event_id != event_key:
            raise TicketTypeNotFoundError()
        return ticket_type

    def _require_discount(self, ticket_type: TicketType, discount_id: str) -> Discount:
        discount = self._discounts.get_discount(parse_id(DiscountId, discount_id))
        if discount is None or discount.ticket_type_id != ticket_type.id:
            raise DiscountNotFoundError()
        return discount
