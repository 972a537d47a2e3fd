"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from events.domain import (
    Discount,
    DiscountId,
    DiscountTerms,
    Event,
    EventId,
    Ticket,
    TicketType,
    TicketTypeId,
)
from events.domain.pricing import PriceQuote


class EventStore(ABC):
    """Interface for event and ticket type lookups."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        """Return a ticket type by ID, or None if not found."""
        ...

    @abstractmethod
    def is_organizer(self, organizer_id: int, event_id: EventId) -> bool:
        """Check if the user organizes the event."""
        ...


class DiscountStore(ABC):
    """Interface for discount persistence operations.

    Implementations must make ``create_discount`` and ``update_discount``
    atomic with respect to the one-active-discount-per-ticket-type rule and
    raise ActiveDiscountExistsError when a write would break it.
    """

    @abstractmethod
    def get_discount(self, discount_id: DiscountId) -> Discount | None:
        ...

    @abstractmethod
    def list_discounts(self, ticket_type_id: TicketTypeId) -> list[Discount]:
        """Return all discounts for a ticket type, newest first."""
        ...

    @abstractmethod
    def get_active_discount(self, ticket_type_id: TicketTypeId) -> Discount | None:
        """Return the discount flagged active for a ticket type, if any."""
        ...

    @abstractmethod
    def create_discount(
        self, ticket_type_id: TicketTypeId, terms: DiscountTerms, created_by: int
    ) -> Discount:
        ...

    @abstractmethod
    def update_discount(self, discount_id: DiscountId, terms: DiscountTerms) -> Discount:
        ...

    @abstractmethod
    def delete_discount(self, discount_id: DiscountId) -> None:
        ...


class TicketStore(ABC):
    """Interface for ticket issuing."""

    @abstractmethod
    def issue_tickets(
        self,
        ticket_type_id: TicketTypeId,
        purchaser_id: int,
        quote: PriceQuote,
        quantity: int,
    ) -> list[Ticket] | None:
        """Create ``quantity`` tickets priced by ``quote``.

        Returns None, writing nothing, when fewer than ``quantity`` tickets
        remain for the ticket type.
        """
        ...
