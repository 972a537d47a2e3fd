"""Django ORM implementation of the events stores."""

from django.db import IntegrityError, transaction

from events import models
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
    TicketType,
    TicketTypeId,
)
from events.domain.errors import ActiveDiscountExistsError, DiscountNotFoundError
from events.domain.pricing import PriceQuote
from events.stores.interfaces import DiscountStore, EventStore, TicketStore


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        organizer_id=row.organizer_id,
        name=row.name,
        status=EventStatus(row.status),
        sales_start=row.sales_start,
        sales_end=row.sales_end,
        created_at=row.created_at,
    )


def _to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        price=Money(row.price),
        total_available=Capacity(row.total_available),
        created_at=row.created_at,
    )


def _to_discount(row: models.Discount) -> Discount:
    return Discount(
        id=DiscountId(row.id),
        ticket_type_id=TicketTypeId(row.ticket_type_id),
        discount_type=DiscountType(row.discount_type),
        value=row.value,
        valid_from=row.valid_from,
        valid_to=row.valid_to,
        active=row.active,
        description=row.description,
        created_by=row.created_by_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        ticket_type_id=TicketTypeId(row.ticket_type_id),
        purchaser_id=row.purchaser_id,
        original_price=Money(row.original_price),
        price_paid=Money(row.price_paid),
        discount_applied=Money(row.discount_applied),
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """Event and ticket type lookups backed by the Django ORM."""

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        row = models.TicketType.objects.filter(pk=ticket_type_id.value).first()
        return _to_ticket_type(row) if row else None

    def is_organizer(self, organizer_id: int, event_id: EventId) -> bool:
        return models.Event.objects.filter(
            pk=event_id.value, organizer_id=organizer_id
        ).exists()


class DjangoDiscountStore(DiscountStore):
    """Discount persistence backed by the Django ORM.

    Writes lock the parent ticket type row before checking for another
    active discount; the partial unique constraint catches anything that
    slips past the lock (e.g. on backends without row locks).
    """

    def get_discount(self, discount_id: DiscountId) -> Discount | None:
        row = models.Discount.objects.filter(pk=discount_id.value).first()
        return _to_discount(row) if row else None

    def list_discounts(self, ticket_type_id: TicketTypeId) -> list[Discount]:
        rows = models.Discount.objects.filter(ticket_type_id=ticket_type_id.value).order_by(
            "-created_at"
        )
        return [_to_discount(row) for row in rows]

    def get_active_discount(self, ticket_type_id: TicketTypeId) -> Discount | None:
        row = models.Discount.objects.filter(
            ticket_type_id=ticket_type_id.value, active=True
        ).first()
        return _to_discount(row) if row else None

    def create_discount(
        self, ticket_type_id: TicketTypeId, terms: DiscountTerms, created_by: int
    ) -> Discount:
        active = True if terms.active is None else terms.active
        try:
            with transaction.atomic():
                self._lock_ticket_type(ticket_type_id)
                if active and self._has_active(ticket_type_id):
                    raise ActiveDiscountExistsError()
                row = models.Discount.objects.create(
                    ticket_type_id=ticket_type_id.value,
                    discount_type=terms.discount_type.value,
                    value=terms.value,
                    valid_from=terms.valid_from,
                    valid_to=terms.valid_to,
                    active=active,
                    description=terms.description,
                    created_by_id=created_by,
                )
        except IntegrityError as exc:
            raise ActiveDiscountExistsError() from exc
        return _to_discount(row)

    def update_discount(self, discount_id: DiscountId, terms: DiscountTerms) -> Discount:
        try:
            with transaction.atomic():
                row = models.Discount.objects.filter(pk=discount_id.value).first()
                if row is None:
                    raise DiscountNotFoundError()
                ticket_type_id = TicketTypeId(row.ticket_type_id)
                self._lock_ticket_type(ticket_type_id)

                activating = terms.active is True and not row.active
                if activating and self._has_active(ticket_type_id, exclude=discount_id):
                    raise ActiveDiscountExistsError()

                row.discount_type = terms.discount_type.value
                row.value = terms.value
                row.valid_from = terms.valid_from
                row.valid_to = terms.valid_to
                if terms.active is not None:
                    row.active = terms.active
                if terms.description is not None:
                    row.description = terms.description
                row.save()
        except IntegrityError as exc:
            raise ActiveDiscountExistsError() from exc
        return _to_discount(row)

    def delete_discount(self, discount_id: DiscountId) -> None:
        models.Discount.objects.filter(pk=discount_id.value).delete()

    def _lock_ticket_type(self, ticket_type_id: TicketTypeId) -> None:
        # Serializes discount writes per ticket type.
        list(
            models.TicketType.objects.select_for_update()
            .filter(pk=ticket_type_id.value)
            .values_list("pk", flat=True)
        )

    def _has_active(
        self, ticket_type_id: TicketTypeId, exclude: DiscountId | None = None
    ) -> bool:
        qs = models.Discount.objects.filter(ticket_type_id=ticket_type_id.value, active=True)
        if exclude is not None:
            qs = qs.exclude(pk=exclude.value)
        return qs.exists()


class DjangoTicketStore(TicketStore):
    """Ticket issuing backed by the Django ORM."""

    def issue_tickets(
        self,
        ticket_type_id: TicketTypeId,
        purchaser_id: int,
        quote: PriceQuote,
        quantity: int,
    ) -> list[Ticket] | None:
        with transaction.atomic():
            ticket_type = models.TicketType.objects.select_for_update().get(
                pk=ticket_type_id.value
            )
            sold = models.Ticket.objects.filter(ticket_type_id=ticket_type.pk).count()
            if sold + quantity > ticket_type.total_available:
                return None
            rows = [
                models.Ticket.objects.create(
                    ticket_type_id=ticket_type.pk,
                    purchaser_id=purchaser_id,
                    original_price=quote.original_price.amount,
                    price_paid=quote.final_price.amount,
                    discount_applied=quote.discount_amount.amount,
                )
                for _ in range(quantity)
            ]
        return [_to_ticket(row) for row in rows]
