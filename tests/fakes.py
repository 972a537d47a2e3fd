"""In-memory store implementations for service tests."""

import itertools
from contextlib import nullcontext
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

from events.domain import (
    Capacity,
    Discount,
    DiscountId,
    DiscountTerms,
    Event,
    EventId,
    EventStatus,
    Money,
    Ticket,
    TicketId,
    TicketType,
    TicketTypeId,
)
from events.domain.errors import ActiveDiscountExistsError
from events.domain.pricing import PriceQuote
from events.stores.interfaces import DiscountStore, EventStore, TicketStore
from invites.domain import InviteCode, InviteCodeId, InviteCodeStatus, NewInviteCode
from invites.stores.interfaces import EventDirectory, InviteCodeStore, RoleDirectory

EPOCH = datetime(2026, 1, 1, tzinfo=UTC)
NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeEventStore(EventStore):
    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.ticket_types: dict[TicketTypeId, TicketType] = {}

    def add_event(
        self,
        organizer_id: int,
        status: EventStatus = EventStatus.PUBLISHED,
        sales_start: datetime | None = None,
        sales_end: datetime | None = None,
    ) -> Event:
        event = Event(
            id=EventId(uuid4()),
            organizer_id=organizer_id,
            name="Test Event",
            status=status,
            sales_start=sales_start,
            sales_end=sales_end,
            created_at=EPOCH,
        )
        self.events[event.id] = event
        return event

    def add_ticket_type(
        self, event: Event, price: str = "100.00", total_available: int = 10
    ) -> TicketType:
        ticket_type = TicketType(
            id=TicketTypeId(uuid4()),
            event_id=event.id,
            name="General Admission",
            price=Money(Decimal(price)),
            total_available=Capacity(total_available),
            created_at=EPOCH,
        )
        self.ticket_types[ticket_type.id] = ticket_type
        return ticket_type

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        return self.ticket_types.get(ticket_type_id)

    def is_organizer(self, organizer_id: int, event_id: EventId) -> bool:
        event = self.events.get(event_id)
        return event is not None and event.organizer_id == organizer_id


class FakeDiscountStore(DiscountStore):
    def __init__(self) -> None:
        self.discounts: dict[DiscountId, Discount] = {}
        self._ticks = itertools.count(1)

    def get_discount(self, discount_id: DiscountId) -> Discount | None:
        return self.discounts.get(discount_id)

    def list_discounts(self, ticket_type_id: TicketTypeId) -> list[Discount]:
        matching = [d for d in self.discounts.values() if d.ticket_type_id == ticket_type_id]
        return sorted(matching, key=lambda d: d.created_at, reverse=True)

    def get_active_discount(self, ticket_type_id: TicketTypeId) -> Discount | None:
        for discount in self.discounts.values():
            if discount.ticket_type_id == ticket_type_id and discount.active:
                return discount
        return None

    def create_discount(
        self, ticket_type_id: TicketTypeId, terms: DiscountTerms, created_by: int
    ) -> Discount:
        active = True if terms.active is None else terms.active
        if active and self.get_active_discount(ticket_type_id) is not None:
            raise ActiveDiscountExistsError()
        stamp = EPOCH + timedelta(seconds=next(self._ticks))
        discount = Discount(
            id=DiscountId(uuid4()),
            ticket_type_id=ticket_type_id,
            discount_type=terms.discount_type,
            value=terms.value,
            valid_from=terms.valid_from,
            valid_to=terms.valid_to,
            active=active,
            description=terms.description,
            created_by=created_by,
            created_at=stamp,
            updated_at=stamp,
        )
        self.discounts[discount.id] = discount
        return discount

    def update_discount(self, discount_id: DiscountId, terms: DiscountTerms) -> Discount:
        existing = self.discounts[discount_id]
        active = existing.active if terms.active is None else terms.active
        if active and not existing.active:
            current = self.get_active_discount(existing.ticket_type_id)
            if current is not None and current.id != discount_id:
                raise ActiveDiscountExistsError()
        updated = Discount(
            id=existing.id,
            ticket_type_id=existing.ticket_type_id,
            discount_type=terms.discount_type,
            value=terms.value,
            valid_from=terms.valid_from,
            valid_to=terms.valid_to,
            active=active,
            description=existing.description if terms.description is None else terms.description,
            created_by=existing.created_by,
            created_at=existing.created_at,
            updated_at=EPOCH + timedelta(seconds=next(self._ticks)),
        )
        self.discounts[discount_id] = updated
        return updated

    def delete_discount(self, discount_id: DiscountId) -> None:
        self.discounts.pop(discount_id, None)


class FakeTicketStore(TicketStore):
    def __init__(self, events: FakeEventStore) -> None:
        self._events = events
        self.tickets: list[Ticket] = []

    def issue_tickets(
        self,
        ticket_type_id: TicketTypeId,
        purchaser_id: int,
        quote: PriceQuote,
        quantity: int,
    ) -> list[Ticket] | None:
        ticket_type = self._events.ticket_types[ticket_type_id]
        sold = sum(1 for t in self.tickets if t.ticket_type_id == ticket_type_id)
        if sold + quantity > ticket_type.total_available.value:
            return None
        issued = [
            Ticket(
                id=TicketId(uuid4()),
                ticket_type_id=ticket_type_id,
                purchaser_id=purchaser_id,
                original_price=quote.original_price,
                price_paid=quote.final_price,
                discount_applied=quote.discount_amount,
                created_at=EPOCH,
            )
            for _ in range(quantity)
        ]
        self.tickets.extend(issued)
        return issued


class FakeInviteCodeStore(InviteCodeStore):
    def __init__(self) -> None:
        self.codes: dict[InviteCodeId, InviteCode] = {}

    def atomic(self):
        return nullcontext()

    def code_exists(self, code: str) -> bool:
        return any(c.code == code for c in self.codes.values())

    def create(self, new_code: NewInviteCode) -> InviteCode:
        invite = InviteCode(
            id=InviteCodeId(uuid4()),
            code=new_code.code,
            role_name=new_code.role_name,
            event_id=new_code.event_id,
            status=InviteCodeStatus.PENDING,
            created_by=new_code.created_by,
            created_at=new_code.created_at,
            expires_at=new_code.expires_at,
        )
        self.codes[invite.id] = invite
        return invite

    def get(self, code_id: InviteCodeId) -> InviteCode | None:
        return self.codes.get(code_id)

    def get_by_code(self, code: str) -> InviteCode | None:
        return next((c for c in self.codes.values() if c.code == code), None)

    def list_by_creator(self, creator_id: int) -> list[InviteCode]:
        return sorted(
            (c for c in self.codes.values() if c.created_by == creator_id),
            key=lambda c: c.created_at,
            reverse=True,
        )

    def list_all(self) -> list[InviteCode]:
        return sorted(self.codes.values(), key=lambda c: c.created_at, reverse=True)

    def list_by_event(self, event_id: UUID) -> list[InviteCode]:
        return sorted(
            (c for c in self.codes.values() if c.event_id == event_id),
            key=lambda c: c.created_at,
            reverse=True,
        )

    def mark_redeemed(
        self, code_id: InviteCodeId, expected_version: int, redeemed_by: int, now: datetime
    ) -> InviteCode | None:
        current = self.codes.get(code_id)
        if not self._is_current(current, expected_version) or now >= current.expires_at:
            return None
        return self._replace(
            current,
            status=InviteCodeStatus.REDEEMED,
            redeemed_by=redeemed_by,
            redeemed_at=now,
        )

    def mark_revoked(
        self, code_id: InviteCodeId, expected_version: int, reason: str, now: datetime
    ) -> InviteCode | None:
        current = self.codes.get(code_id)
        if not self._is_current(current, expected_version):
            return None
        return self._replace(
            current, status=InviteCodeStatus.REVOKED, revoked_at=now, revoked_reason=reason
        )

    def expire_pending(self, now: datetime) -> int:
        stale = [
            c
            for c in self.codes.values()
            if c.status is InviteCodeStatus.PENDING and c.expires_at < now
        ]
        for invite in stale:
            self._replace(invite, status=InviteCodeStatus.EXPIRED)
        return len(stale)

    def _is_current(self, invite: InviteCode | None, expected_version: int) -> bool:
        return (
            invite is not None
            and invite.status is InviteCodeStatus.PENDING
            and invite.version == expected_version
        )

    def _replace(self, invite: InviteCode, **changes) -> InviteCode:
        updated = replace(invite, **changes, version=invite.version + 1)
        self.codes[invite.id] = updated
        return updated


class FakeEventDirectory(EventDirectory):
    def __init__(self) -> None:
        self.organizers: dict[UUID, int] = {}

    def add_event(self, organizer_id: int) -> UUID:
        event_id = uuid4()
        self.organizers[event_id] = organizer_id
        return event_id

    def event_exists(self, event_id: UUID) -> bool:
        return event_id in self.organizers

    def is_organizer(self, user_id: int, event_id: UUID) -> bool:
        return self.organizers.get(event_id) == user_id


class FakeRoleDirectory(RoleDirectory):
    def __init__(self) -> None:
        self.grants: list[tuple[int, str, UUID | None]] = []

    def grant(self, user_id: int, role_name: str, event_id: UUID | None) -> None:
        self.grants.append((user_id, role_name, event_id))

    def roles_of(self, user_id: int) -> list[str]:
        return sorted({role for uid, role, _ in self.grants if uid == user_id})
