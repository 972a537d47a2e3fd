"""Integration tests for the Django ORM stores."""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.db import IntegrityError, transaction
from django.utils import timezone

from events import models as event_models
from events.domain import DiscountTerms, DiscountType, EventId, Money, TicketTypeId
from events.domain.errors import ActiveDiscountExistsError
from events.domain.pricing import PriceQuote
from events.stores.django_store import DjangoDiscountStore, DjangoEventStore, DjangoTicketStore
from invites.domain import InviteCodeStatus, NewInviteCode
from invites.stores.django_store import (
    DjangoEventDirectory,
    DjangoInviteCodeStore,
    DjangoRoleDirectory,
)


def terms(active=None, value="10", window=None) -> DiscountTerms:
    now = timezone.now()
    valid_from, valid_to = window or (now - timedelta(days=1), now + timedelta(days=1))
    return DiscountTerms(
        discount_type=DiscountType.PERCENTAGE,
        value=Decimal(value),
        valid_from=valid_from,
        valid_to=valid_to,
        active=active,
    )


@pytest.mark.django_db
class TestDjangoEventStore:
    def test_returns_domain_models(self, event, ticket_type, organizer):
        store = DjangoEventStore()

        loaded = store.get_ticket_type(TicketTypeId(ticket_type.pk))

        assert loaded.price == Money(Decimal("100.00"))
        assert loaded.event_id == EventId(event.pk)
        assert store.get_event(EventId(event.pk)).name == "Summer Festival"
        assert store.is_organizer(organizer.pk, EventId(event.pk))


@pytest.mark.django_db
class TestDjangoDiscountStore:
    def test_second_active_discount_conflicts(self, ticket_type, organizer):
        store = DjangoDiscountStore()
        store.create_discount(TicketTypeId(ticket_type.pk), terms(), organizer.pk)

        with pytest.raises(ActiveDiscountExistsError):
            store.create_discount(TicketTypeId(ticket_type.pk), terms(), organizer.pk)
        assert event_models.Discount.objects.filter(ticket_type=ticket_type).count() == 1

    def test_activation_conflict_on_update(self, ticket_type, organizer):
        store = DjangoDiscountStore()
        key = TicketTypeId(ticket_type.pk)
        store.create_discount(key, terms(), organizer.pk)
        inactive = store.create_discount(key, terms(active=False), organizer.pk)

        with pytest.raises(ActiveDiscountExistsError):
            store.update_discount(inactive.id, terms(active=True))

    def test_update_keeps_omitted_fields(self, ticket_type, organizer):
        store = DjangoDiscountStore()
        created = store.create_discount(
            TicketTypeId(ticket_type.pk),
            DiscountTerms(
                discount_type=DiscountType.FIXED_AMOUNT,
                value=Decimal("5.00"),
                valid_from=timezone.now(),
                valid_to=timezone.now() + timedelta(days=3),
                description="Early bird",
            ),
            organizer.pk,
        )

        updated = store.update_discount(created.id, terms(value="20"))

        assert updated.active is True
        assert updated.description == "Early bird"
        assert updated.discount_type is DiscountType.PERCENTAGE

    def test_database_rejects_two_active_discounts(self, ticket_type):
        now = timezone.now()
        fields = dict(
            ticket_type=ticket_type,
            discount_type="PERCENTAGE",
            value=Decimal("10"),
            valid_from=now,
            valid_to=now + timedelta(days=1),
            active=True,
        )
        event_models.Discount.objects.create(**fields)

        with pytest.raises(IntegrityError), transaction.atomic():
            event_models.Discount.objects.create(**fields)

    def test_database_rejects_percentage_above_hundred(self, ticket_type):
        now = timezone.now()

        with pytest.raises(IntegrityError), transaction.atomic():
            event_models.Discount.objects.create(
                ticket_type=ticket_type,
                discount_type="PERCENTAGE",
                value=Decimal("120"),
                valid_from=now,
                valid_to=now + timedelta(days=1),
            )


@pytest.mark.django_db
class TestDjangoTicketStore:
    def test_issue_respects_capacity(self, ticket_type, attendee):
        store = DjangoTicketStore()
        quote = PriceQuote(
            original_price=Money(Decimal("100.00")),
            final_price=Money(Decimal("90.00")),
            discount_amount=Money(Decimal("10.00")),
        )

        tickets = store.issue_tickets(TicketTypeId(ticket_type.pk), attendee.pk, quote, 4)

        assert len(tickets) == 4
        assert tickets[0].discount_applied == Money(Decimal("10.00"))
        assert store.issue_tickets(TicketTypeId(ticket_type.pk), attendee.pk, quote, 2) is None
        assert event_models.Ticket.objects.count() == 4


@pytest.fixture
def invite_store() -> DjangoInviteCodeStore:
    return DjangoInviteCodeStore()


def new_code(
    creator_id, code="ABCD-EFGH-JKLM-NPQR", expires_in=timedelta(hours=24), event_id=None
):
    now = timezone.now()
    return NewInviteCode(
        code=code,
        role_name="ATTENDEE",
        event_id=event_id,
        created_by=creator_id,
        created_at=now,
        expires_at=now + expires_in,
    )


@pytest.mark.django_db
class TestDjangoInviteCodeStore:
    def test_create_and_lookup(self, invite_store, organizer):
        invite = invite_store.create(new_code(organizer.pk))

        assert invite.status is InviteCodeStatus.PENDING
        assert invite.version == 0
        assert invite_store.code_exists("ABCD-EFGH-JKLM-NPQR")
        assert invite_store.get_by_code("ABCD-EFGH-JKLM-NPQR") == invite

    def test_redeem_transition_applies_once(self, invite_store, organizer, attendee):
        invite = invite_store.create(new_code(organizer.pk))
        now = timezone.now()

        first = invite_store.mark_redeemed(invite.id, invite.version, attendee.pk, now)
        second = invite_store.mark_redeemed(invite.id, invite.version, organizer.pk, now)

        assert first.status is InviteCodeStatus.REDEEMED
        assert first.redeemed_by == attendee.pk
        assert first.version == 1
        assert second is None
        assert invite_store.get(invite.id).redeemed_by == attendee.pk

    def test_redeem_transition_rejects_expired_code(self, invite_store, organizer, attendee):
        invite = invite_store.create(new_code(organizer.pk, expires_in=timedelta(hours=-1)))

        assert invite_store.mark_redeemed(
            invite.id, invite.version, attendee.pk, timezone.now()
        ) is None

    def test_revoke_after_redeem_is_a_no_op(self, invite_store, organizer, attendee):
        invite = invite_store.create(new_code(organizer.pk))
        invite_store.mark_redeemed(invite.id, invite.version, attendee.pk, timezone.now())

        assert invite_store.mark_revoked(invite.id, invite.version, "late", timezone.now()) is None
        assert invite_store.get(invite.id).status is InviteCodeStatus.REDEEMED

    def test_expire_pending_marks_only_stale_codes(self, invite_store, organizer, attendee):
        stale = invite_store.create(
            new_code(organizer.pk, "AAAA-AAAA-AAAA-AAAA", timedelta(hours=-1))
        )
        fresh = invite_store.create(new_code(organizer.pk, "BBBB-BBBB-BBBB-BBBB"))
        used = invite_store.create(new_code(organizer.pk, "CCCC-CCCC-CCCC-CCCC"))
        invite_store.mark_redeemed(used.id, used.version, attendee.pk, timezone.now())

        assert invite_store.expire_pending(timezone.now() + timedelta(minutes=1)) == 1
        assert invite_store.expire_pending(timezone.now() + timedelta(minutes=1)) == 0
        assert invite_store.get(stale.id).status is InviteCodeStatus.EXPIRED
        assert invite_store.get(fresh.id).status is InviteCodeStatus.PENDING
        assert invite_store.get(used.id).status is InviteCodeStatus.REDEEMED

    def test_list_by_event(self, invite_store, organizer, event):
        scoped = invite_store.create(new_code(organizer.pk, event_id=event.pk))
        invite_store.create(new_code(organizer.pk, "BBBB-BBBB-BBBB-BBBB"))

        assert [c.id for c in invite_store.list_by_event(event.pk)] == [scoped.id]
        assert len(invite_store.list_by_creator(organizer.pk)) == 2

    def test_list_all_is_newest_first(self, invite_store, organizer, staff_user):
        older = invite_store.create(new_code(organizer.pk, "AAAA-AAAA-AAAA-AAAA"))
        newer = invite_store.create(new_code(staff_user.pk, "BBBB-BBBB-BBBB-BBBB"))

        assert [c.id for c in invite_store.list_all()] == [newer.id, older.id]


@pytest.mark.django_db
class TestDirectories:
    def test_event_directory(self, event, organizer, attendee):
        directory = DjangoEventDirectory()

        assert directory.event_exists(event.pk)
        assert directory.is_organizer(organizer.pk, event.pk)
        assert not directory.is_organizer(attendee.pk, event.pk)

    def test_staff_grant_joins_event(self, event, attendee):
        roles = DjangoRoleDirectory()

        roles.grant(attendee.pk, "STAFF", event.pk)

        assert roles.roles_of(attendee.pk) == ["STAFF"]
        assert event.staff.filter(pk=attendee.pk).exists()

    def test_platform_grant(self, attendee):
        roles = DjangoRoleDirectory()

        roles.grant(attendee.pk, "ORGANIZER", None)
        roles.grant(attendee.pk, "ORGANIZER", None)

        assert roles.roles_of(attendee.pk) == ["ORGANIZER"]
