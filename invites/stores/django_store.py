"""Django ORM implementations of the invite stores."""

from contextlib import AbstractContextManager
from datetime import datetime
from uuid import UUID

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.db import transaction
from django.db.models import F

from events.models import Event
from invites import models
from invites.domain import InviteCode, InviteCodeId, InviteCodeStatus, NewInviteCode
from invites.stores.interfaces import EventDirectory, InviteCodeStore, RoleDirectory

STAFF_ROLE = "STAFF"


def _to_invite_code(row: models.InviteCode) -> InviteCode:
    return InviteCode(
        id=InviteCodeId(row.id),
        code=row.code,
        role_name=row.role_name,
        event_id=row.event_id,
        status=InviteCodeStatus(row.status),
        created_by=row.created_by_id,
        created_at=row.created_at,
        expires_at=row.expires_at,
        redeemed_by=row.redeemed_by_id,
        redeemed_at=row.redeemed_at,
        revoked_at=row.revoked_at,
        revoked_reason=row.revoked_reason,
        version=row.version,
    )


class DjangoInviteCodeStore(InviteCodeStore):
    """Invite code store backed by the Django ORM.

    Transitions are single UPDATE statements filtered on status and
    version, so the database decides which concurrent caller wins.
    """

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic()

    def code_exists(self, code: str) -> bool:
        return models.InviteCode.objects.filter(code=code).exists()

    def create(self, new_code: NewInviteCode) -> InviteCode:
        row = models.InviteCode.objects.create(
            code=new_code.code,
            role_name=new_code.role_name,
            event_id=new_code.event_id,
            status=models.InviteCode.Status.PENDING,
            created_by_id=new_code.created_by,
            created_at=new_code.created_at,
            expires_at=new_code.expires_at,
        )
        return _to_invite_code(row)

    def get(self, code_id: InviteCodeId) -> InviteCode | None:
        row = models.InviteCode.objects.filter(pk=code_id.value).first()
        return _to_invite_code(row) if row else None

    def get_by_code(self, code: str) -> InviteCode | None:
        row = models.InviteCode.objects.filter(code=code).first()
        return _to_invite_code(row) if row else None

    def list_by_creator(self, creator_id: int) -> list[InviteCode]:
        rows = models.InviteCode.objects.filter(created_by_id=creator_id).order_by("-created_at")
        return [_to_invite_code(row) for row in rows]

    def list_all(self) -> list[InviteCode]:
        return [_to_invite_code(row) for row in models.InviteCode.objects.order_by("-created_at")]

    def list_by_event(self, event_id: UUID) -> list[InviteCode]:
        rows = models.InviteCode.objects.filter(event_id=event_id).order_by("-created_at")
        return [_to_invite_code(row) for row in rows]

    def mark_redeemed(
        self, code_id: InviteCodeId, expected_version: int, redeemed_by: int, now: datetime
    ) -> InviteCode | None:
        updated = models.InviteCode.objects.filter(
            pk=code_id.value,
            status=models.InviteCode.Status.PENDING,
            version=expected_version,
            expires_at__gt=now,
        ).update(
            status=models.InviteCode.Status.REDEEMED,
            redeemed_by_id=redeemed_by,
            redeemed_at=now,
            version=F("version") + 1,
        )
        return self.get(code_id) if updated else None

    def mark_revoked(
        self, code_id: InviteCodeId, expected_version: int, reason: str, now: datetime
    ) -> InviteCode | None:
        updated = models.InviteCode.objects.filter(
            pk=code_id.value,
            status=models.InviteCode.Status.PENDING,
            version=expected_version,
        ).update(
            status=models.InviteCode.Status.REVOKED,
            revoked_at=now,
            revoked_reason=reason,
            version=F("version") + 1,
        )
        return self.get(code_id) if updated else None

    def expire_pending(self, now: datetime) -> int:
        return models.InviteCode.objects.filter(
            status=models.InviteCode.Status.PENDING,
            expires_at__lt=now,
        ).update(
            status=models.InviteCode.Status.EXPIRED,
            version=F("version") + 1,
        )


class DjangoEventDirectory(EventDirectory):
    def event_exists(self, event_id: UUID) -> bool:
        return Event.objects.filter(pk=event_id).exists()

    def is_organizer(self, user_id: int, event_id: UUID) -> bool:
        return Event.objects.filter(pk=event_id, organizer_id=user_id).exists()


class DjangoRoleDirectory(RoleDirectory):
    """Roles are auth groups named after the role; staff also join the event."""

    def grant(self, user_id: int, role_name: str, event_id: UUID | None) -> None:
        user = get_user_model().objects.get(pk=user_id)
        group, _ = Group.objects.get_or_create(name=role_name)
        user.groups.add(group)
        if role_name == STAFF_ROLE and event_id is not None:
            Event.objects.get(pk=event_id).staff.add(user)

    def roles_of(self, user_id: int) -> list[str]:
        return sorted(
            Group.objects.filter(user__pk=user_id).values_list("name", flat=True)
        )
