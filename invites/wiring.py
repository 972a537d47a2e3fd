"""Builds services with their Django-backed stores."""

from datetime import timedelta

from django.conf import settings

from invites.services.expiry_sweep import InviteCodeExpirySweep
from invites.services.invite_service import InviteCodeService
from invites.stores.django_store import (
    DjangoEventDirectory,
    DjangoInviteCodeStore,
    DjangoRoleDirectory,
)


def invite_service() -> InviteCodeService:
    return InviteCodeService(
        store=DjangoInviteCodeStore(),
        events=DjangoEventDirectory(),
        roles=DjangoRoleDirectory(),
        allowed_roles=settings.INVITE_CODE_ROLES,
        default_ttl=timedelta(hours=settings.INVITE_CODE_TTL_HOURS),
    )


def expiry_sweep() -> InviteCodeExpirySweep:
    return InviteCodeExpirySweep(DjangoInviteCodeStore())
