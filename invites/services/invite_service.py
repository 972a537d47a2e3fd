"""Invite code service - issuing, redeeming and revoking role invites.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from uuid import UUID

from django.utils import timezone

from invites.domain import InviteCode, InviteCodeId, NewInviteCode
from invites.domain.errors import (
    CodeGenerationError,
    EventRequiredError,
    InvalidExpirationError,
    InvalidInviteCodeIdError,
    InvalidRoleError,
    InviteCodeAlreadyUsedError,
    InviteCodeNotFoundError,
    InviteCodeNotPendingError,
    InviteEventNotFoundError,
    InviteNotAllowedError,
    RevocationReasonRequiredError,
    RoleNotEventScopedError,
)
from invites.domain.lifecycle import (
    ensure_redeemable,
    ensure_revocable,
    generate_code,
    is_redeemable,
)
from invites.stores.interfaces import EventDirectory, InviteCodeStore, RoleDirectory

logger = logging.getLogger(__name__)

STAFF_ROLE = "STAFF"
ADMIN_ROLE = "ADMIN"
MAX_GENERATION_ATTEMPTS = 10


def parse_code_id(value: str) -> InviteCodeId:
    try:
        return InviteCodeId.from_string(value)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidInviteCodeIdError() from exc


class InviteCodeService:
    """Service for the invite code lifecycle."""

    def __init__(
        self,
        store: InviteCodeStore,
        events: EventDirectory,
        roles: RoleDirectory,
        allowed_roles: Iterable[str],
        default_ttl: timedelta,
        clock: Callable[[], datetime] = timezone.now,
        code_factory: Callable[[], str] = generate_code,
    ) -> None:
        self._store = store
        self._events = events
        self._roles = roles
        self._allowed_roles = frozenset(allowed_roles)
        self._default_ttl = default_ttl
        self._clock = clock
        self._code_factory = code_factory

    def issue(
        self,
        creator_id: int,
        role_name: str,
        event_id: UUID | None = None,
        expiration_hours: int | None = None,
        *,
        is_admin: bool = False,
    ) -> InviteCode:
        """Create a PENDING code granting ``role_name``.

        Only STAFF codes are scoped to an event and need the event's
        organizer (or an admin). Every other role is platform-wide and
        needs an admin.

        Raises:
            InvalidRoleError: If the role cannot be granted by invite.
            EventRequiredError: If a STAFF invite has no event.
            RoleNotEventScopedError: If a non-STAFF invite names an event.
            InvalidExpirationError: If ``expiration_hours`` is not positive.
            InviteEventNotFoundError: If the event does not exist.
            InviteNotAllowedError: If the creator may not issue this code.
        """
        logger.info(
            "Issuing invite code: creator=%s, role=%s, event=%s, expires_in_hours=%s",
            creator_id,
            role_name,
            event_id,
            expiration_hours,
        )
        if role_name not in self._allowed_roles:
            raise InvalidRoleError()
        if role_name == STAFF_ROLE:
            if event_id is None:
                raise EventRequiredError()
        elif event_id is not None:
            raise RoleNotEventScopedError()
        if expiration_hours is not None and expiration_hours <= 0:
            raise InvalidExpirationError()

        if event_id is not None:
            if not self._events.event_exists(event_id):
                raise InviteEventNotFoundError()
            if not is_admin and not self._events.is_organizer(creator_id, event_id):
                logger.warning(
                    "Access denied: user %s cannot issue invites for event %s",
                    creator_id,
                    event_id,
                )
                raise InviteNotAllowedError()
        elif not is_admin:
            logger.warning("Access denied: user %s cannot issue platform invites", creator_id)
            raise InviteNotAllowedError()

        ttl = self._default_ttl if expiration_hours is None else timedelta(hours=expiration_hours)
        now = self._clock()
        invite = self._store.create(
            NewInviteCode(
                code=self._unique_code(),
                role_name=role_name,
                event_id=event_id,
                created_by=creator_id,
                created_at=now,
                expires_at=now + ttl,
            )
        )
        logger.info(
            "Issued invite code %s for role %s, expires at %s",
            invite.id.value,
            role_name,
            invite.expires_at,
        )
        return invite

    def is_valid(self, code_id: str) -> bool:
        """Whether the code could be redeemed right now."""
        return is_redeemable(self._load(code_id), self._clock())

    def redeem(self, user_id: int, code: str) -> InviteCode:
        """Redeem ``code`` for ``user_id`` and grant its role.

        Expiry is checked at this instant regardless of stored status.
        The transition is a conditional write: of several concurrent
        attempts exactly one succeeds, the rest get InviteCodeAlreadyUsedError.
        A repeated redeem after success also fails with that error.

        Raises:
            InviteCodeNotFoundError: If no code matches.
            InviteCodeExpiredError: If the code is past ``expires_at``.
            InviteCodeAlreadyUsedError: If the code was already redeemed.
            InviteCodeRevokedError: If the code was revoked.
        """
        logger.info("User %s redeeming an invite code", user_id)
        invite = self._store.get_by_code(code.strip().upper())
        if invite is None:
            raise InviteCodeNotFoundError()

        now = self._clock()
        ensure_redeemable(invite, now)

        with self._store.atomic():
            redeemed = self._store.mark_redeemed(invite.id, invite.version, user_id, now)
            if redeemed is None:
                logger.info("Lost redemption race for invite code %s", invite.id.value)
                current = self._store.get(invite.id)
                if current is not None:
                    ensure_redeemable(current, now)
                raise InviteCodeAlreadyUsedError()
            self._roles.grant(user_id, redeemed.role_name, redeemed.event_id)

        if redeemed.role_name == ADMIN_ROLE:
            logger.warning(
                "ADMIN role granted to user %s via invite code %s created by %s",
                user_id,
                redeemed.id.value,
                redeemed.created_by,
            )
        logger.info("User %s redeemed invite code %s", user_id, redeemed.id.value)
        return redeemed

    def revoke(
        self, revoker_id: int, code_id: str, reason: str, *, is_admin: bool = False
    ) -> InviteCode:
        """Move a PENDING code to REVOKED.

        Raises:
            RevocationReasonRequiredError: If ``reason`` is blank.
            InviteNotAllowedError: If the revoker neither created the code
                nor is an admin.
            InviteCodeNotPendingError: If the code already reached a
                terminal state.
        """
        logger.info("User %s revoking invite code %s", revoker_id, code_id)
        if not reason or not reason.strip():
            raise RevocationReasonRequiredError()

        invite = self._load(code_id)
        if not is_admin and invite.created_by != revoker_id:
            logger.warning("Access denied: user %s cannot revoke code %s", revoker_id, code_id)
            raise InviteNotAllowedError()
        ensure_revocable(invite)

        revoked = self._store.mark_revoked(
            invite.id, invite.version, reason.strip(), self._clock()
        )
        if revoked is None:
            raise InviteCodeNotPendingError()
        logger.info("Revoked invite code %s", code_id)
        return revoked

    def get(self, viewer_id: int, code_id: str, *, is_admin: bool = False) -> InviteCode:
        """Return a code to its creator, the organizer of its event, or an admin.

        Raises:
            InviteNotAllowedError: If anyone else asks for it.
        """
        invite = self._load(code_id)
        if is_admin or invite.created_by == viewer_id:
            return invite
        if invite.event_id is not None and self._events.is_organizer(viewer_id, invite.event_id):
            return invite
        logger.warning("Access denied: user %s cannot view code %s", viewer_id, code_id)
        raise InviteNotAllowedError()

    def list_created_by(self, creator_id: int) -> list[InviteCode]:
        return self._store.list_by_creator(creator_id)

    def list_all(self, *, is_admin: bool = False) -> list[InviteCode]:
        if not is_admin:
            raise InviteNotAllowedError()
        return self._store.list_all()

    def list_for_event(
        self, user_id: int, event_id: UUID, *, is_admin: bool = False
    ) -> list[InviteCode]:
        if not self._events.event_exists(event_id):
            raise InviteEventNotFoundError()
        if not is_admin and not self._events.is_organizer(user_id, event_id):
            raise InviteNotAllowedError()
        return self._store.list_by_event(event_id)

    def roles_of(self, user_id: int) -> list[str]:
        return self._roles.roles_of(user_id)

    def _load(self, code_id: str) -> InviteCode:
        invite = self._store.get(parse_code_id(code_id))
        if invite is None:
            raise InviteCodeNotFoundError()
        return invite

    def _unique_code(self) -> str:
        for _ in range(MAX_GENERATION_ATTEMPTS):
            code = self._code_factory()
            if not self._store.code_exists(code):
                return code
        raise CodeGenerationError()
