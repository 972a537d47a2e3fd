"""Store interfaces for invite codes and their collaborators.

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime
from uuid import UUID

from invites.domain import InviteCode, InviteCodeId, NewInviteCode


class InviteCodeStore(ABC):
    """Interface for invite code persistence operations.

    State transitions are conditional writes: they only apply while the
    stored row is still PENDING at ``expected_version`` and return None
    otherwise, so two concurrent callers can never both win.
    """

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Scope in which a transition and its side effects commit together."""
        ...

    @abstractmethod
    def code_exists(self, code: str) -> bool:
        ...

    @abstractmethod
    def create(self, new_code: NewInviteCode) -> InviteCode:
        ...

    @abstractmethod
    def get(self, code_id: InviteCodeId) -> InviteCode | None:
        ...

    @abstractmethod
    def get_by_code(self, code: str) -> InviteCode | None:
        ...

    @abstractmethod
    def list_by_creator(self, creator_id: int) -> list[InviteCode]:
        """Return codes created by a user, newest first."""
        ...

    @abstractmethod
    def list_all(self) -> list[InviteCode]:
        """Return every code, newest first."""
        ...

    @abstractmethod
    def list_by_event(self, event_id: UUID) -> list[InviteCode]:
        """Return codes scoped to an event, newest first."""
        ...

    @abstractmethod
    def mark_redeemed(
        self, code_id: InviteCodeId, expected_version: int, redeemed_by: int, now: datetime
    ) -> InviteCode | None:
        """PENDING -> REDEEMED if unexpired and still at ``expected_version``."""
        ...

    @abstractmethod
    def mark_revoked(
        self, code_id: InviteCodeId, expected_version: int, reason: str, now: datetime
    ) -> InviteCode | None:
        """PENDING -> REVOKED if still at ``expected_version``."""
        ...

    @abstractmethod
    def expire_pending(self, now: datetime) -> int:
        """Mark every PENDING code with ``expires_at`` before ``now`` as EXPIRED.

        Returns the number of codes updated.
        """
        ...


class EventDirectory(ABC):
    """Read access to events for invite scoping."""

    @abstractmethod
    def event_exists(self, event_id: UUID) -> bool:
        ...

    @abstractmethod
    def is_organizer(self, user_id: int, event_id: UUID) -> bool:
        ...


class RoleDirectory(ABC):
    """Grants roles to users."""

    @abstractmethod
    def grant(self, user_id: int, role_name: str, event_id: UUID | None) -> None:
        """Grant ``role_name``; event-scoped grants also attach the user to the event."""
        ...

    @abstractmethod
    def roles_of(self, user_id: int) -> list[str]:
        ...
