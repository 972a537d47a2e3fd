"""Domain models for invite codes."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Self
from uuid import UUID


class InviteCodeStatus(Enum):
    PENDING = "PENDING"
    REDEEMED = "REDEEMED"
    EXPIRED = "EXPIRED"
    REVOKED = "REVOKED"

    @property
    def is_terminal(self) -> bool:
        return self is not InviteCodeStatus.PENDING


@dataclass(frozen=True)
class InviteCodeId:
    """Unique identifier for an InviteCode."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))


@dataclass(frozen=True)
class InviteCode:
    """Domain representation of an InviteCode.

    ``event_id`` is None for platform-wide roles. ``version`` is the
    optimistic concurrency token bumped by every state transition.
    """

    id: InviteCodeId
    code: str
    role_name: str
    event_id: UUID | None
    status: InviteCodeStatus
    created_by: int
    created_at: datetime
    expires_at: datetime
    redeemed_by: int | None = None
    redeemed_at: datetime | None = None
    revoked_at: datetime | None = None
    revoked_reason: str | None = None
    version: int = 0


@dataclass(frozen=True)
class NewInviteCode:
    """Values for a code about to be stored."""

    code: str
    role_name: str
    event_id: UUID | None
    created_by: int
    created_at: datetime
    expires_at: datetime
