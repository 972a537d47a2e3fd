"""Invite code state rules.

PENDING is the only non-terminal state; REDEEMED, EXPIRED and REVOKED
never transition again. Expiry is always judged against the clock, not
just the stored status, so a PENDING code past ``expires_at`` is already
unusable before the sweep marks it.
"""

import secrets
from datetime import datetime

from invites.domain.errors import (
    InviteCodeAlreadyUsedError,
    InviteCodeExpiredError,
    InviteCodeNotPendingError,
    InviteCodeRevokedError,
)
from invites.domain.models import InviteCode, InviteCodeStatus

CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 16
CODE_GROUP_SIZE = 4


def generate_code() -> str:
    """Return a random code such as ``7KQM-2XPA-D9RT-HC4N``."""
    chars = [secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH)]
    groups = [
        "".join(chars[i : i + CODE_GROUP_SIZE]) for i in range(0, CODE_LENGTH, CODE_GROUP_SIZE)
    ]
    return "-".join(groups)


def is_redeemable(code: InviteCode, now: datetime) -> bool:
    return code.status is InviteCodeStatus.PENDING and now < code.expires_at


def ensure_redeemable(code: InviteCode, now: datetime) -> None:
    """Raise the error that explains why ``code`` cannot be redeemed at ``now``."""
    if code.status is InviteCodeStatus.REDEEMED:
        raise InviteCodeAlreadyUsedError()
    if code.status is InviteCodeStatus.REVOKED:
        raise InviteCodeRevokedError()
    if code.status is InviteCodeStatus.EXPIRED or now >= code.expires_at:
        raise InviteCodeExpiredError()


def ensure_revocable(code: InviteCode) -> None:
    if code.status.is_terminal:
        raise InviteCodeNotPendingError()
