"""Periodic marking of expired invite codes.

Hygiene only: redemption re-checks expiry itself, so a skipped or failed
sweep never lets an expired code through.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from invites.stores.interfaces import InviteCodeStore

logger = logging.getLogger(__name__)


class InviteCodeExpirySweep:
    """Marks PENDING codes past ``expires_at`` as EXPIRED in one bulk update."""

    def __init__(
        self, store: InviteCodeStore, clock: Callable[[], datetime] = timezone.now
    ) -> None:
        self._store = store
        self._clock = clock

    def run(self) -> int:
        """Run one sweep. Never raises; returns the number of codes expired."""
        try:
            expired = self._store.expire_pending(self._clock())
        except Exception:
            logger.exception("Invite code expiry sweep failed; will retry on next run")
            return 0

        if expired:
            logger.info("Invite code expiry sweep: marked %d code(s) as EXPIRED", expired)
        else:
            logger.debug("Invite code expiry sweep: no codes to expire")
        return expired
