"""Django ORM models (persistence layer) for invite codes."""

import uuid

from django.conf import settings
from django.db import models


class InviteCode(models.Model):
    """Persistence model for role invite codes."""

    class Status(models.TextChoices):
        PENDING = "PENDING"
        REDEEMED = "REDEEMED"
        EXPIRED = "EXPIRED"
        REVOKED = "REVOKED"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=32, unique=True)
    role_name = models.CharField(max_length=50)
    event = models.ForeignKey(
        "events.Event",
        on_delete=models.CASCADE,
        blank=True,
        null=True,
        related_name="invite_codes",
    )
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="created_invite_codes"
    )
    created_at = models.DateTimeField()
    expires_at = models.DateTimeField()
    redeemed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="redeemed_invite_codes",
    )
    redeemed_at = models.DateTimeField(blank=True, null=True)
    revoked_at = models.DateTimeField(blank=True, null=True)
    revoked_reason = models.CharField(max_length=255, blank=True, null=True)
    version = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "expires_at"], name="invites_inv_status_3b7c1e_idx"),
            models.Index(fields=["created_by"], name="invites_inv_created_9d4a27_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.code} ({self.role_name}, {self.status})"
