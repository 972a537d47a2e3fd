"""
Mark expired invite codes outside the beat schedule.

Usage:
    python manage.py expire_invite_codes
    python manage.py expire_invite_codes --dry-run  # Preview what would be expired
"""

from django.core.management.base import BaseCommand
from django.utils import timezone

from invites.models import InviteCode
from invites.wiring import expiry_sweep


class Command(BaseCommand):
    help = "Mark PENDING invite codes past their expiry as EXPIRED"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show how many codes would be expired without changing them",
        )

    def handle(self, *args, **options):
        if options["dry_run"]:
            pending = InviteCode.objects.filter(
                status=InviteCode.Status.PENDING, expires_at__lt=timezone.now()
            ).count()
            self.stdout.write(self.style.WARNING(f"DRY RUN: {pending} code(s) would be expired"))
            return

        expired = expiry_sweep().run()
        self.stdout.write(self.style.SUCCESS(f"Marked {expired} code(s) as EXPIRED"))
