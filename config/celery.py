"""
Celery application for periodic housekeeping jobs.

Run the scheduler with ``celery -A config beat`` and a worker with
``celery -A config worker``.
"""

import os
from datetime import timedelta

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("ticketing")

app.config_from_object("django.conf:settings", namespace="CELERY")

app.autodiscover_tasks()


@app.on_after_finalize.connect
def setup_periodic_tasks(sender, **kwargs):
    from django.conf import settings

    from invites.schedules import GraceDelaySchedule

    sender.add_periodic_task(
        GraceDelaySchedule(
            run_every=timedelta(seconds=settings.INVITE_EXPIRY_SWEEP_INTERVAL_SECONDS),
            initial_delay=timedelta(seconds=settings.INVITE_EXPIRY_SWEEP_DELAY_SECONDS),
        ),
        sender.signature("invites.tasks.expire_stale_invite_codes"),
        name="expire-stale-invite-codes",
    )
