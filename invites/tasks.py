from celery import shared_task

from invites.wiring import expiry_sweep


@shared_task(name="invites.tasks.expire_stale_invite_codes", ignore_result=True)
def expire_stale_invite_codes() -> int:
    """Scheduled by beat; see config.celery."""
    return expiry_sweep().run()
