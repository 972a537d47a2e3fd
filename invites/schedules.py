"""Celery beat schedule with a startup grace delay."""

from datetime import timedelta

from celery.schedules import schedstate, schedule


class GraceDelaySchedule(schedule):
    """Fixed-interval schedule that waits ``initial_delay`` after beat starts.

    The first run happens once the delay has passed; after that the
    schedule repeats every ``run_every`` like a plain ``schedule``.
    """

    def __init__(
        self,
        run_every: timedelta,
        initial_delay: timedelta,
        relative: bool = False,
        nowfun=None,
        app=None,
    ) -> None:
        super().__init__(run_every=run_every, relative=relative, nowfun=nowfun, app=app)
        self.initial_delay = initial_delay
        self._armed_at = None
        self._primed = False

    def is_due(self, last_run_at):
        now = self.now()
        if self._armed_at is None:
            self._armed_at = now

        if not self._primed:
            remaining = (self._armed_at + self.initial_delay - now).total_seconds()
            if remaining > 0:
                return schedstate(is_due=False, next=remaining)
            self._primed = True
            return schedstate(is_due=True, next=self.seconds)

        return super().is_due(last_run_at)

    def __repr__(self) -> str:
        return f"<grace-delay {self.initial_delay}, every {self.human_seconds}>"

    def __reduce__(self):
        return self.__class__, (self.run_every, self.initial_delay, self.relative, self.nowfun)
