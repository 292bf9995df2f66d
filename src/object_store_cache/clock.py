"""Time sources used to compute and evaluate cache entry expiry."""

from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current time."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """Clock that only moves when told to.

    Naive datetimes passed in are taken to be UTC so that
    ``now().timestamp()`` does not depend on the host's local zone.
    """

    def __init__(self, now: datetime | None = None):
        self._now = _as_utc(now) if now is not None else datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = _as_utc(now)

    def advance(self, delta: timedelta | int) -> None:
        if isinstance(delta, int):
            delta = timedelta(seconds=delta)
        self._now = self._now + delta


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
