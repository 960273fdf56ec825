"""Clock abstraction so ledger timestamps can be pinned in tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current time."""
        ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, instant: datetime) -> None:
        """Create a clock pinned to ``instant`` (naive values are taken as UTC)."""
        self.instant = instant

    def now(self) -> datetime:
        """Return the pinned instant."""
        return self.instant


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as an RFC-3339 UTC string with second precision.

    Naive datetimes are assumed to already be in UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(RFC3339_FORMAT)
