"""
Earnings reporting windows.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class EarningsWindows:
    """Lower bounds, in UTC, of the dashboard earnings windows."""

    start_of_today: datetime
    start_of_week: datetime
    start_of_month: datetime

    @classmethod
    def for_moment(cls, now: datetime) -> "EarningsWindows":
        """
        Compute the windows for a timezone-aware local "now".

        Weeks start on Sunday. The month window is widened to the start of
        the week when the week began in the previous month, so that the
        month sum never falls below the week sum.
        """
        if now.tzinfo is None:
            raise ValueError("now must be timezone-aware")

        start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        # Python weekday(): Monday=0 .. Sunday=6; shift so Sunday=0
        days_since_sunday = (start_of_today.weekday() + 1) % 7
        start_of_week = start_of_today - timedelta(days=days_since_sunday)
        start_of_month = start_of_today.replace(day=1)

        return cls(
            start_of_today=start_of_today.astimezone(timezone.utc),
            start_of_week=start_of_week.astimezone(timezone.utc),
            start_of_month=min(start_of_month, start_of_week).astimezone(
                timezone.utc
            ),
        )
