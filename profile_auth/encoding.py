"""RFC3339 timestamp formatting with millisecond precision.

SIWE messages carry an issued-at timestamp in the `YYYY-MM-DDTHH:MM:SS.sssZ`
form, and cached sessions record when they were obtained in epoch
milliseconds. Both come from the same clock so tests can pin time.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from profile_auth.interfaces.encoding import ITimestamper

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Rfc3339Millis(ITimestamper):
    """RFC3339 timestamp formatter with millisecond precision."""

    def format(self, when: datetime) -> str:
        """Format a datetime object as an RFC3339 string with millisecond precision.

        Args:
            when: The datetime to format. Naive datetimes are assumed to be UTC.

        Returns:
            The formatted timestamp string.

        Example:
            >>> from datetime import datetime, timezone
            >>> dt = datetime(2025, 1, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
            >>> Rfc3339Millis().format(dt)
            '2025-01-01T12:00:00.123Z'
        """
        if when.tzinfo is not None:
            when = when.astimezone(timezone.utc)
        else:
            when = when.replace(tzinfo=timezone.utc)

        return when.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def now(self) -> datetime:
        """Get the current datetime in UTC.

        Returns:
            The current datetime with UTC timezone.
        """
        return datetime.now(timezone.utc)


def epoch_millis(when: datetime) -> int:
    """Convert a datetime to integer milliseconds since the Unix epoch.

    Naive datetimes are assumed to be UTC.
    """
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)

    return (when - _EPOCH) // timedelta(milliseconds=1)
