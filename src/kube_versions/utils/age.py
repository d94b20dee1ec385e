"""Human-readable object ages, kubectl style."""

from __future__ import annotations

from datetime import datetime, timezone


def format_age(created: datetime | None, now: datetime | None = None) -> str:
    """Return ``3d``, ``5h`` or ``12m`` for a creation timestamp.

    Only the largest unit is shown.  Naive timestamps are taken as UTC.
    """
    if created is None:
        return "unknown"
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    seconds = max(int((now - created).total_seconds()), 0)
    days, rest = divmod(seconds, 86400)
    if days:
        return f"{days}d"
    hours = rest // 3600
    if hours:
        return f"{hours}h"
    return f"{rest // 60}m"


def short_timestamp(raw: str) -> str:
    """Trim an RFC 3339 timestamp to ``YYYY-MM-DD HH:MM:SS``.

    Helm writes nanosecond fractions that ``datetime.fromisoformat`` rejects
    on older interpreters, so the wall time is cut from the text as written.
    """
    return raw[:19].replace("T", " ")
