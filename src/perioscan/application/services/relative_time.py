"""Human relative time ("5 minutes ago", "in 2 days")."""

from datetime import UTC, datetime

# Thresholds follow the usual rounding of relative-time libraries:
# 45s, 45min, 22h, 26d, 320d.
_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def _phrase(seconds: float) -> str:
    if seconds < 45:
        return "a few seconds"
    if seconds < 90:
        return "a minute"
    if seconds < 45 * _MINUTE:
        return f"{round(seconds / _MINUTE)} minutes"
    if seconds < 90 * _MINUTE:
        return "an hour"
    if seconds < 22 * _HOUR:
        return f"{round(seconds / _HOUR)} hours"
    if seconds < 36 * _HOUR:
        return "a day"
    days = seconds / _DAY
    if days < 26:
        return f"{round(days)} days"
    if days < 45:
        return "a month"
    if days < 320:
        return f"{max(2, round(days / 30.4375))} months"
    if days < 548:
        return "a year"
    return f"{max(2, round(days / 365.25))} years"


def human_relative_time(moment: datetime, now: datetime | None = None) -> str:
    """Describe `moment` relative to `now` (default: current UTC time)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    now = now or datetime.now(UTC)
    delta = (now - moment).total_seconds()
    phrase = _phrase(abs(delta))
    return f"{phrase} ago" if delta >= 0 else f"in {phrase}"
