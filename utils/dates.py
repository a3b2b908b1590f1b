from calendar import monthrange
from datetime import date, datetime, timedelta


def date_key(value) -> str:
    """Canonical ``YYYY-MM-DD`` key for a calendar date.

    Time of day is ignored; a string already in key form passes through.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def parse_date_key(key: str) -> date:
    try:
        return date.fromisoformat(key)
    except (TypeError, ValueError) as exc:
        raise ValueError("invalid date key") from exc


def normalize_date(raw_date: str) -> str:
    raw_date = (raw_date or "").strip()
    for fmt in ("%Y-%m-%d", "%m/%d/%Y"):
        try:
            return datetime.strptime(raw_date, fmt).strftime("%Y-%m-%d")
        except ValueError:
            continue
    raise ValueError(f"unrecognized date: {raw_date!r}")


def to_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return parse_date_key(value)
    return value


def get_week_start(value, week_starts_on: int = 1) -> date:
    """Most recent ``week_starts_on`` weekday at or before ``value``.

    Days are numbered 0 = Sunday ... 6 = Saturday.
    """
    day = to_date(value)
    weekday = day.isoweekday() % 7
    return day - timedelta(days=(weekday - week_starts_on) % 7)


def get_week_end(value, week_starts_on: int = 1) -> date:
    return get_week_start(value, week_starts_on) + timedelta(days=6)


def days_in_month(year: int, month: int) -> int:
    # month is zero-indexed
    return monthrange(year, month + 1)[1]


def get_month_bounds(year: int, month: int):
    start = date(year, month + 1, 1)
    end = date(year, month + 1, days_in_month(year, month))
    return start, end
