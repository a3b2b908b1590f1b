"""
Positive Message Engine — Fixed-Priority Encouragement Selection

Pure functions over already-computed today/weekly/monthly progress.
No randomness; no memory of earlier messages.
"""
from models.budget_progress_dto import PositiveMessage

WEEKLY_MIN_DAYS_TRACKED = 3


def get_positive_message(today_status, weekly_progress, monthly_progress):
    """
    Pick one encouraging message, first matching rule wins.

    Priority:
    1. Ahead of the month-to-date baseline
    2. Weekly budget left after at least three tracked days
    3. Under budget today
    4. Rollover carried in from yesterday

    Returns:
        PositiveMessage, or None when no rule matches.

    ``streak`` messages are never produced here.
    """
    if monthly_progress.ahead_behind_amount > 0:
        return PositiveMessage(
            type="monthly_ahead",
            message="You're ahead this month!",
            amount=monthly_progress.ahead_behind_amount,
        )

    if (weekly_progress.remaining > 0
            and weekly_progress.days_tracked >= WEEKLY_MIN_DAYS_TRACKED):
        return PositiveMessage(
            type="weekly_ahead",
            message="Great week so far!",
            amount=weekly_progress.remaining,
        )

    if today_status.saved_today > 0:
        return PositiveMessage(
            type="under_budget",
            message="You saved today!",
            amount=today_status.saved_today,
        )

    if today_status.rollover_from_yesterday > 0:
        return PositiveMessage(
            type="rollover_growing",
            message="Extra flexibility available",
            amount=today_status.rollover_from_yesterday,
        )

    return None


def get_under_budget_streak(daily_breakdown) -> int:
    """Consecutive days at or under the nominal limit, counted back from the last day."""
    streak = 0
    for day in reversed(daily_breakdown):
        if day.remaining < 0:
            break
        streak += 1
    return streak
