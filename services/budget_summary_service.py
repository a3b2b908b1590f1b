from collections.abc import Mapping
from datetime import date

from models.budget_progress_dto import BudgetProgress
from services.budget_progress_service import (
    calculate_monthly_progress,
    calculate_today_status,
    calculate_weekly_progress,
)
from services.positive_message_engine import get_positive_message
from utils.dates import date_key, to_date

WARNING_PERCENT = 80


def build_daily_totals(expenses):
    """Reduce expense records (``date`` + ``amount``) to per-day spend totals."""
    daily_totals = {}
    for expense in expenses:
        key = date_key(expense["date"])
        daily_totals[key] = daily_totals.get(key, 0) + expense["amount"]
    return daily_totals


def calculate_budget_progress(expenses, daily_limit, today=None, week_starts_on=1) -> BudgetProgress:
    """All progress views for ``today`` in one call.

    ``expenses`` is either a list of expense records or an already-built
    daily totals mapping.
    """
    today = to_date(today) if today is not None else date.today()
    if isinstance(expenses, Mapping):
        daily_totals = expenses
    else:
        daily_totals = build_daily_totals(expenses)

    today_status = calculate_today_status(daily_totals, daily_limit, today)
    weekly_progress = calculate_weekly_progress(
        daily_totals, daily_limit, today, week_starts_on, today=today
    )
    # month is zero-indexed
    monthly_progress = calculate_monthly_progress(
        daily_totals, daily_limit, today.year, today.month - 1, today=today
    )

    return BudgetProgress(
        today_status=today_status,
        weekly_progress=weekly_progress,
        monthly_progress=monthly_progress,
        positive_message=get_positive_message(today_status, weekly_progress, monthly_progress),
        effective_daily_limit=today_status.effective_limit,
        rollover_amount=today_status.rollover_from_yesterday,
    )


def calculate_spending_percentage(spent: float, limit: float) -> float:
    if limit <= 0:
        return 0
    return min(spent / limit * 100, 100)


def get_budget_status_color(remaining: float, spent: float, limit: float) -> str:
    if remaining < 0:
        return "red"
    if calculate_spending_percentage(spent, limit) >= WARNING_PERCENT:
        return "amber"
    return "green"
