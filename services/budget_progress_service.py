### Budget progress service turns per-day spend totals and a daily limit into rollover ledgers and weekly/monthly/today summaries.
from datetime import date, timedelta

from models.budget_progress_dto import (
    DailyBudgetStatus,
    MonthlyProgress,
    TodayStatus,
    WeeklyProgress,
)
from utils.dates import (
    date_key,
    get_month_bounds,
    get_week_end,
    get_week_start,
    to_date,
)


def carry_forward(rollover, remaining):
    """Rollover entering the next day."""
    if remaining > 0:
        return rollover + remaining
    return max(0, rollover + remaining)


def calculate_daily_rollover(daily_totals, daily_limit, start_date, end_date):
    """Day-by-day ledger for the inclusive window ``[start_date, end_date]``.

    Surplus carries forward uncapped. A deficit eats into the carried
    rollover first and floors it at zero; any excess is dropped, never
    carried as debt. Days are processed strictly in order.
    """
    start_date = to_date(start_date)
    end_date = to_date(end_date)
    result = []
    accumulated_rollover = 0

    current = start_date
    while current <= end_date:
        key = date_key(current)
        spent = daily_totals.get(key, 0)
        remaining = daily_limit - spent

        result.append(DailyBudgetStatus(
            date=key,
            limit=daily_limit,
            spent=spent,
            remaining=remaining,
            rollover=accumulated_rollover,
            effective_limit=daily_limit + accumulated_rollover,
        ))

        accumulated_rollover = carry_forward(accumulated_rollover, remaining)

        current += timedelta(days=1)

    return result


def calculate_weekly_progress(daily_totals, daily_limit, reference_date=None,
                              week_starts_on=1, today=None):
    today = to_date(today) if today is not None else date.today()
    reference_date = to_date(reference_date) if reference_date is not None else today

    week_start = get_week_start(reference_date, week_starts_on)
    week_end = get_week_end(reference_date, week_starts_on)

    # never include future days
    effective_end = min(week_end, today)

    daily_breakdown = calculate_daily_rollover(
        daily_totals, daily_limit, week_start, effective_end
    )

    days_tracked = len(daily_breakdown)
    total_budget = days_tracked * daily_limit
    total_spent = sum(day.spent for day in daily_breakdown)
    percent_used = (total_spent / total_budget * 100) if total_budget else 0

    return WeeklyProgress(
        week_start=date_key(week_start),
        week_end=date_key(week_end),
        total_budget=total_budget,
        total_spent=total_spent,
        remaining=total_budget - total_spent,
        percent_used=percent_used,
        days_tracked=days_tracked,
        daily_breakdown=tuple(daily_breakdown),
    )


def calculate_monthly_progress(daily_totals, daily_limit, year, month, today=None):
    """Month-to-date progress and a linear end-of-month projection.

    ``month`` is zero-indexed (0 = January). ``total_budget`` covers the
    whole month; ``expected_spent_to_date`` only the elapsed days.
    """
    today = to_date(today) if today is not None else date.today()

    month_start, month_end = get_month_bounds(year, month)
    total_days = month_end.day
    effective_end = min(month_end, today)

    if effective_end >= month_start:
        days_elapsed = min((effective_end - month_start).days + 1, total_days)
    else:
        days_elapsed = 0

    daily_breakdown = calculate_daily_rollover(
        daily_totals, daily_limit, month_start, effective_end
    )

    total_spent = sum(day.spent for day in daily_breakdown)
    expected_spent_to_date = days_elapsed * daily_limit

    # no elapsed days: assume spending exactly on pace
    avg_daily_spending = total_spent / days_elapsed if days_elapsed > 0 else daily_limit

    return MonthlyProgress(
        month_start=date_key(month_start),
        month_end=date_key(month_end),
        total_budget=total_days * daily_limit,
        total_spent=total_spent,
        expected_spent_to_date=expected_spent_to_date,
        ahead_behind_amount=expected_spent_to_date - total_spent,
        projected_end_of_month=avg_daily_spending * total_days,
        rollover_accumulated=daily_breakdown[-1].rollover if daily_breakdown else 0,
        days_elapsed=days_elapsed,
        total_days=total_days,
    )


def calculate_today_status(daily_totals, daily_limit, today=None):
    today = to_date(today) if today is not None else date.today()

    today_key = date_key(today)
    spent = daily_totals.get(today_key, 0)
    remaining = daily_limit - spent

    # rollover is rebuilt from the first of the month through yesterday
    month_start = today.replace(day=1)
    yesterday = today - timedelta(days=1)
    daily_breakdown = calculate_daily_rollover(
        daily_totals, daily_limit, month_start, yesterday
    )

    if daily_breakdown:
        last_day = daily_breakdown[-1]
        rollover_from_yesterday = carry_forward(last_day.rollover, last_day.remaining)
    else:
        rollover_from_yesterday = 0

    return TodayStatus(
        date=today_key,
        daily_limit=daily_limit,
        spent=spent,
        remaining=remaining,
        rollover_from_yesterday=rollover_from_yesterday,
        effective_limit=daily_limit + rollover_from_yesterday,
        is_over=remaining < 0,
        saved_today=max(0, remaining),
    )
