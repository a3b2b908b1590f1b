from dataclasses import dataclass
from typing import Optional, Tuple

MESSAGE_TYPES = (
    "under_budget",
    "streak",
    "weekly_ahead",
    "monthly_ahead",
    "rollover_growing",
)


@dataclass(frozen=True)
class DailyBudgetStatus:
    date: str  # YYYY-MM-DD
    limit: float
    spent: float
    remaining: float  # limit - spent, against the nominal limit
    rollover: float  # carried in from previous days
    effective_limit: float


@dataclass(frozen=True)
class WeeklyProgress:
    week_start: str
    week_end: str
    total_budget: float
    total_spent: float
    remaining: float
    percent_used: float
    days_tracked: int
    daily_breakdown: Tuple[DailyBudgetStatus, ...]


@dataclass(frozen=True)
class MonthlyProgress:
    month_start: str
    month_end: str
    total_budget: float
    total_spent: float
    expected_spent_to_date: float
    ahead_behind_amount: float  # positive = under budget
    projected_end_of_month: float
    rollover_accumulated: float
    days_elapsed: int
    total_days: int


@dataclass(frozen=True)
class TodayStatus:
    date: str
    daily_limit: float
    spent: float
    remaining: float
    rollover_from_yesterday: float
    effective_limit: float
    is_over: bool
    saved_today: float


@dataclass(frozen=True)
class PositiveMessage:
    type: str  # one of MESSAGE_TYPES
    message: str
    amount: Optional[float] = None
    days: Optional[int] = None


@dataclass(frozen=True)
class BudgetProgress:
    today_status: TodayStatus
    weekly_progress: WeeklyProgress
    monthly_progress: MonthlyProgress
    positive_message: Optional[PositiveMessage]
    effective_daily_limit: float
    rollover_amount: float
