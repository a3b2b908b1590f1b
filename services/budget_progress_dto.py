from dataclasses import asdict, dataclass
from typing import List, Optional


@dataclass
class DailyStatusDTO:
    """Single day in the rollover ledger."""
    date: str  # ISO format YYYY-MM-DD
    limit: float
    spent: float
    remaining: float
    rollover: float
    effective_limit: float


@dataclass
class WeeklyProgressDTO:
    week_start: str
    week_end: str
    total_budget: float
    total_spent: float
    remaining: float
    percent_used: float
    days_tracked: int
    daily_breakdown: List[DailyStatusDTO]


@dataclass
class MonthlyProgressDTO:
    month_start: str
    month_end: str
    total_budget: float
    total_spent: float
    expected_spent_to_date: float
    ahead_behind_amount: float
    projected_end_of_month: float
    rollover_accumulated: float
    days_elapsed: int
    total_days: int


@dataclass
class TodayStatusDTO:
    date: str
    daily_limit: float
    spent: float
    remaining: float
    rollover_from_yesterday: float
    effective_limit: float
    is_over: bool
    saved_today: float
    status_color: str  # green / amber / red


@dataclass
class PositiveMessageDTO:
    type: str
    message: str
    amount: Optional[float] = None
    days: Optional[int] = None


@dataclass
class BudgetProgressResponseDTO:
    """Complete budget progress response."""
    today: TodayStatusDTO
    weekly: WeeklyProgressDTO
    monthly: MonthlyProgressDTO
    positive_message: Optional[PositiveMessageDTO]
    effective_daily_limit: float
    rollover_amount: float
    under_budget_streak: int

    @classmethod
    def from_progress(cls, progress, status_color, streak):
        """Convert BudgetProgress to JSON-serializable DTO."""
        message = progress.positive_message
        return cls(
            today=TodayStatusDTO(**asdict(progress.today_status), status_color=status_color),
            weekly=weekly_to_dto(progress.weekly_progress),
            monthly=MonthlyProgressDTO(**asdict(progress.monthly_progress)),
            positive_message=PositiveMessageDTO(**asdict(message)) if message else None,
            effective_daily_limit=progress.effective_daily_limit,
            rollover_amount=progress.rollover_amount,
            under_budget_streak=streak,
        )

    def to_dict(self):
        return asdict(self)


def daily_to_dto(day):
    return DailyStatusDTO(
        date=day.date,
        limit=day.limit,
        spent=day.spent,
        remaining=day.remaining,
        rollover=day.rollover,
        effective_limit=day.effective_limit,
    )


def weekly_to_dto(weekly):
    return WeeklyProgressDTO(
        week_start=weekly.week_start,
        week_end=weekly.week_end,
        total_budget=weekly.total_budget,
        total_spent=weekly.total_spent,
        remaining=weekly.remaining,
        percent_used=weekly.percent_used,
        days_tracked=weekly.days_tracked,
        daily_breakdown=[daily_to_dto(day) for day in weekly.daily_breakdown],
    )
