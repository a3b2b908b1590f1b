import logging
from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, File, Query, UploadFile
from pydantic import BaseModel, Field

import config
from services.budget_progress_dto import BudgetProgressResponseDTO, daily_to_dto
from services.budget_progress_service import (
    calculate_daily_rollover,
    calculate_monthly_progress,
)
from services.budget_summary_service import (
    build_daily_totals,
    calculate_budget_progress,
    get_budget_status_color,
)
from services.expense_import_service import parse_expense_csv
from services.positive_message_engine import get_under_budget_streak
from utils.dates import parse_date_key

router = APIRouter()

INVALID_DATE_ERROR = {"error": "Invalid date format. Use YYYY-MM-DD."}


class ExpenseIn(BaseModel):
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    amount: float = Field(..., gt=0, le=999999999.99)
    label: Optional[str] = Field(None, max_length=255)


class BudgetProgressRequest(BaseModel):
    expenses: List[ExpenseIn] = []
    daily_limit: Optional[float] = None
    week_starts_on: Optional[int] = None
    as_of_date: Optional[str] = None


class LedgerRequest(BaseModel):
    expenses: List[ExpenseIn] = []
    daily_limit: Optional[float] = None
    start_date: str
    end_date: str


class MonthlyProgressRequest(BaseModel):
    expenses: List[ExpenseIn] = []
    daily_limit: Optional[float] = None
    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=0, le=11)  # 0-indexed
    as_of_date: Optional[str] = None


def _parse_as_of(as_of_date):
    if not as_of_date:
        return date.today()
    return parse_date_key(as_of_date)


def _limit_or_default(daily_limit):
    return config.DEFAULT_DAILY_LIMIT if daily_limit is None else daily_limit


def build_progress_response(expenses, daily_limit, today, week_starts_on=None):
    """Run every progress calculation for ``today`` and shape it as JSON."""
    daily_limit = _limit_or_default(daily_limit)
    if week_starts_on is None:
        week_starts_on = config.WEEK_STARTS_ON

    daily_totals = build_daily_totals(expenses)
    progress = calculate_budget_progress(daily_totals, daily_limit, today, week_starts_on)

    status = progress.today_status
    month_to_date = calculate_daily_rollover(
        daily_totals, daily_limit, today.replace(day=1), today
    )
    dto = BudgetProgressResponseDTO.from_progress(
        progress,
        status_color=get_budget_status_color(status.remaining, status.spent, status.daily_limit),
        streak=get_under_budget_streak(month_to_date),
    )

    logging.info(
        f"Budget progress for {status.date}: {len(expenses)} expenses, "
        f"limit={daily_limit}, message={progress.positive_message.type if progress.positive_message else None}"
    )
    return dto.to_dict()


@router.post("/budget-progress")
def get_budget_progress(request: BudgetProgressRequest):
    """
    Today's status, the current week and month, and an encouragement message.

    Deterministic and read-only: nothing in the request is stored.
    """
    try:
        today = _parse_as_of(request.as_of_date)
    except ValueError:
        logging.warning(f"Rejected as_of_date {request.as_of_date!r}")
        return INVALID_DATE_ERROR

    expenses = [expense.model_dump() for expense in request.expenses]
    return build_progress_response(expenses, request.daily_limit, today, request.week_starts_on)


@router.post("/budget-progress/ledger")
def get_rollover_ledger(request: LedgerRequest):
    try:
        start_date = parse_date_key(request.start_date)
        end_date = parse_date_key(request.end_date)
    except ValueError:
        logging.warning(f"Rejected ledger window {request.start_date!r}..{request.end_date!r}")
        return INVALID_DATE_ERROR

    daily_totals = build_daily_totals(expense.model_dump() for expense in request.expenses)
    days = calculate_daily_rollover(
        daily_totals, _limit_or_default(request.daily_limit), start_date, end_date
    )

    return {
        "start_date": request.start_date,
        "end_date": request.end_date,
        "days": [asdict(daily_to_dto(day)) for day in days],
        "under_budget_streak": get_under_budget_streak(days),
    }


@router.post("/budget-progress/monthly")
def get_monthly_progress(request: MonthlyProgressRequest):
    try:
        today = _parse_as_of(request.as_of_date)
    except ValueError:
        return INVALID_DATE_ERROR

    daily_totals = build_daily_totals(expense.model_dump() for expense in request.expenses)
    monthly = calculate_monthly_progress(
        daily_totals,
        _limit_or_default(request.daily_limit),
        request.year,
        request.month,
        today=today,
    )
    return asdict(monthly)


@router.post("/budget-progress/upload")
def upload_expenses_csv(
    file: UploadFile = File(...),
    daily_limit: Optional[float] = Query(None),
    week_starts_on: Optional[int] = Query(None, ge=0, le=6),
    as_of_date: Optional[str] = Query(None),
):
    """Budget progress computed from an uploaded expense CSV (Date, Amount)."""
    try:
        today = _parse_as_of(as_of_date)
    except ValueError:
        return INVALID_DATE_ERROR

    contents_bytes = file.file.read()
    try:
        contents = contents_bytes.decode("utf-8-sig")
    except UnicodeDecodeError:
        return {"success": False, "error": "File must be UTF-8 encoded CSV"}

    imported = parse_expense_csv(contents)
    if not imported["success"]:
        return imported

    return {
        "import": {
            "parsed": len(imported["expenses"]),
            "failed": imported["failed"],
            "total": imported["total"],
        },
        "progress": build_progress_response(
            imported["expenses"], daily_limit, today, week_starts_on
        ),
    }
