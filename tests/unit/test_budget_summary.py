"""
Test Suite: budget progress summary and expense aggregation
"""

from datetime import date

import pytest

from services.budget_summary_service import (
    build_daily_totals,
    calculate_budget_progress,
    calculate_spending_percentage,
    get_budget_status_color,
)
from services.expense_import_service import parse_expense_csv
from utils.money import parse_expense_amount, parse_money


@pytest.fixture
def expenses():
    return [
        {'date': '2024-06-03', 'amount': 100, 'label': 'Groceries'},
        {'date': '2024-06-03', 'amount': 50, 'label': 'Coffee'},
        {'date': date(2024, 6, 4), 'amount': 400, 'label': 'Shopping'},
    ]


class TestDailyTotals:

    def test_same_day_expenses_are_summed(self, expenses):
        assert build_daily_totals(expenses) == {'2024-06-03': 150, '2024-06-04': 400}

    def test_decimal_amounts(self):
        totals = build_daily_totals([
            {'date': '2024-06-15', 'amount': 99.5},
            {'date': '2024-06-15', 'amount': 150.75},
        ])
        assert totals['2024-06-15'] == pytest.approx(250.25)

    def test_no_expenses(self):
        assert build_daily_totals([]) == {}


class TestBudgetProgress:

    def test_all_views_for_today(self, expenses):
        progress = calculate_budget_progress(expenses, 300, date(2024, 6, 5), week_starts_on=1)

        today = progress.today_status
        assert today.rollover_from_yesterday == 650
        assert today.effective_limit == 950
        assert today.saved_today == 300

        assert progress.weekly_progress.days_tracked == 3
        assert progress.weekly_progress.remaining == 350

        assert progress.monthly_progress.days_elapsed == 5
        assert progress.monthly_progress.total_spent == 550
        assert progress.monthly_progress.ahead_behind_amount == 950

        assert progress.positive_message.type == 'monthly_ahead'
        assert progress.positive_message.amount == 950
        assert progress.effective_daily_limit == today.effective_limit
        assert progress.rollover_amount == today.rollover_from_yesterday

    def test_accepts_prebuilt_daily_totals(self, expenses):
        from_records = calculate_budget_progress(expenses, 300, date(2024, 6, 5))
        from_totals = calculate_budget_progress(build_daily_totals(expenses), 300, date(2024, 6, 5))

        assert from_records == from_totals

    def test_no_expenses_on_first_of_month(self):
        progress = calculate_budget_progress([], 300, date(2024, 6, 1))

        assert progress.rollover_amount == 0
        assert progress.effective_daily_limit == 300
        assert progress.monthly_progress.ahead_behind_amount == 300
        assert progress.positive_message.type == 'monthly_ahead'


class TestSpendingIndicators:

    def test_spending_percentage(self):
        assert calculate_spending_percentage(0, 300) == 0
        assert calculate_spending_percentage(150, 300) == 50
        assert calculate_spending_percentage(400, 300) == 100
        assert calculate_spending_percentage(100, 0) == 0

    def test_status_color(self):
        assert get_budget_status_color(remaining=-1, spent=301, limit=300) == 'red'
        assert get_budget_status_color(remaining=60, spent=240, limit=300) == 'amber'
        assert get_budget_status_color(remaining=61, spent=239, limit=300) == 'green'
        assert get_budget_status_color(remaining=0, spent=0, limit=0) == 'green'


class TestExpenseImport:

    def test_parse_expense_csv(self):
        contents = (
            "Date,Amount,Description\n"
            "06/03/2024,-100.00,Coffee\n"
            "2024-06-04,\"$1,400.00\",Rent\n"
            "not a date,10,Oops\n"
            "2024-06-05,0,Free sample\n"
        )

        result = parse_expense_csv(contents)

        assert result['success'] is True
        assert result['total'] == 4
        assert result['expenses'] == [
            {'date': '2024-06-03', 'amount': 100.0, 'label': 'Coffee'},
            {'date': '2024-06-04', 'amount': 1400.0, 'label': 'Rent'},
        ]
        assert [f['row'] for f in result['failed']] == [3, 4]

    def test_missing_columns(self):
        result = parse_expense_csv("Date,Description\n2024-06-03,Coffee\n")

        assert result['success'] is False
        assert 'Amount' in result['error']

    def test_missing_headers(self):
        assert parse_expense_csv("")['success'] is False

    def test_money_parsing(self):
        assert str(parse_money("(45.505)")) == '-45.51'
        assert parse_expense_amount("(45.50)") == 45.5
        with pytest.raises(ValueError):
            parse_expense_amount("abc")
        with pytest.raises(ValueError):
            parse_expense_amount("1000000000")
        with pytest.raises(ValueError):
            parse_expense_amount(None)
