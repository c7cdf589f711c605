# File: tests/test_expense_service.py

from datetime import date, datetime, timezone
from types import SimpleNamespace

from app.core.dates import utc_today
from app.schemas.expense import ExpenseWrite
from app.services.expense_service import month_window, resolve_window, total_amount


def test_month_window_handles_month_lengths():
    assert month_window(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_window(date(2023, 2, 10)) == (date(2023, 2, 1), date(2023, 2, 28))
    assert month_window(date(2024, 12, 31)) == (date(2024, 12, 1), date(2024, 12, 31))


def test_exact_date_wins_over_range():
    window = resolve_window(
        on=date(2024, 5, 1), date_from=date(2024, 1, 1), date_to=date(2024, 12, 31)
    )
    assert window == (date(2024, 5, 1), date(2024, 5, 1))


def test_range_requires_both_ends():
    today = date(2024, 5, 17)
    assert resolve_window(date_from=date(2024, 1, 1), today=today) == month_window(today)
    assert resolve_window(
        date_from=date(2024, 1, 1), date_to=date(2024, 1, 31), today=today
    ) == (date(2024, 1, 1), date(2024, 1, 31))


def test_today_defaults_to_utc_date():
    assert utc_today() == datetime.now(timezone.utc).date()
    assert ExpenseWrite(amount=1).date == utc_today()
    assert ExpenseWrite(amount=1, date=None).date == utc_today()


def test_total_amount_sums_as_decimals():
    expenses = [SimpleNamespace(amount=a) for a in (0.1, 0.2, -0.05)]
    assert total_amount(expenses) == 0.25
    assert total_amount([]) == 0
