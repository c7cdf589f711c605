# File: app/services/expense_service.py

"""
Expense service: owner-scoped CRUD plus date-window summaries.

Every summary is the same reduction, ``sum(amount)`` over the caller's
expenses inside an inclusive ``[start, end]`` date window; the variants
only differ in how the window is chosen.
"""

import calendar
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.dates import utc_today
from app.models.category import Category
from app.models.expense import Expense
from app.schemas.expense import ExpenseWrite
from app.services.ownership import get_owned, owned

DateWindow = Tuple[date, date]

CENTS = Decimal("0.01")


def month_window(today: date) -> DateWindow:
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def resolve_window(
    *,
    on: Optional[date] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    today: Optional[date] = None,
) -> DateWindow:
    """
    Pick the summary window.

    An exact date wins, then a complete ``from``/``to`` pair; otherwise the
    current calendar month. A lone ``from`` or ``to`` is ignored.
    """
    if on is not None:
        return on, on
    if date_from is not None and date_to is not None:
        return date_from, date_to
    return month_window(today or utc_today())


def expenses_in_window(db: Session, user_id: str, window: DateWindow) -> List[Expense]:
    start, end = window
    return (
        owned(db, Expense, user_id)
        .filter(Expense.date >= start, Expense.date <= end)
        .order_by(Expense.date, Expense.id)
        .all()
    )


def total_amount(expenses: List[Expense]) -> float:
    # Decimal sum, rounded to cents
    total = sum((Decimal(str(e.amount)) for e in expenses), Decimal("0"))
    return float(total.quantize(CENTS))


def summarize(db: Session, user_id: str, window: DateWindow) -> dict:
    expenses = expenses_in_window(db, user_id, window)
    return {"total": total_amount(expenses), "count": len(expenses), "expenses": expenses}


def today_total(db: Session, user_id: str, today: Optional[date] = None) -> dict:
    today = today or utc_today()
    return {"date": today, "total": total_amount(expenses_in_window(db, user_id, (today, today)))}


def month_total(db: Session, user_id: str, today: Optional[date] = None) -> dict:
    today = today or utc_today()
    expenses = expenses_in_window(db, user_id, month_window(today))
    return {"month": today.month, "year": today.year, "total": total_amount(expenses)}


def list_expenses(db: Session, user_id: str) -> List[Expense]:
    return owned(db, Expense, user_id).order_by(Expense.date.desc(), Expense.id.desc()).all()


def _check_category(db: Session, user_id: str, category_id: Optional[int]) -> None:
    # An expense may only point at one of the caller's own categories
    if category_id is not None:
        get_owned(db, Category, category_id, user_id, label="Category")


def create_expense(db: Session, user_id: str, payload: ExpenseWrite) -> Expense:
    _check_category(db, user_id, payload.category_id)
    expense = Expense(
        user_id=user_id,
        amount=payload.amount,
        note=payload.note,
        category_id=payload.category_id,
        date=payload.date,
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense


def update_expense(db: Session, user_id: str, expense_id: int, payload: ExpenseWrite) -> Expense:
    expense = get_owned(db, Expense, expense_id, user_id, label="Expense")
    _check_category(db, user_id, payload.category_id)
    expense.amount = payload.amount
    expense.note = payload.note
    expense.category_id = payload.category_id
    expense.date = payload.date
    db.commit()
    db.refresh(expense)
    return expense


def delete_expense(db: Session, user_id: str, expense_id: int) -> Expense:
    expense = get_owned(db, Expense, expense_id, user_id, label="Expense")
    db.delete(expense)
    db.commit()
    return expense
