# File: app/api/v1/routes_expenses.py

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.deps import CurrentUser, get_current_user, get_db
from app.schemas.expense import (
    ExpenseDeleted,
    ExpenseRead,
    ExpenseSummary,
    ExpenseWrite,
    MonthSummary,
    TodaySummary,
)
from app.services import expense_service
from app.services.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(e: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post(
    "",
    response_model=ExpenseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add expense",
)
def create_expense(
    payload: ExpenseWrite,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return expense_service.create_expense(db, current.id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.exception("Adding expense failed")
        raise _server_error(e)


@router.get("", response_model=list[ExpenseRead], summary="List expenses")
def list_expenses(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Newest first, each with its category name and priority (or null)."""
    try:
        return expense_service.list_expenses(db, current.id)
    except Exception as e:
        logger.exception("Listing expenses failed")
        raise _server_error(e)


@router.get("/summary", response_model=ExpenseSummary, summary="Expense summary")
def summary(
    on: Optional[date] = Query(None, alias="date"),
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Totals for ``?date=`` (one day), ``?from=&to=`` (inclusive range) or,
    without filters, the current calendar month.
    """
    window = expense_service.resolve_window(on=on, date_from=date_from, date_to=date_to)
    try:
        return expense_service.summarize(db, current.id, window)
    except Exception as e:
        logger.exception("Summary failed")
        raise _server_error(e)


@router.get("/summary/today", response_model=TodaySummary, summary="Today's total")
def summary_today(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return expense_service.today_total(db, current.id)
    except Exception as e:
        logger.exception("Today summary failed")
        raise _server_error(e)


@router.get("/summary/month", response_model=MonthSummary, summary="Current month's total")
def summary_month(
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return expense_service.month_total(db, current.id)
    except Exception as e:
        logger.exception("Month summary failed")
        raise _server_error(e)


@router.put("/{expense_id}", response_model=ExpenseRead, summary="Update expense")
def update_expense(
    expense_id: int,
    payload: ExpenseWrite,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return expense_service.update_expense(db, current.id, expense_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.exception("Updating expense %s failed", expense_id)
        raise _server_error(e)


@router.delete("/{expense_id}", response_model=ExpenseDeleted, summary="Delete expense")
def delete_expense(
    expense_id: int,
    current: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        deleted = expense_service.delete_expense(db, current.id, expense_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.exception("Deleting expense %s failed", expense_id)
        raise _server_error(e)
    return {"message": "Expense deleted", "deleted": deleted}
