# File: app/schemas/expense.py

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.core.dates import utc_today


# -----------------------------
# Requests
# -----------------------------

class ExpenseWrite(BaseModel):
    """
    Body of both create and update (update replaces every field).

    Defaults: ``note`` and ``category_id`` become null, ``date`` becomes
    today when omitted or sent as null.
    """

    amount: float
    note: Optional[str] = None
    category_id: Optional[int] = None
    date: dt.date = Field(default_factory=utc_today)

    @field_validator("date", mode="before")
    @classmethod
    def default_date(cls, v):
        if v is None or v == "":
            return utc_today()
        if isinstance(v, str) and "T" in v:
            # Accept full ISO timestamps, keep the calendar date
            return dt.datetime.fromisoformat(v.replace("Z", "+00:00")).date()
        return v

    @field_validator("note", mode="before")
    @classmethod
    def blank_note_is_null(cls, v):
        return v or None


# -----------------------------
# Responses
# -----------------------------

class ExpenseCategory(BaseModel):
    name: str
    priority: int

    class Config:
        from_attributes = True


class ExpenseRead(BaseModel):
    id: int
    user_id: str
    amount: float
    note: Optional[str] = None
    category_id: Optional[int] = None
    date: dt.date
    category: Optional[ExpenseCategory] = None

    class Config:
        from_attributes = True


class ExpenseDeleted(BaseModel):
    message: str
    deleted: ExpenseRead


class ExpenseSummary(BaseModel):
    total: float
    count: int
    expenses: List[ExpenseRead]


class TodaySummary(BaseModel):
    date: dt.date
    total: float


class MonthSummary(BaseModel):
    month: int
    year: int
    total: float
