# File: app/services/ownership.py

"""
Owner-scoped access.

Every read and mutation of categories and expenses goes through these two
helpers so the ``user_id`` predicate can't be left out.
"""

from typing import Type, TypeVar

from sqlalchemy.orm import Query, Session

from app.services.errors import NotFoundError

ModelT = TypeVar("ModelT")


def owned(db: Session, model: Type[ModelT], user_id: str) -> Query:
    """Query over the caller's rows of ``model``."""
    return db.query(model).filter(model.user_id == user_id)


def get_owned(db: Session, model: Type[ModelT], obj_id: int, user_id: str, *, label: str) -> ModelT:
    """
    Fetch one row by id, only if the caller owns it.

    A missing row and someone else's row look the same: ``NotFoundError``.
    """
    obj = owned(db, model, user_id).filter(model.id == obj_id).first()
    if obj is None:
        raise NotFoundError(f"{label} not found")
    return obj
