# File: app/services/category_service.py

"""
Category service.

Templates (``is_default=True``, no owner) are copied into a user's own set
the first time that user lists categories. After that the user's set is
independent: editing or deleting never touches the templates, and new
templates only reach existing users through ``restore_default_categories``.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from app.models.category import Category
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services.ownership import get_owned, owned

logger = logging.getLogger(__name__)


def get_template_categories(db: Session) -> List[Category]:
    return (
        db.query(Category)
        .filter(Category.is_default.is_(True), Category.user_id.is_(None))
        .order_by(Category.priority, Category.id)
        .all()
    )


def clone_template(template: Category, user_id: str) -> Category:
    return Category(
        user_id=user_id,
        name=template.name,
        icon=template.icon,
        priority=template.priority,
        is_default=False,
    )


def list_categories(db: Session, user_id: str) -> List[Category]:
    """
    Return the caller's categories ordered by (priority, id), bootstrapping
    them from the templates when the caller has none yet.
    """
    has_any = owned(db, Category, user_id).first() is not None
    if not has_any:
        clones = [clone_template(t, user_id) for t in get_template_categories(db)]
        db.add_all(clones)
        db.commit()
        logger.info("Bootstrapped %d categories for user %s", len(clones), user_id)

    return owned(db, Category, user_id).order_by(Category.priority, Category.id).all()


def create_category(db: Session, user_id: str, payload: CategoryCreate) -> Category:
    category = Category(
        user_id=user_id,
        name=payload.name,
        icon=payload.icon,
        priority=payload.priority,
        is_default=False,
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def update_category(db: Session, user_id: str, category_id: int, payload: CategoryUpdate) -> Category:
    category = get_owned(db, Category, category_id, user_id, label="Category")
    for field, value in payload.changes().items():
        setattr(category, field, value)
    db.commit()
    db.refresh(category)
    return category


def delete_category(db: Session, user_id: str, category_id: int) -> Category:
    category = get_owned(db, Category, category_id, user_id, label="Category")
    db.delete(category)
    db.commit()
    return category


def restore_default_categories(db: Session, user_id: str) -> List[Category]:
    """
    Add every template whose name the caller doesn't already have
    (case-sensitive match). Returns the inserted rows, possibly empty.
    """
    existing = {name for (name,) in owned(db, Category, user_id).with_entities(Category.name)}
    missing = [t for t in get_template_categories(db) if t.name not in existing]
    if not missing:
        return []

    added = [clone_template(t, user_id) for t in missing]
    db.add_all(added)
    db.commit()
    for category in added:
        db.refresh(category)
    logger.info("Restored %d default categories for user %s", len(added), user_id)
    return added
