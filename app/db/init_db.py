"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from app.models.base import Base
from app.models import credential, user, category, expense  # noqa: F401
from app.models.category import Category

logger = logging.getLogger(__name__)

# (name, icon, priority)
DEFAULT_CATEGORIES = [
    ("Food", "🍔", 1),
    ("Transport", "🚌", 2),
    ("Housing", "🏠", 3),
    ("Utilities", "💡", 4),
    ("Health", "💊", 5),
    ("Entertainment", "🎬", 6),
    ("Shopping", "🛍️", 7),
    ("Education", "📚", 8),
    ("Gifts", "🎁", 9),
    ("Other", "📦", 10),
]


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def seed_default_categories(db: Session) -> int:
    """
    Insert the template categories that are missing (matched by name).

    Returns the number of rows inserted.
    """
    existing = {
        name
        for (name,) in db.query(Category.name).filter(
            Category.is_default.is_(True), Category.user_id.is_(None)
        )
    }

    count_new = 0
    for name, icon, priority in DEFAULT_CATEGORIES:
        if name in existing:
            continue
        db.add(Category(user_id=None, name=name, icon=icon, priority=priority, is_default=True))
        count_new += 1

    db.commit()
    if count_new:
        logger.info("Seeded %d default categories", count_new)
    return count_new
