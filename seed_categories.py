"""
Create the tables and insert the default template categories.

Run this from the backend root:

    (.venv) python seed_categories.py

Templates already present (matched by name) are left alone, so it is safe
to run more than once.
"""

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.init_db import DEFAULT_CATEGORIES, init_db, seed_default_categories
from app.db.session import create_db_engine, create_session_factory


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    engine = create_db_engine(settings.database_url)
    init_db(engine)

    SessionLocal = create_session_factory(engine)
    db = SessionLocal()
    try:
        count_new = seed_default_categories(db)
        print(f"[INFO] {len(DEFAULT_CATEGORIES)} default categories defined")
        print(f"[INFO] Inserted {count_new} new template rows")
        print("[INFO] Done.")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
