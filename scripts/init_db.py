# scripts/init_db.py
"""
Wipe the account store by hand (the server also does this on every start).

Usage:
    python -m scripts.init_db
"""

from typing import Optional

from app.config import Settings, get_settings
from app.db.engine import get_engine, reset_schema
from app.logging_config import setup_logging


def main(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    engine = get_engine(settings.DATABASE_URL)
    try:
        reset_schema(engine)
    finally:
        engine.dispose()
    print("DB schema created.")


if __name__ == "__main__":
    main()
