# app/db/engine.py

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from app.db.schema import metadata

logger = logging.getLogger(__name__)


def get_engine(db_url: str) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(db_url, future=True)


def check_connection(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Database connection established (%s)", engine.url.render_as_string())


def reset_schema(engine: Engine) -> None:
    """
    Drop and recreate every table. All stored accounts are discarded.
    """
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("Database schema recreated")
