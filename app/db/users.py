# app/db/users.py
"""
Queries against the users table.

Each function takes an open connection so callers decide the transaction
boundary (``engine.begin()`` for writes, ``engine.connect()`` for reads).
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Connection, RowMapping

from app.db.schema import users


def create_user(
    conn: Connection,
    username: Optional[str],
    password: Optional[str],
    email: Optional[str] = None,
) -> RowMapping:
    result = conn.execute(
        users.insert().values(username=username, password=password, email=email)
    )
    (user_id,) = result.inserted_primary_key

    stmt = select(users).where(users.c.id == user_id)
    return conn.execute(stmt).mappings().one()


def find_by_username(conn: Connection, username: Optional[str]) -> Optional[RowMapping]:
    stmt = select(users).where(users.c.username == username)
    return conn.execute(stmt).mappings().first()


def find_all(conn: Connection) -> List[RowMapping]:
    stmt = select(users).order_by(users.c.id)
    return list(conn.execute(stmt).mappings().all())
