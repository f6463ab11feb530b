# app/db/schema.py

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String, nullable=False, unique=True),
    Column("password", String, nullable=False),  # stored as given
    Column("email", String, nullable=True),
    Column("created_at", DateTime, nullable=False, default=_utcnow),
    Column("updated_at", DateTime, nullable=False, default=_utcnow, onupdate=_utcnow),
)
