# app/context.py

from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.engine import Engine

from app.config import Settings
from app.db.engine import get_engine


@dataclass(frozen=True)
class AppContext:
    """Process-scoped state, built once in ``create_app``."""

    settings: Settings
    engine: Engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(settings=settings, engine=get_engine(settings.DATABASE_URL))


def get_context(request: Request) -> AppContext:
    return request.app.state.context
