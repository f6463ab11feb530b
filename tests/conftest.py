from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.context import AppContext
from app.db.engine import reset_schema
from app.main import create_app


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'test.sqlite'}")


@pytest.fixture()
def ctx(settings: Settings):
    context = AppContext.from_settings(settings)
    reset_schema(context.engine)
    yield context
    context.engine.dispose()


@pytest.fixture()
def client(settings: Settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
