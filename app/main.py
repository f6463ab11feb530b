# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.users import router as users_router
from app.config import Settings, get_settings
from app.context import AppContext
from app.db.engine import check_connection, reset_schema
from app.errors import AccountError, StorageFailure
from app.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Storage does not survive a restart: the schema is rebuilt every time.
        try:
            check_connection(context.engine)
            reset_schema(context.engine)
        except SQLAlchemyError as exc:
            logger.exception("Unable to start server")
            raise StorageFailure("Unable to start server", detail=str(exc)) from exc

        logger.info("Server running on port %s", settings.PORT)
        yield
        context.engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.context = context

    @app.exception_handler(AccountError)
    async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
        if isinstance(exc, StorageFailure):
            logger.error(
                "%s %s: %s (%s)",
                request.method, request.url.path, exc.message, exc.detail,
                exc_info=exc,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(users_router)

    return app
