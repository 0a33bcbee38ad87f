"""FastAPI application factory.

``create_app`` wires the supplier and transaction routers around a single
shared ``Database`` and translates domain errors into HTTP responses::

    uvicorn --factory supplyledger.api.app:create_app

The ``supplyledger serve`` command does the same with configured settings.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from supplyledger.api.routes import suppliers, transactions
from supplyledger.config import Settings
from supplyledger.database.base import Database
from supplyledger.database.factories import create_sqlite_database
from supplyledger.domain.errors import NotFoundError, StoreError, ValidationError
from supplyledger.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)}
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.exception("Store failure handling %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(db: Optional[Database] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Args:
        db: Database to serve. If None, a SQLite database is created from
            ``settings.database_path``
        settings: Application settings; read from the environment if None

    Returns:
        Configured FastAPI instance. The database is available as ``app.state.db``.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level, settings.log_file)

    if db is None:
        db = create_sqlite_database(database_path=settings.database_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.connect()
        db.initialize_schema()
        logger.info("Database ready at %s", getattr(db, "database_url", db))
        yield
        db.disconnect()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.db = db

    app.include_router(suppliers.router, prefix="/suppliers", tags=["suppliers"])
    app.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
    _register_error_handlers(app)

    return app
