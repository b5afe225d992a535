from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from spendwarden import __version__
from spendwarden.api.middleware.error_handler import (
    handle_generic_error,
    handle_integrity_error,
    handle_spendwarden_error,
    handle_validation_error,
)
from spendwarden.api.middleware.logging import RequestLoggingMiddleware
from spendwarden.api.v1 import router as v1_router
from spendwarden.api.v1.health import router as health_router
from spendwarden.config import settings
from spendwarden.core.exceptions import SpendWardenError
from spendwarden.core.logconfig import setup_logging
from spendwarden.db.session import async_engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await async_engine.dispose()


def create_app() -> FastAPI:
    setup_logging(settings.log_level, json_logs=settings.log_json)

    app = FastAPI(
        title="SpendWarden API",
        description="Spending tracker with monthly category limits",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Most specific first
    app.add_exception_handler(SpendWardenError, handle_spendwarden_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
