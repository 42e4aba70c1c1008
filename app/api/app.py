from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.exceptions import ApiError
from app.api.routes import compare, health, history, upload
from app.api.services import Services, build_services
from app.config.settings import Settings
from app.database.connection import close_pool, init_pool
from app.database.exceptions import RecordValidationError
from app.logging.logger import Log
from app.processor.exceptions import ProcessorError

INTERNAL_ERROR = "Internal server error"


def create_app(settings: Settings | None = None, services: Services | None = None) -> FastAPI:
    """Build the HTTP application.

    When ``services`` is given it is used as-is and the database pool is
    left alone; otherwise the lifespan opens the pool and wires the
    production services from ``settings``.
    """
    if settings is None:
        settings = services.settings if services is not None else Settings()
    owns_services = services is None

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if owns_services:
            init_pool(settings)
            app.state.services = build_services(settings)
            Log.info(f"Service started (env={settings.app_env})")
        try:
            yield
        finally:
            if owns_services:
                app.state.services.close()
                close_pool()
                Log.info("Service stopped")

    app = FastAPI(title="Legal Simplifier", lifespan=lifespan)
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for module in (health, upload, history, compare):
        app.include_router(module.router)

    _register_exception_handlers(app)
    return app


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        Log.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(ProcessorError)
    async def handle_processor_error(request: Request, exc: ProcessorError) -> JSONResponse:
        Log.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        Log.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request parameters"})

    @app.exception_handler(psycopg.Error)
    async def handle_database_error(request: Request, exc: psycopg.Error) -> JSONResponse:
        Log.error(f"{request.method} {request.url.path} database error: {exc}")
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

    @app.exception_handler(RecordValidationError)
    async def handle_corrupt_record(
        request: Request, exc: RecordValidationError
    ) -> JSONResponse:
        Log.error(f"{request.method} {request.url.path} unreadable record: {exc}")
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        Log.error(f"{request.method} {request.url.path} unexpected {type(exc).__name__}: {exc}")
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})
