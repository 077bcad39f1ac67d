# orphanage_care/main.py
"""
FastAPI application for the OrphanageCare backend.

``create_app`` wires CORS, the JSON error envelope and the routers. The
database handle is either injected (tests pass an in-memory one) or
opened by the lifespan from ``Settings``; either way it ends up on
``app.state.db`` where ``orphanage_care.deps`` picks it up.

Run with::

    python -m orphanage_care
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from orphanage_care.core.config import Settings, settings as default_settings
from orphanage_care.core.db import close_client, get_db
from orphanage_care.core.indexes import ensure_indexes
from orphanage_care.core.logging_config import setup_logging
from orphanage_care.routers import accounts as accounts_router
from orphanage_care.routers import orphanages as orphanages_router

logger = logging.getLogger(__name__)


def create_app(db=None, config: Optional[Settings] = None) -> FastAPI:
    config = config or default_settings
    setup_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if db is not None:
            app.state.db = db
            await ensure_indexes(db)
            yield
            return

        app.state.db = get_db(config.mongodb_uri, config.mongodb_db)
        try:
            await app.state.db.command("ping")
            logger.info("MongoDB connected")
            await ensure_indexes(app.state.db)
        except PyMongoError as exc:
            # keep serving; every request will answer 500 until the store is back
            logger.error("MongoDB connection error: %s", exc)
        yield
        close_client(config.mongodb_uri)

    app = FastAPI(lifespan=lifespan, title="OrphanageCare API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    # ---------- Error envelope: every error body is {"message": ...} ----------
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def body_error(request: Request, exc: RequestValidationError):
        # malformed bodies count as validation failures, which this API reports as 500
        logger.info("rejected body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=500, content={"message": "Invalid request body: expected a JSON object"})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Server Error"})

    # ---------------- Include routers ----------------
    app.include_router(accounts_router.router)
    app.include_router(orphanages_router.router)

    # Health
    @app.get("/healthz", response_class=PlainTextResponse)
    def healthz():
        return "OK"

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "OrphanageCare backend is running!"

    return app


app = create_app()
