import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ddf_api.config import Settings
from ddf_api.errors import InternalError
from ddf_api.models import ApiResponse, ErrorResponse, Health
from ddf_api.routers import listings
from ddf_api.store import ListingStore

LOG = logging.getLogger("api")


def _error(status_code: int, error: str, message: str = "") -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO),
                        format="%(asctime)s | %(levelname)s | %(message)s")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # DataUnavailable propagates: no fixture, no server
        app.state.store = ListingStore.load(settings.fixture_path)
        LOG.info("CREA DDF API ready (mode=%s)", settings.mode)
        if settings.mode == "mock":
            LOG.warning("Currently using MOCK data from %s", settings.fixture_path)
        yield

    app = FastAPI(
        title="CREA DDF Listings API",
        version="1.0.0",
        description="Search a read-only snapshot of mock CREA DDF listings.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(listings.router)

    @app.get("/api/health", response_model=ApiResponse[Health])
    def health():
        return ApiResponse[Health](
            data=Health(status="ok", message="CREA DDF API is running", mode=settings.mode)
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if isinstance(exc.detail, dict):
            return _error(exc.status_code, exc.detail.get("error", ""), exc.detail.get("message", ""))
        if exc.status_code == 404:
            return _error(404, "Not found", f"Route {request.method} {request.url.path} not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(InternalError)
    async def internal_error(request: Request, exc: InternalError):
        LOG.error("%s: %s %s", exc.error, request.method, request.url.path, exc_info=exc)
        return _error(500, exc.error, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        LOG.error("Unhandled error: %s %s", request.method, request.url.path, exc_info=exc)
        return _error(500, "Internal server error", str(exc))

    return app


app = create_app()
