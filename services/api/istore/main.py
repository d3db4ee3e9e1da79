"""FastAPI application entry point.

iStore API - catalog, pricing and cart state for the storefront demo.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from istore.routes import api_router
from istore.services.storefront import Storefront
from istore.settings import Settings, get_settings
from istore.stores import KeyValueStore, MemoryStore, StorageError
from istore.stores.redis import RedisStore

logger = logging.getLogger("uvicorn.error")


def build_storage(settings: Settings) -> KeyValueStore:
    """Select the key-value backend, falling back to memory if Redis is unreachable."""
    if settings.storage_backend == "redis":
        try:
            return RedisStore.from_url(settings.redis_url)
        except StorageError:
            logger.exception("Redis init failed, falling back to in-memory storage")
    return MemoryStore()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    storage = build_storage(settings)
    app.state.storefront = Storefront(
        storage,
        cart_key=settings.cart_storage_key,
        theme_key=settings.theme_storage_key,
    ).restore()
    logger.info(f"Storefront ready ({type(storage).__name__})")

    yield

    # Shutdown
    if isinstance(storage, RedisStore):
        storage.close()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Storefront demo API: catalog, pricing and cart",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Route errors already carry { "error": {...} }; return it unwrapped.
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if isinstance(exc.detail, dict) and "error" in exc.detail:
            content = exc.detail
        else:
            content = {
                "error": {
                    "code": "HTTP_ERROR",
                    "message": str(exc.detail),
                    "detail": None,
                }
            }
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": str(exc) if settings.debug else "Internal server error",
                    "detail": None,
                }
            },
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "istore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
