"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore import __version__
from bookstore.api import api_router
from bookstore.config import Settings, get_settings
from bookstore.core.exceptions import AppException
from bookstore.core.logging import get_logger, setup_logging
from bookstore.services.store import BookStore

logger = get_logger("main")


def create_app(
    store: Optional[BookStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around ``store``, a fresh one by default."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup and shutdown."""
        logger.info(f"Server is running on port {settings.port}...")
        yield
        logger.info(f"Shutting down with {len(app.state.book_store)} book(s) in memory")

    app = FastAPI(
        title=settings.app_name,
        description="In-memory book CRUD service",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.book_store = store if store is not None else BookStore()
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Render application errors as plain text."""
        logger.debug(f"{request.method} {request.url.path} -> {exc.status_code} {exc.message}")
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle framework HTTP exceptions (unknown routes, undeclared methods)."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return PlainTextResponse("Method not allowed", status_code=exc.status_code, headers=exc.headers)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
        if settings.debug:
            return PlainTextResponse(
                f"{type(exc).__name__}: {exc}",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return PlainTextResponse(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    app.include_router(api_router)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()


def main() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
