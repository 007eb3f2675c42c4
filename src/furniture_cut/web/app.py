"""FastAPI application factory."""

from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from furniture_cut.infrastructure.logging_context import (
    configure_logging,
    generate_request_id,
    request_context,
)
from furniture_cut.web.dependencies import get_settings
from furniture_cut.web.exceptions import register_exception_handlers
from furniture_cut.web.routers import cut_router

REQUEST_ID_HEADER = "X-Request-ID"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    configure_logging(get_settings().logging.level)

    app = FastAPI(
        title="Furniture Cut API",
        description="REST API for laying out furniture elements on stock sheets",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    @app.middleware("http")
    async def bind_request_id(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Bind the request id for logging and echo it on the response."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
        with request_context(request_id):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    register_exception_handlers(app)

    app.include_router(cut_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
