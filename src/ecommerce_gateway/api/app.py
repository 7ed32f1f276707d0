"""FastAPI application for the e-commerce API gateway."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ecommerce_gateway.config import Settings, get_settings
from ecommerce_gateway.errors import BindingError
from ecommerce_gateway.logging_config import configure_logging

from .dependencies import BackendConnector, build_lifespan
from .routes import build_router

logger = logging.getLogger(__name__)

APP_TITLE = "E-commerce API Gateway"
APP_VERSION = "0.1.0"
APP_DESCRIPTION = "REST gateway over the category, product, order and auth backends"


def format_validation_error(exc: RequestValidationError) -> str:
    """Flatten FastAPI binding errors into one message.

    Example: ``limit: Input should be a valid integer, unable to parse string as an integer``
    """
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        field = ".".join(location[1:]) or ".".join(location)
        message = error.get("msg", "invalid value")
        messages.append(f"{field}: {message}" if field else message)
    return "; ".join(messages) or "invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render gateway and framework HTTP errors as the error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render binding failures as a BindingError (400) with the error envelope."""
    error = BindingError(format_validation_error(exc))
    logger.info("Rejected %s %s: %s", request.method, request.url.path, error.message)
    return await http_exception_handler(request, error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything unexpected as 500 with the error envelope."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc) or type(exc).__name__},
    )


def create_app(
    settings: Settings | None = None,
    connect: BackendConnector | None = None,
) -> FastAPI:
    """Create the gateway application.

    Args:
        settings: Application settings. If None, uses settings.
        connect: Coroutine building the backend client set. If None, uses
            BackendClients.connect.

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        lifespan=build_lifespan(connect),
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(build_router(), prefix=settings.api_prefix)

    @app.get("/", tags=["meta"])
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": APP_TITLE,
            "version": APP_VERSION,
            "description": APP_DESCRIPTION,
            "endpoints": {
                "login": f"{settings.api_prefix}/login",
                "category": f"{settings.api_prefix}/category",
                "product": f"{settings.api_prefix}/product",
                "order": f"{settings.api_prefix}/order",
                "user": f"{settings.api_prefix}/user",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", tags=["meta"])
    async def health() -> dict[str, str]:
        """Liveness check. Backends are not probed."""
        return {"status": "healthy"}

    return app


app = create_app()


def main() -> None:
    """Run the gateway with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ecommerce_gateway.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
