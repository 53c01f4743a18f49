"""
AxionJS Registry Service Main Application
Flow: main.py -> config -> middleware -> routers -> services -> registry gateway
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from axions_registry.config.settings import get_settings
from axions_registry.core.exceptions import AxionsRegistryException
from axions_registry.core.logging import setup_logging
from axions_registry.middleware.logging import LoggingMiddleware
from axions_registry.services.registry_service import RegistryService

logger = structlog.get_logger()
settings = get_settings()


async def registry_exception_handler(request: Request, exc: AxionsRegistryException) -> JSONResponse:
    """Map service exceptions to JSON error responses."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def create_app(registry_service: Optional[RegistryService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        registry_service: Pre-built service (tests inject one over a mock transport)
    """
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        logger.info(
            "Starting AxionJS Registry Service",
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
            registry_url=settings.AXIONS_REGISTRY_URL,
        )
        service = registry_service or RegistryService.from_settings(settings)
        app.state.registry_service = service

        yield

        logger.info("Shutting down AxionJS Registry Service")
        await service.aclose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_exception_handler(AxionsRegistryException, registry_exception_handler)

    from axions_registry.api import generation, health, registry

    app.include_router(health.router, prefix="/api/health", tags=["health"])
    app.include_router(registry.router)
    app.include_router(generation.router)

    return app


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "axions_registry.main:create_app",
        factory=True,
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.DEBUG,
        log_config=None,  # Use structlog instead
    )


if __name__ == "__main__":
    run()
