"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from voice_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from voice_gateway.api.v1 import interpret, speech
from voice_gateway.infrastructure.observability.logging import setup_logging
from voice_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Voice Gateway",
        description="Spoken business questions answered from a records snapshot",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name, "default_locale": settings.default_locale}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(interpret.router, prefix="/v1", tags=["interpret"])
    app.include_router(speech.router, prefix="/v1", tags=["speech"])

    return app


app = create_app()
