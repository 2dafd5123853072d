"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from wallet_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from wallet_gateway.api.v1 import payment_methods, transfers
from wallet_gateway.infrastructure.observability.logging import setup_logging
from wallet_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Wallet Gateway",
        description="Payment method listing and wallet transfer fee service",
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
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(payment_methods.router, prefix="/v1", tags=["payment-methods"])
    app.include_router(transfers.router, prefix="/v1", tags=["transfers"])

    return app


app = create_app()
