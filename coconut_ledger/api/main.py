"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from coconut_ledger.api.middleware import RequestIDMiddleware, MetricsMiddleware
from coconut_ledger.api.v1 import reports, transactions
from coconut_ledger.infrastructure.observability.logging import setup_logging
from coconut_ledger.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Coconut Ledger",
        description="Daily purchase/sale ledger with table and dashboard reports",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(reports.router, prefix="/v1", tags=["reports"])

    return app


app = create_app()
