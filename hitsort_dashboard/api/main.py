"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from hitsort_dashboard.api.middleware import RequestIDMiddleware, MetricsMiddleware
from hitsort_dashboard.api.v1 import auth, dashboard, records, settlements
from hitsort_dashboard.infrastructure.database.models import Base
from hitsort_dashboard.infrastructure.database.session import engine
from hitsort_dashboard.infrastructure.observability.logging import setup_logging
from hitsort_dashboard.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Settlement ledger is the only local table
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Hitsort Dashboard",
        description="Card sales, seller settlement and expenditure reports",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(auth.router, prefix="/v1", tags=["auth"])
    app.include_router(dashboard.router, prefix="/v1", tags=["dashboard"])
    app.include_router(records.router, prefix="/v1", tags=["records"])
    app.include_router(settlements.router, prefix="/v1", tags=["settlements"])

    return app


app = create_app()
