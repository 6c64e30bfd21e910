"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from float_wallet.api.middleware import RequestContextMiddleware
from float_wallet.api.v1 import cards, transactions, recommendation, summary
from float_wallet.infrastructure.database.session import SessionLocal, init_db
from float_wallet.infrastructure.database.seed import seed_demo_wallet
from float_wallet.infrastructure.observability.logging import setup_logging
from float_wallet.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and optionally seed the starter wallet"""
    init_db()
    if settings.seed_demo_wallet:
        db = SessionLocal()
        try:
            seed_demo_wallet(db)
        finally:
            db.close()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Float Wallet",
        description="Credit card float recommendations and usage tracking",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(cards.router, prefix="/v1", tags=["cards"])
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(recommendation.router, prefix="/v1", tags=["recommendations"])
    app.include_router(summary.router, prefix="/v1", tags=["summary"])

    return app


app = create_app()
