"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finwell_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finwell_gateway.api.v1 import profiles, budget, expenses, debts, net_worth, cashflow
from finwell_gateway.domain.exceptions import InvalidProfileDataError, ProfileNotFoundError
from finwell_gateway.infrastructure.database.models import Base
from finwell_gateway.infrastructure.database.session import engine
from finwell_gateway.infrastructure.observability.logging import setup_logging
from finwell_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables before the first request"""
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Finwell Gateway",
        description="Financial risk profiling, budgeting and cash-flow forecasting service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(ProfileNotFoundError)
    async def profile_not_found_handler(request: Request, exc: ProfileNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidProfileDataError)
    async def invalid_profile_handler(request: Request, exc: InvalidProfileDataError):
        logging.error(str(exc), extra={"request_id": getattr(request.state, "request_id", "unknown")})
        return JSONResponse(status_code=500, content={"detail": "Stored profile data is invalid"})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(profiles.router, prefix="/v1", tags=["profiles"])
    app.include_router(budget.router, prefix="/v1", tags=["budget"])
    app.include_router(expenses.router, prefix="/v1", tags=["expenses"])
    app.include_router(debts.router, prefix="/v1", tags=["debts"])
    app.include_router(net_worth.router, prefix="/v1", tags=["net-worth"])
    app.include_router(cashflow.router, prefix="/v1", tags=["cashflow"])

    return app


app = create_app()
