from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from devnzo_tools.entrypoints.http.exception_handlers import register_exception_handlers
from devnzo_tools.entrypoints.http.routes.calculators import router as calculators_router
from devnzo_tools.entrypoints.http.routes.contact import router as contact_router
from devnzo_tools.entrypoints.http.routes.fee_plans import router as fee_plans_router
from devnzo_tools.entrypoints.http.routes.health import router as health_router
from devnzo_tools.infra.db.session import dispose_engine
from devnzo_tools.infra.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    yield
    dispose_engine()


def build_app() -> FastAPI:
    app = FastAPI(
        title="Devnzo Tools API",
        description="""
        Free financial calculators for online store owners.

        ## Features
        - Business loan calculator (payment, totals, fully-loaded APR)
        - ROI calculator (absolute and annualized return)
        - Profit margin calculator
        - Platform fee comparison across pricing tiers
        - Contact form delivery

        ## Monetary Values
        Amounts are exchanged as decimal strings; results are rounded to cents.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        contact={
            "name": "Devnzo Team",
            "email": "support@devnzo.com",
        },
        license_info={
            "name": "Proprietary",
        },
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(calculators_router, prefix="/v1")
    app.include_router(fee_plans_router, prefix="/v1")
    app.include_router(contact_router, prefix="/v1")

    return app


app = build_app()
