from __future__ import annotations

import logging
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stockroom.logging import configure_logging
from stockroom.repositories.factory import get_product_repository
from stockroom.scripts.seed import build_services, seed_demo_data
from stockroom.settings import settings
from web.routes.bills import router as bills_router
from web.routes.dashboard import router as dashboard_router
from web.routes.products import router as products_router
from web.routes.purchase_orders import router as purchase_orders_router
from web.routes.sales_orders import router as sales_orders_router
from web.routes.suppliers import router as suppliers_router
from web.routes.system import router as system_router
from web.routes.totals import router as totals_router

configure_logging(web=True)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.seed_demo_data and not get_product_repository().list_all():
        seed_demo_data(*build_services())
    logger.info("Application started")
    yield


app = FastAPI(title="Stockroom", version=settings.api_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system_router)
app.include_router(products_router)
app.include_router(suppliers_router)
app.include_router(purchase_orders_router)
app.include_router(sales_orders_router)
app.include_router(bills_router)
app.include_router(dashboard_router)
app.include_router(totals_router)


@app.exception_handler(ValueError)
async def rejected_operation_handler(request: Request, exc: ValueError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": str(exc)}, status_code=400)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s:\n%s",
        request.method,
        request.url.path,
        traceback.format_exc(),
    )
    return JSONResponse({"detail": "Internal Server Error"}, status_code=500)


def serve() -> None:
    """Run the API under uvicorn on the configured host and port."""
    logger.info("Serving on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
