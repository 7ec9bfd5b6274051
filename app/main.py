from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.config import Settings, settings as default_settings
from app.database import Store, create_db_and_tables
from app.exceptions import PizzaShopError, StoreError
from app.routes import (
    contact,
    orders,
    pizzas,
)

import logging
import os
from typing import Optional
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    settings = settings or default_settings

    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = store or Store.from_settings(settings)
        # Run DB creation ONLY in local
        if settings.ENV == "local":
            await create_db_and_tables(app.state.store)
        yield
        await app.state.store.dispose()

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, error: StoreError):
        logger.error(f"Store error on {request.method} {request.url.path}: {error.__cause__!r}")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(PizzaShopError)
    async def handle_pizza_shop_error(request: Request, error: PizzaShopError):
        logger.warning(f"{type(error).__name__} [{error.status_code}]: {error.message}")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, error: RequestValidationError):
        logger.warning(f"Rejected request to {request.url.path}: {error.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request data"})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, error: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    app.include_router(pizzas.router, prefix="/api", tags=["Pizzas"])
    app.include_router(orders.router, prefix="/api", tags=["Orders"])
    app.include_router(contact.router, prefix="/api", tags=["Contact"])

    # pizza images live under <static_dir>/pizzas/{id}.webp
    if os.path.isdir(settings.static_dir):
        app.mount("/public", StaticFiles(directory=settings.static_dir), name="public")
    else:
        logger.warning(f"Static directory {settings.static_dir!r} not found, /public is not served")

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "endpoints": {
                "pizzas": "/api/pizzas",
                "pizzaOfTheDay": "/api/pizza-of-the-day",
                "orders": "/api/orders",
                "order": "/api/order?id={orderId}",
                "pastOrders": "/api/past-orders",
                "pastOrder": "/api/past-order/{orderId}",
                "contact": "/api/contact",
            },
        }

    return app


app = create_app()
