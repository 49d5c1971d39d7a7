"""SmartShop FastAPI application.

Processes commands synchronously via HTTP inside the smartshop domain context.

Usage:
    uvicorn smartshop.app:app --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from smartshop.api.routes import customer_router, order_router, product_router
from smartshop.domain import logger, smartshop


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialized once per worker, after all domain modules are importable
    smartshop.init()
    logger.info("SmartShop API started", domain=smartshop.name)
    yield


app = FastAPI(
    title="SmartShop API",
    description="Products, customer carts and order placement",
    lifespan=lifespan,
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the smartshop domain context for each request."""
    with smartshop.domain_context():
        response = await call_next(request)
    return response


app.include_router(product_router)
app.include_router(customer_router)
app.include_router(order_router)
register_exception_handlers(app)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": smartshop.name})
