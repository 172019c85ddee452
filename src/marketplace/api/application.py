"""FastAPI application factory for the marketplace."""

import time
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from marketplace import settings
from marketplace.api.errors import register_exception_handlers
from marketplace.catalogue.api.routes import router as product_router
from marketplace.domain import marketplace
from marketplace.identity.api.routes import router as auth_router
from marketplace.identity.api.routes import userinfo_router
from marketplace.ordering.api.routes import cart_router, order_router
from marketplace.utils.logging import bind_request_context, clear_request_context

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    """Build the app. The domain must already be initialized."""
    app = FastAPI(
        title="Marketplace API",
        description="Marketplace of sellers' listings with carts and orders",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the marketplace domain context and tag log lines with the request."""
        clear_request_context()
        bind_request_context(request_id=uuid4().hex[:12], method=request.method, path=request.url.path)
        started = time.perf_counter()

        with marketplace.domain_context():
            response = await call_next(request)

        logger.info(
            "Request handled",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    app.include_router(auth_router)
    app.include_router(userinfo_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(order_router)

    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": marketplace.name})

    return app
