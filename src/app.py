"""Checkout FastAPI application.

Serves the shared cart, orders and the simulated payment gateway. Requests
for cart and order routes are wrapped in the ordering domain context; every
request gets a correlation ID bound into the structlog context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.domain import ordering
from ordering.utils.logging import add_context, clear_context, get_logger
from protean.integrations.fastapi import register_exception_handlers

from shared.references import CORRELATION_PREFIX, generate_reference

ordering.init()

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/cart": ordering,
    "/orders": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Checkout API",
    description="Mock e-commerce checkout: cart, orders and simulated payments",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[CORRELATION_HEADER],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match: pass through (payment, health check, docs)
    return await call_next(request)


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    """Bind a correlation ID for the request and echo it back in the response.

    Unhandled errors are turned into a 500 here, while the ID is still bound,
    so the error log line and the response both carry it.
    """
    correlation_id = request.headers.get(CORRELATION_HEADER) or generate_reference(CORRELATION_PREFIX)
    request.state.correlation_id = correlation_id
    clear_context()
    add_context(correlation_id=correlation_id)
    try:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "unhandled_exception",
                method=request.method,
                path=request.url.path,
                error=str(exc),
                exc_info=exc,
            )
            response = JSONResponse(
                status_code=500,
                content={"error": "Internal server error", "correlation_id": correlation_id},
            )
        response.headers[CORRELATION_HEADER] = correlation_id
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
        )
        return response
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from ordering.api.routes import cart_router, order_router  # noqa: E402
from payments.api.routes import payment_router  # noqa: E402

app.include_router(cart_router)
app.include_router(order_router)
app.include_router(payment_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "ordering": {"name": ordering.name},
            },
        }
    )
