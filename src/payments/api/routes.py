"""FastAPI routes for payments."""

import asyncio
import os

from fastapi import APIRouter, HTTPException

from payments.api.schemas import (
    ConfigureGatewayRequest,
    GatewayConfigResponse,
    PaymentResultResponse,
    ProcessPaymentRequest,
)
from payments.gateway import get_gateway
from payments.gateway.simulated_adapter import SimulatedGateway

payment_router = APIRouter(prefix="/payment", tags=["payment"])


@payment_router.post("/process", status_code=200, response_model=PaymentResultResponse)
async def process_payment(body: ProcessPaymentRequest) -> PaymentResultResponse:
    """Run a payment through the gateway. A decline is a normal 200 response."""
    gateway = get_gateway()
    result = await asyncio.to_thread(
        gateway.process,
        body.card_number,
        body.expiry,
        body.cvv,
        body.cardholder_name,
    )
    return PaymentResultResponse(
        success=result.success,
        message=result.message,
        transaction_id=result.transaction_id,
    )


@payment_router.post("/gateway/configure", response_model=GatewayConfigResponse)
async def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Configure the simulated gateway (non-production only).

    This endpoint is only available when PROTEAN_ENV is not 'production'.
    It adjusts latency and failure rate for manual API testing and load runs.
    """
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    gateway = get_gateway()
    if not isinstance(gateway, SimulatedGateway):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for SimulatedGateway")

    gateway.configure(
        latency_seconds=body.latency_seconds,
        failure_rate=body.failure_rate,
    )
    return GatewayConfigResponse(
        gateway=type(gateway).__name__,
        latency_seconds=gateway.latency_seconds,
        failure_rate=gateway.failure_rate,
    )
