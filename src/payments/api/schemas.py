"""Pydantic request/response schemas for the Payment API.

These are external contracts with camelCase JSON keys; Python code uses the
snake_case attribute names.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CARD_NUMBER_PATTERN = re.compile(r"^\d{13,19}$")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class ProcessPaymentRequest(CamelModel):
    card_number: str
    expiry: str = Field(pattern=r"^(0[1-9]|1[0-2])/\d{2}$")
    cvv: str = Field(pattern=r"^\d{3,4}$")
    cardholder_name: str = Field(min_length=1)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "cardNumber": "5555 5555 5555 4444",
                    "expiry": "12/29",
                    "cvv": "123",
                    "cardholderName": "Jane Doe",
                }
            ]
        },
    )

    @field_validator("card_number")
    @classmethod
    def card_number_must_be_13_to_19_digits(cls, value: str) -> str:
        digits = "".join(value.split())
        if not CARD_NUMBER_PATTERN.match(digits):
            raise ValueError("Card number must be 13-19 digits")
        return digits

    @field_validator("cardholder_name")
    @classmethod
    def cardholder_name_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Cardholder name is required")
        return value


class ConfigureGatewayRequest(CamelModel):
    latency_seconds: float | None = Field(default=None, ge=0)
    failure_rate: float | None = Field(default=None, ge=0, le=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class PaymentResultResponse(CamelModel):
    success: bool
    message: str | None = None
    transaction_id: str | None = None


class GatewayConfigResponse(CamelModel):
    gateway: str
    latency_seconds: float
    failure_rate: float
