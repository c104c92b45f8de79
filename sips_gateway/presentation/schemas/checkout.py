"""Checkout-related Pydantic schemas."""

from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CheckoutTokenRequestSchema(BaseModel):
    """Schema for POST /v1/checkout/token request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "amount": "19.99",
                    "currency": "EUR",
                    "parameters": {
                        "order_id": "ORDER-42",
                        "normal_return_url": "https://shop.example.com/return",
                    },
                }
            ]
        }
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Amount in major units",
        examples=["19.99"],
    )
    currency: str = Field(
        default="EUR",
        min_length=3,
        max_length=3,
        description="ISO 4217 alphabetic currency code",
        examples=["EUR"],
    )
    parameters: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra SIPS request parameters",
    )

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.strip().upper()


class CheckoutTokenResponseSchema(BaseModel):
    """Schema for POST /v1/checkout/token response body."""

    status: str = Field(..., description="SIPS status code", examples=["0"])
    error: str = Field("", description="SIPS error text")
    message: str = Field("", description="HTML payment form")
    fields: List[str] = Field(default_factory=list, description="Raw response fields")
    call_payment_url: str = Field(..., description="SIPS payment page URL")


class PaymentRequestSchema(BaseModel):
    """Schema for POST /v1/checkout/payment request body."""

    data: str = Field(
        ...,
        min_length=1,
        description="Encrypted DATA field posted back by SIPS",
    )


class PaymentResponseSchema(BaseModel):
    """Schema for POST /v1/checkout/payment response body."""

    status: str
    accepted: bool
    response_code: str
    transaction_id: str
    amount: Optional[Decimal] = None
    currency_code: str
    fields: Dict[str, str]


class CallPaymentUrlSchema(BaseModel):
    """Schema for GET /v1/checkout/call-payment-url response body."""

    url: str
