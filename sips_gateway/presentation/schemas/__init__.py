"""Pydantic schemas for API request/response validation."""

from .checkout import (
    CallPaymentUrlSchema,
    CheckoutTokenRequestSchema,
    CheckoutTokenResponseSchema,
    PaymentRequestSchema,
    PaymentResponseSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "CallPaymentUrlSchema",
    "CheckoutTokenRequestSchema",
    "CheckoutTokenResponseSchema",
    "PaymentRequestSchema",
    "PaymentResponseSchema",
    "ErrorResponseSchema",
]
