"""Data Transfer Objects for the application layer."""

from .checkout import CheckoutTokenRequest, CheckoutTokenResponse, PaymentResult

__all__ = [
    "CheckoutTokenRequest",
    "CheckoutTokenResponse",
    "PaymentResult",
]
