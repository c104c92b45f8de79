"""Data transfer objects for checkout operations."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass(frozen=True)
class CheckoutTokenRequest:
    """Input for a payment form request."""

    amount: Decimal
    currency: str
    parameters: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CheckoutTokenResponse:
    """Payment form returned by the request binary."""

    status: str
    error: str
    message: str
    fields: List[str]
    call_payment_url: str


@dataclass(frozen=True)
class PaymentResult:
    """Decoded payment result from the response binary."""

    status: str
    response_code: str
    transaction_id: str
    amount: Optional[Decimal]
    currency_code: str
    fields: Dict[str, str]

    @property
    def accepted(self) -> bool:
        """True when the bank authorised the payment."""
        return self.response_code == "00"
