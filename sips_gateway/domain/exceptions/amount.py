"""Amount-related domain exceptions."""

from .base import DomainException


class InvalidAmountException(DomainException):
    """Raised when an amount cannot be sent to the gateway."""

    def __init__(self, amount):
        super().__init__(
            message=f"Invalid amount: {amount!r}",
            code="INVALID_AMOUNT",
        )
        self.amount = amount
