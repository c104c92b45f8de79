"""Request parameter exceptions."""

from .base import DomainException


class InvalidParameterException(DomainException):
    """Raised when a parameter cannot be passed to a SIPS binary."""

    def __init__(self, name: str, reason: str):
        super().__init__(
            message=f"Invalid parameter {name!r}: {reason}",
            code="INVALID_PARAMETER",
        )
        self.name = name
        self.reason = reason
