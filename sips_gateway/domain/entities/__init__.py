"""Domain Entities - Merchant configuration and gateway responses."""

from .client_config import ClientConfig
from .response import (
    FIELD_DELIMITER,
    PAYMENT_FIELDS,
    REQUEST_FIELDS,
    SUCCESS_STATUS,
    Response,
)

__all__ = [
    "ClientConfig",
    "Response",
    "FIELD_DELIMITER",
    "PAYMENT_FIELDS",
    "REQUEST_FIELDS",
    "SUCCESS_STATUS",
]
