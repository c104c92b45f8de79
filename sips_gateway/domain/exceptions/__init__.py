"""Domain Exceptions - Gateway failures and invalid input."""

from .base import DomainException
from .amount import InvalidAmountException
from .parameter import InvalidParameterException
from .gateway import (
    CommunicationException,
    GatewayBinaryNotFoundException,
    GatewayException,
    GatewayProcessException,
    GatewayTimeoutException,
    MalformedResponseException,
)

__all__ = [
    "DomainException",
    "InvalidAmountException",
    "InvalidParameterException",
    "GatewayException",
    "CommunicationException",
    "GatewayBinaryNotFoundException",
    "GatewayProcessException",
    "GatewayTimeoutException",
    "MalformedResponseException",
]
