"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from sips_gateway.application.services import CheckoutService
from sips_gateway.domain.entities import ClientConfig
from sips_gateway.infrastructure.clients import SipsClient


@lru_cache
def get_sips_client() -> SipsClient:
    """Get the shared SipsClient instance."""
    return SipsClient(ClientConfig.from_settings())


def get_checkout_service(
    client: Annotated[SipsClient, Depends(get_sips_client)],
) -> CheckoutService:
    """Get a CheckoutService instance."""
    return CheckoutService(client=client)
