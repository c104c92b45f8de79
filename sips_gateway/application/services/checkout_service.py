"""Checkout service - payment form and payment result use cases."""

import structlog

from sips_gateway.application.dto import (
    CheckoutTokenRequest,
    CheckoutTokenResponse,
    PaymentResult,
)
from sips_gateway.domain.entities import PAYMENT_FIELDS, REQUEST_FIELDS
from sips_gateway.infrastructure.clients import SipsClient

logger = structlog.get_logger(__name__)


class CheckoutService:
    """
    Application service for SIPS checkout use cases.

    Turns positional gateway records into named results.
    """

    def __init__(self, client: SipsClient):
        self._client = client

    def create_checkout(self, request: CheckoutTokenRequest) -> CheckoutTokenResponse:
        """
        Request the SIPS payment form for an amount.

        Raises:
            InvalidAmountException: If the amount is negative
            GatewayException: If the request binary fails
        """
        response = self._client.request_checkout_token(
            request.amount,
            request.currency,
            request.parameters,
        )
        named = response.to_dict(REQUEST_FIELDS)

        logger.info(
            "checkout_created",
            currency=request.currency,
            order_id=request.parameters.get("order_id"),
        )

        return CheckoutTokenResponse(
            status=response.status,
            error=response.error,
            message=named["message"],
            fields=list(response.fields),
            call_payment_url=self._client.get_call_payment_url(),
        )

    def complete_payment(self, encrypted_data: str) -> PaymentResult:
        """
        Decode the payment result SIPS posted back.

        The amount is converted back to major units using the currency
        code SIPS reported; it is None when SIPS sent no amount.
        """
        response = self._client.do_checkout_payment(encrypted_data)
        named = response.to_dict(PAYMENT_FIELDS)

        amount = None
        if named["amount"]:
            amount = self._client.convert_amount_from_gateway_format(
                named["amount"],
                named["currency_code"],
            )

        result = PaymentResult(
            status=response.status,
            response_code=named["response_code"],
            transaction_id=named["transaction_id"],
            amount=amount,
            currency_code=named["currency_code"],
            fields=named,
        )

        logger.info(
            "payment_decoded",
            transaction_id=result.transaction_id,
            response_code=result.response_code,
            accepted=result.accepted,
        )

        return result
