"""Checkout API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from sips_gateway.application.dto import CheckoutTokenRequest
from sips_gateway.application.services import CheckoutService
from sips_gateway.core.dependencies import get_checkout_service, get_sips_client
from sips_gateway.infrastructure.clients import SipsClient
from sips_gateway.presentation.schemas import (
    CallPaymentUrlSchema,
    CheckoutTokenRequestSchema,
    CheckoutTokenResponseSchema,
    ErrorResponseSchema,
    PaymentRequestSchema,
    PaymentResponseSchema,
)

checkout_router = APIRouter(
    prefix="/checkout",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        502: {"model": ErrorResponseSchema, "description": "SIPS rejected the request"},
        503: {"model": ErrorResponseSchema, "description": "SIPS binary unavailable"},
        504: {"model": ErrorResponseSchema, "description": "SIPS binary timed out"},
    },
)


# Plain def: the SIPS binaries block, so these run in the threadpool.
@checkout_router.post(
    "/token",
    response_model=CheckoutTokenResponseSchema,
    summary="Request Payment Form",
    description="Run the SIPS request binary and return the payment form.",
)
def create_checkout_token(
    request: CheckoutTokenRequestSchema,
    checkout_service: Annotated[CheckoutService, Depends(get_checkout_service)],
) -> CheckoutTokenResponseSchema:
    response = checkout_service.create_checkout(
        CheckoutTokenRequest(
            amount=request.amount,
            currency=request.currency,
            parameters=request.parameters,
        )
    )

    return CheckoutTokenResponseSchema(
        status=response.status,
        error=response.error,
        message=response.message,
        fields=response.fields,
        call_payment_url=response.call_payment_url,
    )


@checkout_router.post(
    "/payment",
    response_model=PaymentResponseSchema,
    summary="Decode Payment Result",
    description="Run the SIPS response binary on the encrypted DATA field.",
)
def complete_payment(
    request: PaymentRequestSchema,
    checkout_service: Annotated[CheckoutService, Depends(get_checkout_service)],
) -> PaymentResponseSchema:
    result = checkout_service.complete_payment(request.data)

    return PaymentResponseSchema(
        status=result.status,
        accepted=result.accepted,
        response_code=result.response_code,
        transaction_id=result.transaction_id,
        amount=result.amount,
        currency_code=result.currency_code,
        fields=result.fields,
    )


@checkout_router.get(
    "/call-payment-url",
    response_model=CallPaymentUrlSchema,
    summary="Get Payment Page URL",
)
def get_call_payment_url(
    client: Annotated[SipsClient, Depends(get_sips_client)],
) -> CallPaymentUrlSchema:
    return CallPaymentUrlSchema(url=client.get_call_payment_url())
