"""
Integration tests for the checkout API.

These tests verify:
1. Payment form and payment result endpoints
2. Mapping of gateway failures to HTTP status codes
3. Request ID propagation
4. Rejection of input that cannot be passed to a binary
"""

from dataclasses import replace

import pytest
from httpx import ASGITransport, AsyncClient

from sips_gateway.core.dependencies import get_sips_client
from sips_gateway.domain.exceptions import (
    GatewayBinaryNotFoundException,
    GatewayProcessException,
    GatewayTimeoutException,
)
from sips_gateway.infrastructure.clients import SipsClient
from sips_gateway.main import app

from tests.conftest import REQUEST_BINARY


# =============================================================================
# Checkout Token
# =============================================================================

class TestCheckoutToken:

    @pytest.mark.asyncio
    async def test_returns_payment_form(self, api_client: AsyncClient, fake_runner):
        fake_runner.output = "!0!!<form></form>!"

        response = await api_client.post("/v1/checkout/token", json={
            "amount": "19.99",
            "currency": "usd",
            "parameters": {"order_id": "ORDER-42"},
        })

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "0"
        assert data["message"] == "<form></form>"
        assert data["fields"] == ["0", "", "<form></form>"]
        assert data["call_payment_url"].endswith("/demo/callpayment")

        parameters = fake_runner.last_parameters
        assert parameters["amount"] == "1999"
        assert parameters["currency_code"] == "840"
        assert parameters["order_id"] == "ORDER-42"

    @pytest.mark.asyncio
    async def test_gateway_rejection_returns_502(self, api_client: AsyncClient, fake_runner):
        fake_runner.output = "12!Declined"

        response = await api_client.post("/v1/checkout/token", json={"amount": "10", "currency": "EUR"})

        assert response.status_code == 502
        data = response.json()
        assert data["error"] == "GATEWAY_COMMUNICATION_ERROR"
        assert data["status"] == "12"

    @pytest.mark.asyncio
    async def test_negative_amount_rejected(self, api_client: AsyncClient, fake_runner):
        response = await api_client.post("/v1/checkout/token", json={"amount": "-1", "currency": "EUR"})

        assert response.status_code == 422
        assert fake_runner.calls == []

    @pytest.mark.asyncio
    async def test_empty_output_returns_502(self, api_client: AsyncClient, fake_runner):
        fake_runner.output = ""

        response = await api_client.post("/v1/checkout/token", json={"amount": "10"})

        assert response.status_code == 502
        assert response.json()["error"] == "GATEWAY_MALFORMED_RESPONSE"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error,status_code", [
        (GatewayBinaryNotFoundException(REQUEST_BINARY), 503),
        (GatewayProcessException(REQUEST_BINARY, 1, "segfault"), 503),
        (GatewayTimeoutException(REQUEST_BINARY, 5.0), 504),
    ])
    async def test_infrastructure_failures(
        self,
        api_client: AsyncClient,
        fake_runner,
        error,
        status_code,
    ):
        fake_runner.error = error

        response = await api_client.post("/v1/checkout/token", json={"amount": "10"})

        assert response.status_code == status_code
        assert response.json()["error"] == error.code


# =============================================================================
# Payment Result
# =============================================================================

class TestCheckoutPayment:

    @pytest.mark.asyncio
    async def test_decodes_payment(self, api_client: AsyncClient, fake_runner):
        fake_runner.output = "!0!!014213245611111!fr!2500!123456!CB!20261019103000!103000!20261019!00!"

        response = await api_client.post("/v1/checkout/payment", json={"data": "encrypted"})

        assert response.status_code == 200
        data = response.json()
        assert data["accepted"] is True
        assert data["transaction_id"] == "123456"
        assert data["fields"]["merchant_id"] == "014213245611111"
        assert fake_runner.last_parameters["message"] == "encrypted"

    @pytest.mark.asyncio
    async def test_empty_data_rejected(self, api_client: AsyncClient, fake_runner):
        response = await api_client.post("/v1/checkout/payment", json={"data": ""})

        assert response.status_code == 422
        assert fake_runner.calls == []


# =============================================================================
# Misc
# =============================================================================

@pytest.mark.asyncio
async def test_call_payment_url(api_client: AsyncClient):
    response = await api_client.get("/v1/checkout/call-payment-url")

    assert response.status_code == 200
    assert response.json()["url"] == "https://payment.sips-atos.com:443/cgis-payment/demo/callpayment"


@pytest.mark.asyncio
async def test_health(api_client: AsyncClient):
    response = await api_client.get("/v1/health")

    assert response.status_code == 200
    assert response.json()["api_version"] == "6.15"


@pytest.mark.asyncio
async def test_request_id_echoed(api_client: AsyncClient):
    response = await api_client.get("/v1/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


@pytest.mark.asyncio
async def test_metrics_exposed(api_client: AsyncClient, fake_runner):
    await api_client.post("/v1/checkout/token", json={"amount": "10"})

    response = await api_client.get("/metrics")

    assert response.status_code == 200
    assert "sips_gateway_invocation_total" in response.text


# =============================================================================
# Input Rejected Before Reaching SIPS
# =============================================================================

class TestUnpassableInput:

    @pytest.mark.asyncio
    async def test_amount_too_large_returns_400(self, api_client: AsyncClient, fake_runner):
        response = await api_client.post("/v1/checkout/token", json={"amount": "1e30"})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_AMOUNT"
        assert fake_runner.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path,body", [
        ("/v1/checkout/token", {"amount": "10", "parameters": {"order_id": "a\u0000b"}}),
        ("/v1/checkout/payment", {"data": "\u0000"}),
    ])
    async def test_nul_byte_returns_400(self, client_config, tmp_path, path, body):
        config = replace(
            client_config,
            request_path=str(tmp_path / "request"),
            response_path=str(tmp_path / "response"),
        )
        app.dependency_overrides[get_sips_client] = lambda: SipsClient(config)

        try:
            async with AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            ) as client:
                response = await client.post(path, json=body)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_PARAMETER"
