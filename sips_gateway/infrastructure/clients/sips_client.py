"""SIPS gateway client driving the vendor request/response binaries."""

from decimal import Decimal
from typing import Dict, Mapping, Optional

import structlog

from sips_gateway.core.metrics import (
    record_invocation_failure,
    record_invocation_success,
    track_invocation_latency,
)
from sips_gateway.domain.entities import ClientConfig, Response
from sips_gateway.domain.exceptions import (
    CommunicationException,
    GatewayBinaryNotFoundException,
    GatewayProcessException,
    GatewayTimeoutException,
    InvalidAmountException,
    InvalidParameterException,
    MalformedResponseException,
)
from sips_gateway.domain.interfaces import CommandRunner
from sips_gateway.infrastructure.runners import SubprocessCommandRunner
from sips_gateway.service.currency import (
    DEFAULT_CURRENCY_CODE,
    convert_amount_from_gateway_format,
    convert_amount_to_gateway_format,
    get_currency_code,
    to_decimal,
)
from sips_gateway.service.currency.conversion import Amount

logger = structlog.get_logger(__name__)

_FAILURE_TYPES = (
    (GatewayBinaryNotFoundException, "not_found"),
    (GatewayTimeoutException, "timeout"),
    (GatewayProcessException, "process"),
    (InvalidParameterException, "invalid_parameter"),
)


class SipsClient:
    """
    Client for the SIPS payment gateway.

    Builds the parameters for the request and response binaries, runs
    them through a CommandRunner and parses what they print. Holds no
    mutable state, so one instance can be shared between callers.
    """

    API_VERSION = "6.15"
    DEFAULT_CURRENCY_CODE = DEFAULT_CURRENCY_CODE

    DEMO_CALL_PAYMENT_URL = "https://payment.sips-atos.com:443/cgis-payment/demo/callpayment"
    PROD_CALL_PAYMENT_URL = "https://payment.sips-atos.com:443/cgis-payment/prod/callpayment"

    def __init__(
        self,
        config: ClientConfig | None = None,
        runner: CommandRunner | None = None,
    ):
        self._config = config or ClientConfig.from_settings()
        self._runner = runner or SubprocessCommandRunner()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def request_checkout_token(
        self,
        amount: Amount,
        currency: str,
        parameters: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """
        Ask the request binary for the payment form.

        Caller parameters are sent first; the merchant, amount and
        currency parameters always take precedence over them.

        Args:
            amount: Amount in major units, must not be negative
            currency: ISO 4217 alphabetic code (unknown codes fall back to EUR)
            parameters: Extra SIPS parameters (order_id, normal_return_url, ...)

        Returns:
            Response whose third field holds the HTML payment form

        Raises:
            InvalidAmountException: If the amount is negative, not a number or too large
            InvalidParameterException: If a parameter holds a NUL byte or a bad name
            CommunicationException: If SIPS reports an error status
        """
        value = to_decimal(amount)
        if value < 0:
            raise InvalidAmountException(amount)

        request_parameters: Dict[str, str] = dict(parameters or {})
        request_parameters.update({
            "merchant_id": self._config.merchant_id,
            "merchant_country": self._config.country,
            "pathfile": self._config.pathfile,
            "amount": self.convert_amount_to_gateway_format(value, currency),
            "currency_code": self.get_currency_code(currency),
        })

        return self._send_api_request(self._config.request_path, request_parameters)

    def do_checkout_payment(self, encrypted_data: str) -> Response:
        """
        Decode the encrypted payment result posted back by SIPS.

        Raises:
            CommunicationException: If SIPS reports an error status
        """
        return self._send_api_request(self._config.response_path, {
            "pathfile": self._config.pathfile,
            "message": encrypted_data,
        })

    def get_call_payment_url(self) -> str:
        """Get the SIPS payment page URL for the configured environment."""
        if self._config.debug:
            return self.DEMO_CALL_PAYMENT_URL
        return self.PROD_CALL_PAYMENT_URL

    @staticmethod
    def convert_amount_to_gateway_format(amount: Amount, currency: str) -> str:
        return convert_amount_to_gateway_format(amount, currency)

    @staticmethod
    def convert_amount_from_gateway_format(amount: Amount, currency_code: str) -> Decimal:
        return convert_amount_from_gateway_format(amount, currency_code)

    @staticmethod
    def get_currency_code(currency: str) -> str:
        return get_currency_code(currency)

    def _send_api_request(self, binary_path: str, parameters: Mapping[str, str]) -> Response:
        """
        Run a SIPS binary and parse its output.

        Raises CommunicationException when the status field is not "0".
        """
        log = logger.bind(binary=binary_path, parameters=sorted(parameters))
        log.info("gateway_invocation_started")

        try:
            with track_invocation_latency(binary_path):
                output = self._runner.invoke(
                    binary_path,
                    parameters,
                    timeout=self._config.command_timeout,
                )
        except Exception as e:
            error_type = next(
                (name for cls, name in _FAILURE_TYPES if isinstance(e, cls)),
                "error",
            )
            record_invocation_failure(binary_path, error_type)
            log.error(
                "gateway_invocation_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        if not output:
            record_invocation_failure(binary_path, "malformed")
            log.error("gateway_empty_response")
            raise MalformedResponseException(binary_path)

        response = Response.from_output(output)

        if response.is_error:
            record_invocation_failure(binary_path, "communication")
            log.warning(
                "gateway_request_rejected",
                status=response.status,
                error=response.error,
            )
            raise CommunicationException(response.status, response.error)

        record_invocation_success(binary_path)
        log.info("gateway_invocation_completed", num_fields=len(response))
        return response
