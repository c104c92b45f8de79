"""Exception handlers mapping domain errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from sips_gateway.domain.exceptions import (
    CommunicationException,
    DomainException,
    GatewayBinaryNotFoundException,
    GatewayProcessException,
    GatewayTimeoutException,
    InvalidAmountException,
    MalformedResponseException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, exc: DomainException, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "request_id": get_request_id(),
            **extra,
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Business rejections from SIPS map to 502, an unusable binary to 503
    and a binary that hangs past its timeout to 504.
    """

    @app.exception_handler(CommunicationException)
    async def communication_handler(
        request: Request,
        exc: CommunicationException,
    ) -> JSONResponse:
        return _error_response(502, exc, status=exc.status)

    @app.exception_handler(MalformedResponseException)
    async def malformed_response_handler(
        request: Request,
        exc: MalformedResponseException,
    ) -> JSONResponse:
        return _error_response(502, exc)

    @app.exception_handler(GatewayBinaryNotFoundException)
    async def binary_not_found_handler(
        request: Request,
        exc: GatewayBinaryNotFoundException,
    ) -> JSONResponse:
        logger.error("gateway_binary_not_found", binary=exc.binary_path)
        return JSONResponse(
            status_code=503,
            content={
                "error": exc.code,
                "message": "Payment gateway unavailable. Please try again later.",
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(GatewayProcessException)
    async def process_error_handler(
        request: Request,
        exc: GatewayProcessException,
    ) -> JSONResponse:
        logger.error(
            "gateway_process_error",
            binary=exc.binary_path,
            returncode=exc.returncode,
            stderr=exc.stderr[:200],
        )
        return JSONResponse(
            status_code=503,
            content={
                "error": exc.code,
                "message": "Payment gateway unavailable. Please try again later.",
                "request_id": get_request_id(),
            },
        )

    @app.exception_handler(GatewayTimeoutException)
    async def timeout_handler(
        request: Request,
        exc: GatewayTimeoutException,
    ) -> JSONResponse:
        return _error_response(504, exc)

    @app.exception_handler(InvalidAmountException)
    async def invalid_amount_handler(
        request: Request,
        exc: InvalidAmountException,
    ) -> JSONResponse:
        return _error_response(400, exc)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
