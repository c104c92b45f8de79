"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["GATEWAY_COMMUNICATION_ERROR"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["The API request was not successful (Status: -1)"],
    )
    status: str | None = Field(
        None,
        description="Status code reported by SIPS, when it answered",
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )
