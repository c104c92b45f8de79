"""SIPS gateway exceptions."""

from .base import DomainException


class GatewayException(DomainException):
    """Base class for every failure while talking to a SIPS binary."""

    def __init__(self, message: str, code: str = "GATEWAY_ERROR"):
        super().__init__(message=message, code=code)


class CommunicationException(GatewayException):
    """Raised when the gateway answers with a non-success status."""

    def __init__(self, status: str, error: str = ""):
        super().__init__(
            message=f"The API request was not successful (Status: {status})",
            code="GATEWAY_COMMUNICATION_ERROR",
        )
        self.status = status
        self.error = error


class GatewayBinaryNotFoundException(GatewayException):
    """Raised when a SIPS binary is missing or not executable."""

    def __init__(self, binary_path: str):
        super().__init__(
            message=f"SIPS binary not found or not executable: {binary_path}",
            code="GATEWAY_BINARY_NOT_FOUND",
        )
        self.binary_path = binary_path


class GatewayProcessException(GatewayException):
    """Raised when a SIPS binary exits non-zero without printing a result."""

    def __init__(self, binary_path: str, returncode: int, stderr: str = ""):
        super().__init__(
            message=f"SIPS binary {binary_path} exited with status {returncode}",
            code="GATEWAY_PROCESS_ERROR",
        )
        self.binary_path = binary_path
        self.returncode = returncode
        self.stderr = stderr


class GatewayTimeoutException(GatewayException):
    """Raised when a SIPS binary does not finish within the configured timeout."""

    def __init__(self, binary_path: str, timeout: float):
        super().__init__(
            message=f"SIPS binary {binary_path} timed out after {timeout}s",
            code="GATEWAY_TIMEOUT",
        )
        self.binary_path = binary_path
        self.timeout = timeout


class MalformedResponseException(GatewayException):
    """Raised when a SIPS binary prints nothing usable."""

    def __init__(self, binary_path: str):
        super().__init__(
            message=f"SIPS binary {binary_path} returned an empty response",
            code="GATEWAY_MALFORMED_RESPONSE",
        )
        self.binary_path = binary_path
