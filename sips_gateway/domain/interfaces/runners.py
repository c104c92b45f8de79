"""External command interfaces."""

from abc import ABC, abstractmethod
from typing import Mapping


class CommandRunner(ABC):
    """
    Abstract runner for the SIPS binaries.

    Executes a binary with `name=value` parameters and hands back what
    it printed.
    """

    @abstractmethod
    def invoke(
        self,
        binary_path: str,
        parameters: Mapping[str, str],
        timeout: float | None = None,
    ) -> str:
        """
        Run a binary and capture its output.

        Args:
            binary_path: Path of the executable
            parameters: Parameters passed as `name=value` arguments, in order
            timeout: Seconds to wait before giving up, None to wait forever

        Returns:
            The last non-blank line written to stdout ("" if none)

        Raises:
            GatewayBinaryNotFoundException: If the binary cannot be executed
            GatewayProcessException: If it exits non-zero without output
            GatewayTimeoutException: If it runs past the timeout
            InvalidParameterException: If a parameter cannot be passed as an argument
        """
        ...
