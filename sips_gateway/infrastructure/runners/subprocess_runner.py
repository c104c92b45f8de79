"""Subprocess implementation of CommandRunner."""

import shlex
import subprocess
from typing import List, Mapping

import structlog

from sips_gateway.domain.exceptions import (
    GatewayBinaryNotFoundException,
    GatewayProcessException,
    GatewayTimeoutException,
    InvalidParameterException,
)
from sips_gateway.domain.interfaces import CommandRunner

logger = structlog.get_logger(__name__)


def encode_parameters(parameters: Mapping[str, str]) -> str:
    """
    Encode parameters as shell arguments.

    Names and values are quoted so each pair reaches the binary as a
    single literal argument, whatever spaces or metacharacters it holds.
    """
    return " ".join(
        f"{shlex.quote(str(name))}={shlex.quote(str(value))}"
        for name, value in parameters.items()
    )


def build_command_line(binary_path: str, parameters: Mapping[str, str]) -> str:
    """Build the shell form of a binary invocation."""
    encoded = encode_parameters(parameters)
    command = shlex.quote(binary_path)
    return f"{command} {encoded}" if encoded else command


def build_argv(binary_path: str, parameters: Mapping[str, str]) -> List[str]:
    """
    Build the argument vector for a binary invocation.

    Raises:
        InvalidParameterException: If a name is empty or holds "=", or
            a name or value holds a NUL byte
    """
    argv = [binary_path]
    for name, value in parameters.items():
        name, value = str(name), str(value)
        if not name or "=" in name:
            raise InvalidParameterException(name, "name must be non-empty and contain no '='")
        if "\x00" in name or "\x00" in value:
            raise InvalidParameterException(name, "NUL bytes are not allowed")
        argv.append(f"{name}={value}")
    return argv


def last_line(output: str) -> str:
    """Get the last non-blank line of some output, stripped."""
    lines = [line for line in output.splitlines() if line.strip()]
    return lines[-1].strip() if lines else ""


class SubprocessCommandRunner(CommandRunner):
    """
    Runs the SIPS binaries as child processes.

    Blocks until the child exits. Each parameter is passed as one
    `name=value` argument and no shell is involved. Failures are raised,
    not logged; the client logs them.
    """

    def invoke(
        self,
        binary_path: str,
        parameters: Mapping[str, str],
        timeout: float | None = None,
    ) -> str:
        argv = build_argv(binary_path, parameters)

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
        except (FileNotFoundError, PermissionError, NotADirectoryError) as e:
            raise GatewayBinaryNotFoundException(binary_path) from e
        except subprocess.TimeoutExpired as e:
            raise GatewayTimeoutException(binary_path, timeout) from e

        output = last_line(completed.stdout or "")

        if completed.returncode != 0:
            if not output:
                raise GatewayProcessException(
                    binary_path,
                    completed.returncode,
                    stderr=(completed.stderr or "").strip(),
                )
            logger.warning(
                "gateway_binary_nonzero_exit",
                binary=binary_path,
                returncode=completed.returncode,
            )

        return output
