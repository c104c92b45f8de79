"""Command runner implementations."""

from .subprocess_runner import (
    SubprocessCommandRunner,
    build_argv,
    build_command_line,
    encode_parameters,
)

__all__ = [
    "SubprocessCommandRunner",
    "build_argv",
    "build_command_line",
    "encode_parameters",
]
