"""Domain Interfaces - Abstractions over external collaborators."""

from .runners import CommandRunner

__all__ = [
    "CommandRunner",
]
