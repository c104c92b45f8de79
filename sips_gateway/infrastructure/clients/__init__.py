"""Gateway client implementations."""

from .sips_client import SipsClient

__all__ = [
    "SipsClient",
]
