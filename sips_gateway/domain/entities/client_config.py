"""Merchant configuration for the SIPS binaries."""

from dataclasses import dataclass
from typing import Optional

from sips_gateway.core.config import SipsSettings, get_sips_settings


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable merchant configuration owned by a SipsClient.

    Attributes:
        merchant_id: Merchant ID assigned by SIPS
        country: Merchant country code (ISO 3166)
        pathfile: Path of the SIPS configuration file
        request_path: Path of the request binary
        response_path: Path of the response binary
        debug: True to target the SIPS demo environment
        command_timeout: Seconds before a binary is killed, None to wait forever
    """

    merchant_id: str
    country: str
    pathfile: str
    request_path: str
    response_path: str
    debug: bool = False
    command_timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, sips_settings: SipsSettings | None = None) -> "ClientConfig":
        sips_settings = sips_settings or get_sips_settings()
        return cls(
            merchant_id=sips_settings.merchant_id,
            country=sips_settings.merchant_country,
            pathfile=sips_settings.pathfile,
            request_path=sips_settings.request_path,
            response_path=sips_settings.response_path,
            debug=bool(sips_settings.debug),
            command_timeout=sips_settings.command_timeout,
        )
