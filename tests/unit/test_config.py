"""Unit tests for settings and ClientConfig construction."""

from sips_gateway.core.config import SipsSettings
from sips_gateway.domain.entities import ClientConfig


def test_sips_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SIPS_MERCHANT_ID", "011223344551111")
    monkeypatch.setenv("SIPS_MERCHANT_COUNTRY", "be")
    monkeypatch.setenv("SIPS_DEBUG", "true")
    monkeypatch.setenv("SIPS_COMMAND_TIMEOUT", "30")

    config = ClientConfig.from_settings(SipsSettings())

    assert config.merchant_id == "011223344551111"
    assert config.country == "be"
    assert config.debug is True
    assert config.command_timeout == 30.0


def test_timeout_unset_by_default(monkeypatch):
    monkeypatch.delenv("SIPS_COMMAND_TIMEOUT", raising=False)

    assert SipsSettings(_env_file=None).command_timeout is None
