"""
Shared fixtures.

Provides:
- A fake CommandRunner that records invocations instead of spawning processes
- A merchant ClientConfig pointing at fake binary paths
- A SipsClient wired to both
"""

from typing import Dict, List, Mapping, Optional, Tuple

import pytest

from sips_gateway.domain.entities import ClientConfig
from sips_gateway.domain.interfaces import CommandRunner
from sips_gateway.infrastructure.clients import SipsClient

REQUEST_BINARY = "/opt/sips/bin/request"
RESPONSE_BINARY = "/opt/sips/bin/response"
PATHFILE = "/opt/sips/param/pathfile"


class FakeCommandRunner(CommandRunner):
    """Returns a canned output, or raises a canned error, for every call."""

    def __init__(self, output: str = "0!!<form></form>", error: Exception | None = None):
        self.output = output
        self.error = error
        self.calls: List[Tuple[str, Dict[str, str], Optional[float]]] = []

    def invoke(
        self,
        binary_path: str,
        parameters: Mapping[str, str],
        timeout: float | None = None,
    ) -> str:
        self.calls.append((binary_path, dict(parameters), timeout))
        if self.error is not None:
            raise self.error
        return self.output

    @property
    def last_parameters(self) -> Dict[str, str]:
        return self.calls[-1][1]


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        merchant_id="014213245611111",
        country="fr",
        pathfile=PATHFILE,
        request_path=REQUEST_BINARY,
        response_path=RESPONSE_BINARY,
        debug=True,
    )


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def sips_client(client_config: ClientConfig, fake_runner: FakeCommandRunner) -> SipsClient:
    return SipsClient(client_config, runner=fake_runner)
