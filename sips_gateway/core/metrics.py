"""Prometheus metrics for the SIPS gateway adapter.

- sips_gateway_invocation_total: Binary invocations by binary and outcome
- sips_gateway_invocation_latency_seconds: Time spent waiting on a binary
- sips_gateway_failures_total: Failed invocations by error type
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


invocation_total = Counter(
    "sips_gateway_invocation_total",
    "Total number of SIPS binary invocations",
    ["binary", "outcome"],  # outcome: success, error
)

invocation_latency = Histogram(
    "sips_gateway_invocation_latency_seconds",
    "SIPS binary invocation latency in seconds",
    ["binary"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

gateway_failures = Counter(
    "sips_gateway_failures_total",
    "Total number of failed SIPS invocations",
    ["error_type"],  # communication, not_found, process, timeout, malformed
)


@contextmanager
def track_invocation_latency(binary: str) -> Generator[None, None, None]:
    """Context manager to track how long a binary takes to answer."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        invocation_latency.labels(binary=binary).observe(duration)


def record_invocation_success(binary: str) -> None:
    """Record a successful invocation."""
    invocation_total.labels(binary=binary, outcome="success").inc()


def record_invocation_failure(binary: str, error_type: str) -> None:
    """Record a failed invocation."""
    invocation_total.labels(binary=binary, outcome="error").inc()
    gateway_failures.labels(error_type=error_type).inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
