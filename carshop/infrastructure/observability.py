# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_LATENCY = Histogram(
    "carshop_request_latency_seconds",
    "Request latency",
    labelnames=("method",),
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
)
REQUEST_COUNTER = Counter(
    "carshop_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "method", "status"),
)


def record_request(endpoint: str | None, method: str, status: int, duration: float) -> None:
    # unmatched paths share a single label
    REQUEST_LATENCY.labels(method=method).observe(duration)
    REQUEST_COUNTER.labels(endpoint=endpoint or "unmatched", method=method, status=str(status)).inc()


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "record_request",
    "render_metrics",
]
