# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping

from flask import Flask, g, request

from carshop.infrastructure.observability import record_request
from carshop.shared.config import AppConfig
from carshop.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def _get_user_id() -> str | None:
    return getattr(g, "user_id", None)


_SECRET_HEADERS = frozenset({"authorization", "cookie", "set-cookie", "x-api-key"})
_SECRET_PARAM_HINTS = ("password", "token", "secret", "key")


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    # secret headers are replaced by a short fingerprint
    return {
        key: _fingerprint(value) if key.lower() in _SECRET_HEADERS else value
        for key, value in headers.items()
    }


def _sanitize_query_params(params: Mapping[str, str]) -> dict[str, str]:
    return {
        key: "<redacted>" if any(hint in key.lower() for hint in _SECRET_PARAM_HINTS) else value
        for key, value in params.items()
    }


def _log_request_start(debug_mode: bool) -> None:
    line = f"http.start: {request.method} {request.path} ip={_get_client_ip()}"
    if debug_mode:
        line += (
            f" query={_sanitize_query_params(request.args)}"
            f" headers={_sanitize_headers(request.headers)}"
            f" body_size={request.content_length or 0}"
        )
    logger.info(line)


def _log_request_end(debug_mode: bool, status_code: int, duration: float) -> None:
    line = (
        f"http.end: {request.method} {request.path} status={status_code}"
        f" duration_ms={duration * 1000:.1f} user={_get_user_id() or '-'}"
    )
    if debug_mode:
        line += f" ip={_get_client_ip()}"
    logger.info(line)


def configure_request_logging(app: Flask, config: AppConfig) -> None:
    debug_mode = config.debug_logging
    metrics_enabled = config.metrics_enabled

    @app.before_request
    def _before_request() -> None:
        correlation_id = request.headers.get("X-Request-ID") or secrets.token_urlsafe(8)
        set_correlation_id(correlation_id)
        g.request_start_time = time.perf_counter()
        _log_request_start(debug_mode)

    @app.after_request
    def _after_request(response):
        duration = time.perf_counter() - g.get("request_start_time", time.perf_counter())
        _log_request_end(debug_mode, response.status_code, duration)
        if metrics_enabled:
            record_request(request.endpoint, request.method, response.status_code, duration)
        response.headers.setdefault("X-Request-ID", get_correlation_id())
        return response

    @app.teardown_request
    def _teardown_request(exc: Exception | None) -> None:
        if exc is not None:
            logger.error(f"http.error: {type(exc).__name__} on {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["configure_request_logging"]
