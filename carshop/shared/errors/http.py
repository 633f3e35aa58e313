# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from http import HTTPStatus

from flask import Flask, Response, g, request
from werkzeug.exceptions import HTTPException

from carshop.shared.logging import logger

from .base import AppError, DomainError


def failure_response(message: str, *, status: HTTPStatus | None = None, detail: bool = False):
    """Attach the plain-text failure message (and optional status) of a route.

    The error handler answers with this message for every failure of the
    decorated view, except domain errors that carry their own message.
    With ``detail`` set, such a domain message is appended to the route
    message instead (``"Cannot delete car, Not your car"``).
    ``401`` responses keep their status regardless of ``status``.
    """

    def decorator(f: Callable):
        @wraps(f)
        def wrapper(*args, **kwargs):
            g.failure_message = message
            g.failure_status = status
            g.failure_detail = detail
            return f(*args, **kwargs)

        return wrapper

    return decorator


def _text(body: str, status: HTTPStatus | int) -> tuple[Response, int]:
    return Response(body, mimetype="text/plain"), int(status)


def handle_app_error(error: AppError) -> tuple[Response, int]:
    route_message: str | None = g.get("failure_message")
    route_status: HTTPStatus | None = g.get("failure_status")

    if isinstance(error, DomainError) and error.message:
        body = error.message
        if route_message and g.get("failure_detail"):
            body = f"{route_message}, {error.message}"
    else:
        body = route_message or error.message or error.code

    status = error.status
    if route_status is not None and not error.is_unauthorized:
        status = route_status
    return _text(body, status)


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.BAD_REQUEST,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        route_message = g.get("failure_message") or exc.code
        context = dict(exc.context) if exc.context else {}
        line = f"{route_message}: {exc.code} on {request.method} {request.path} context={context}"
        # expected client-side failures are warnings
        if exc.is_unauthorized or isinstance(exc, DomainError):
            logger.warning(line)
        else:
            logger.error(line)
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        ip_address = request.headers.get("X-Forwarded-For", "").split(",")[0].strip() or (
            request.remote_addr or "unknown"
        )
        user_id = g.get("user_id")

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {ip_address}, user={user_id}, "
                f"query={dict(request.args)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        body = g.get("failure_message") or "Bad request"
        return _text(body, g.get("failure_status") or default_status)
