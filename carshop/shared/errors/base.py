# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True, eq=False)
class AppError(Exception):
    """A failure the HTTP layer knows how to render.

    ``message`` is client-facing text; ``context`` only ever goes to the logs.
    """

    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    @property
    def is_unauthorized(self) -> bool:
        return self.status == HTTPStatus.UNAUTHORIZED

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Business-rule failure.

    Subclasses declare ``default_code``, ``default_status`` and
    ``default_message``; keyword arguments override them per instance.
    """

    default_code: ClassVar[str] = "domain_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST
    default_message: ClassVar[str | None] = None

    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code or self.default_code,
            status=status or self.default_status,
            message=message or self.default_message,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self, code: str = "infrastructure_error", *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(code=code, status=HTTPStatus.BAD_REQUEST, context=context)


class ValidationError(AppError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(code="validation_error", status=HTTPStatus.BAD_REQUEST, context=context)


class UnauthorizedError(AppError):
    def __init__(self) -> None:
        super().__init__(code="unauthorized", status=HTTPStatus.UNAUTHORIZED)
