# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Response, g, request

from carshop.domain.users.entities import TokenIdentity
from carshop.domain.users.repositories import TokenSigner
from carshop.shared.config import AppConfig
from carshop.shared.errors import UnauthorizedError
from carshop.shared.logging import logger


class CookieAuthenticator:
    """Reads and writes the login token cookie."""

    def __init__(self, *, tokens: TokenSigner, config: AppConfig) -> None:
        self._tokens = tokens
        self._cookie_name = config.cookie_name
        self._secure = config.cookie_secure
        self._httponly = config.cookie_httponly
        self._samesite = config.cookie_samesite

    def current_identity(self) -> TokenIdentity | None:
        return self._tokens.verify(request.cookies.get(self._cookie_name))

    def require_identity(self) -> TokenIdentity:
        identity = self.current_identity()
        if identity is None:
            logger.warning(
                f"No valid {self._cookie_name} cookie on {request.method} {request.path}"
            )
            raise UnauthorizedError()
        g.user_id = identity.id
        return identity

    def set_token(self, response: Response, token: str) -> None:
        response.set_cookie(
            self._cookie_name,
            token,
            httponly=self._httponly,
            samesite=self._samesite,
            secure=self._secure,
        )

    def clear_token(self, response: Response) -> None:
        response.delete_cookie(
            self._cookie_name,
            httponly=self._httponly,
            samesite=self._samesite,
            secure=self._secure,
        )
