# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed login tokens.

Tokens are ``itsdangerous`` URL-safe serializations of a
:class:`TokenIdentity`, signed with HMAC-SHA256 under the application secret.
They carry no timestamp, so identical identities always produce identical
tokens. Verification never raises: anything that is not a well-formed token
signed with the same secret and salt yields ``None``.
"""

from __future__ import annotations

import hashlib
from typing import Any

from itsdangerous import BadData, BadSignature, URLSafeSerializer

from carshop.domain.users.entities import TokenIdentity
from carshop.domain.users.repositories import TokenSigner
from carshop.shared.logging import logger

TOKEN_SALT = "carshop.login-token"


class HmacTokenSigner(TokenSigner):
    def __init__(self, secret: str | bytes, *, salt: str = TOKEN_SALT) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._serializer = URLSafeSerializer(
            secret,
            salt=salt,
            serializer_kwargs={"sort_keys": True},
            signer_kwargs={"digest_method": hashlib.sha256},
        )

    def sign(self, identity: TokenIdentity) -> str:
        return self._serializer.dumps(
            {
                "_id": identity.id,
                "username": identity.username,
                "fullname": identity.fullname,
                "isAdmin": identity.is_admin,
            }
        )

    def verify(self, token: str | None) -> TokenIdentity | None:
        if not token or not isinstance(token, str):
            return None
        try:
            return self._identity_from(self._serializer.loads(token))
        except BadSignature:
            logger.debug("token.verify: bad signature")
            return None
        except (BadData, TypeError, KeyError):
            logger.debug("token.verify: malformed token")
            return None

    @staticmethod
    def _identity_from(claims: Any) -> TokenIdentity:
        if not isinstance(claims, dict):
            raise TypeError("token claims must be an object")
        identity = TokenIdentity(
            id=claims["_id"],
            username=claims["username"],
            fullname=claims["fullname"],
            is_admin=claims.get("isAdmin", False),
        )
        if not all(isinstance(v, str) for v in (identity.id, identity.username, identity.fullname)):
            raise TypeError("token identity fields must be strings")
        if not isinstance(identity.is_admin, bool):
            raise TypeError("isAdmin must be a boolean")
        return identity
