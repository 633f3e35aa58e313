# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from carshop.domain.users.entities import TokenIdentity, User
from carshop.domain.users.exceptions import InvalidCredentialsError
from carshop.domain.users.repositories import PasswordHasher, TokenSigner, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenSigner,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_username(username)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()
        return user, self._tokens.sign(TokenIdentity.of(user))
