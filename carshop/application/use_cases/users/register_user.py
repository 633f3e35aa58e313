# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from carshop.domain.users.entities import TokenIdentity, User
from carshop.domain.users.exceptions import UserAlreadyExistsError
from carshop.domain.users.repositories import PasswordHasher, TokenSigner, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenSigner,
        password_hasher: PasswordHasher,
        default_score: int = 100,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._default_score = default_score

    def execute(self, username: str, password: str, fullname: str) -> tuple[User, str]:
        existing = self._users.find_by_username(username)
        if existing:
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        user = User(
            id="",
            username=username,
            password_hash=hashed,
            fullname=fullname,
            score=self._default_score,
        )
        persisted = self._users.add(user)
        return persisted, self._tokens.sign(TokenIdentity.of(persisted))
