# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenIdentity, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_id(self, user_id: str) -> User | None: ...
    def add(self, user: User) -> User: ...
    def update_score(self, user_id: str, score: int) -> User: ...


class TokenSigner(Protocol):
    def sign(self, identity: TokenIdentity) -> str: ...
    def verify(self, token: str | None) -> TokenIdentity | None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
