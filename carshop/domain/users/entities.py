# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, replace

from carshop.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:

    id: str
    username: str
    password_hash: str
    fullname: str
    score: int
    is_admin: bool = False

    def __post_init__(self) -> None:
        if self.score < 0:
            raise InvariantViolation("must be >= 0", field="score", value=self.score)

    def with_score(self, score: int) -> User:
        return replace(self, score=score)


@dataclass(slots=True, frozen=True)
class TokenIdentity:
    """Minimal user identity carried inside a login token."""

    id: str
    username: str
    fullname: str
    is_admin: bool = False

    @classmethod
    def of(cls, user: User) -> TokenIdentity:
        return cls(
            id=user.id,
            username=user.username,
            fullname=user.fullname,
            is_admin=user.is_admin,
        )
