# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for moving a user's score by a signed delta."""

from __future__ import annotations

from carshop.domain.users.entities import TokenIdentity, User
from carshop.domain.users.exceptions import InsufficientCreditError, UserNotFoundError
from carshop.domain.users.repositories import TokenSigner, UserRepository


class AdjustScoreUseCase:
    def __init__(self, *, users: UserRepository, tokens: TokenSigner) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, identity: TokenIdentity, diff: int) -> tuple[User, str]:
        # The stored score is authoritative; tokens never carry it.
        user = self._users.find_by_id(identity.id)
        if user is None:
            raise UserNotFoundError(identity.id)
        if user.score + diff < 0:
            raise InsufficientCreditError(score=user.score, diff=diff)
        updated = self._users.update_score(user.id, user.score + diff)
        return updated, self._tokens.sign(TokenIdentity.of(updated))
