# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from carshop.domain.users.entities import User as DomainUser
from carshop.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from carshop.domain.users.repositories import UserRepository
from carshop.infrastructure.db.models import User
from carshop.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        fullname=row.fullname,
        score=int(row.score),
        is_admin=bool(row.is_admin),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    username=user.username,
                    password_hash=user.password_hash,
                    fullname=user.fullname,
                    score=user.score,
                    is_admin=user.is_admin,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise UserAlreadyExistsError() from exc

    def update_score(self, user_id: str, score: int) -> DomainUser:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if row is None:
                raise UserNotFoundError(user_id)
            row.score = score
            session.flush()
            return _to_domain(row)
