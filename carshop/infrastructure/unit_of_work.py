# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction boundary around a single repository call."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from carshop.shared.errors import InfrastructureError
from carshop.shared.logging import logger


class SqlAlchemyUnitOfWork:
    """Open a session on enter; commit on clean exit, roll back otherwise.

    The session is always closed afterwards and, when the factory is a
    ``scoped_session``, removed from the registry so the next call starts
    fresh. A lost database connection surfaces as :class:`InfrastructureError`.
    """

    __slots__ = ("_factory", "_session")

    def __init__(self, factory: Callable[[], Session]) -> None:
        self._factory = factory
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("unit of work is not active")
        return self._session

    def __enter__(self) -> Session:
        self._session = self._factory()
        return self._session

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session, self._session = self.session, None
        try:
            if exc_type is None:
                session.commit()
            else:
                logger.debug(f"uow: rollback after {exc_type.__name__}")
                session.rollback()
        except OperationalError as err:
            session.rollback()
            raise InfrastructureError("database_unavailable") from err
        finally:
            session.close()
            remove = getattr(self._factory, "remove", None)
            if remove is not None:
                remove()

        if isinstance(exc, OperationalError):
            raise InfrastructureError("database_unavailable") from exc


def unit_of_work_scope(factory: Callable[[], Session]) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(factory)
