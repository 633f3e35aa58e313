from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from carshop.infrastructure.unit_of_work import unit_of_work_scope
from carshop.shared.errors import InfrastructureError


def _factory(session: MagicMock) -> MagicMock:
    return MagicMock(return_value=session)


def test_clean_exit_commits_and_releases_session() -> None:
    session = MagicMock()
    factory = _factory(session)

    with unit_of_work_scope(factory) as active:
        assert active is session

    session.commit.assert_called_once()
    session.rollback.assert_not_called()
    session.close.assert_called_once()
    factory.remove.assert_called_once()


def test_error_rolls_back_and_propagates() -> None:
    session = MagicMock()

    with pytest.raises(KeyError):
        with unit_of_work_scope(_factory(session)):
            raise KeyError("boom")

    session.rollback.assert_called_once()
    session.commit.assert_not_called()
    session.close.assert_called_once()


def test_lost_connection_becomes_infrastructure_error() -> None:
    session = MagicMock()
    session.commit.side_effect = OperationalError("COMMIT", {}, Exception("gone"))

    with pytest.raises(InfrastructureError) as info:
        with unit_of_work_scope(_factory(session)):
            pass

    assert info.value.code == "database_unavailable"
    session.close.assert_called_once()
