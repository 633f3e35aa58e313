from __future__ import annotations

from dataclasses import replace

import pytest

from carshop.application.use_cases.users import (
    AdjustScoreUseCase,
    GetUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from carshop.domain.users.entities import TokenIdentity, User
from carshop.domain.users.exceptions import (
    InsufficientCreditError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from carshop.domain.users.repositories import PasswordHasher, UserRepository
from carshop.infrastructure.auth.token_signer import HmacTokenSigner


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        new_user = replace(user, id=f"u{self._seq}")
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def update_score(self, user_id: str, score: int) -> User:
        updated = self._users[user_id].with_score(score)
        self._users[user_id] = updated
        return updated


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def signer() -> HmacTokenSigner:
    return HmacTokenSigner("test-secret")


@pytest.fixture()
def register(users: InMemoryUserRepository, signer: HmacTokenSigner) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=signer, password_hasher=DeterministicHasher())


def _seed_user(users: InMemoryUserRepository, score: int) -> User:
    return users.add(
        User(id="", username="bob", password_hash="hashed:pw", fullname="Bob", score=score)
    )


def test_register_user_defaults_score_and_issues_token(
    register: RegisterUserUseCase, signer: HmacTokenSigner
) -> None:
    user, token = register.execute("alice", "secret123", "Alice A")

    assert user.username == "alice"
    assert user.score == 100
    assert user.password_hash == "hashed:secret123"
    identity = signer.verify(token)
    assert identity is not None
    assert (identity.id, identity.username) == (user.id, "alice")


def test_register_user_uses_configured_default_score(
    users: InMemoryUserRepository, signer: HmacTokenSigner
) -> None:
    use_case = RegisterUserUseCase(
        users=users, tokens=signer, password_hasher=DeterministicHasher(), default_score=7
    )

    user, _ = use_case.execute("alice", "pw", "Alice")

    assert user.score == 7


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute("alice", "secret123", "Alice")

    with pytest.raises(UserAlreadyExistsError):
        register.execute("alice", "other", "Alice Again")


def test_login_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository, signer: HmacTokenSigner
) -> None:
    registered, signup_token = register.execute("alice", "secret123", "Alice")
    login = LoginUserUseCase(users=users, tokens=signer, password_hasher=DeterministicHasher())

    user, token = login.execute("alice", "secret123")

    assert user == registered
    assert token == signup_token


@pytest.mark.parametrize(("username", "password"), [("alice", "wrong"), ("nobody", "secret123")])
def test_login_user_invalid_credentials(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    signer: HmacTokenSigner,
    username: str,
    password: str,
) -> None:
    register.execute("alice", "secret123", "Alice")
    login = LoginUserUseCase(users=users, tokens=signer, password_hasher=DeterministicHasher())

    with pytest.raises(InvalidCredentialsError):
        login.execute(username, password)


def test_get_user_unknown_id_raises(users: InMemoryUserRepository) -> None:
    with pytest.raises(UserNotFoundError):
        GetUserUseCase(users=users).execute("missing")


def test_adjust_score_rejects_overdraft_and_keeps_score(
    users: InMemoryUserRepository, signer: HmacTokenSigner
) -> None:
    user = _seed_user(users, score=50)
    use_case = AdjustScoreUseCase(users=users, tokens=signer)

    with pytest.raises(InsufficientCreditError):
        use_case.execute(TokenIdentity.of(user), -60)

    assert users.find_by_id(user.id).score == 50


def test_adjust_score_to_zero_succeeds_and_reissues_token(
    users: InMemoryUserRepository, signer: HmacTokenSigner
) -> None:
    user = _seed_user(users, score=50)
    use_case = AdjustScoreUseCase(users=users, tokens=signer)

    updated, token = use_case.execute(TokenIdentity.of(user), -50)

    assert updated.score == 0
    assert users.find_by_id(user.id).score == 0
    assert signer.verify(token) == TokenIdentity.of(updated)


def test_adjust_score_for_vanished_user_raises(
    users: InMemoryUserRepository, signer: HmacTokenSigner
) -> None:
    ghost = TokenIdentity(id="ghost", username="ghost", fullname="Ghost")

    with pytest.raises(UserNotFoundError):
        AdjustScoreUseCase(users=users, tokens=signer).execute(ghost, 10)
