from __future__ import annotations

import pytest
from itsdangerous import URLSafeSerializer

from carshop.domain.users.entities import TokenIdentity
from carshop.infrastructure.auth.token_signer import HmacTokenSigner


@pytest.fixture()
def signer() -> HmacTokenSigner:
    return HmacTokenSigner("test-secret")


@pytest.fixture()
def identity() -> TokenIdentity:
    return TokenIdentity(id="abc123", username="alice", fullname="Alice A", is_admin=False)


def test_sign_then_verify_returns_identity(
    signer: HmacTokenSigner, identity: TokenIdentity
) -> None:
    token = signer.sign(identity)

    assert signer.verify(token) == identity


def test_sign_is_deterministic(signer: HmacTokenSigner, identity: TokenIdentity) -> None:
    assert signer.sign(identity) == signer.sign(identity)
    assert HmacTokenSigner("test-secret").sign(identity) == signer.sign(identity)


def test_verify_rejects_other_secret(identity: TokenIdentity) -> None:
    token = HmacTokenSigner("other-secret").sign(identity)

    assert HmacTokenSigner("test-secret").verify(token) is None


def test_verify_rejects_other_salt(identity: TokenIdentity) -> None:
    token = URLSafeSerializer("test-secret").dumps({"_id": "abc123"})

    assert HmacTokenSigner("test-secret").verify(token) is None
    assert HmacTokenSigner("test-secret", salt="other").verify(
        HmacTokenSigner("test-secret").sign(identity)
    ) is None


def test_verify_rejects_tampered_payload(
    signer: HmacTokenSigner, identity: TokenIdentity
) -> None:
    _, signature = signer.sign(identity).rsplit(".", 1)
    admin = TokenIdentity(id="abc123", username="alice", fullname="Alice A", is_admin=True)
    forged_payload, _ = HmacTokenSigner("other-secret").sign(admin).rsplit(".", 1)

    assert signer.verify(f"{forged_payload}.{signature}") is None


@pytest.mark.parametrize(
    "token",
    [
        None,
        "",
        "garbage",
        "a.b.c",
        "not-base64!.also-not!",
        "e30.",
        "ÿÿÿ.ÿÿÿ",
    ],
)
def test_verify_never_raises_on_malformed_input(signer: HmacTokenSigner, token) -> None:
    assert signer.verify(token) is None


@pytest.mark.parametrize(
    "claims",
    [
        ["not", "an", "object"],
        {"_id": "abc123"},
        {"_id": 1, "username": "alice", "fullname": "Alice A"},
        {"_id": "abc123", "username": "alice", "fullname": "Alice A", "isAdmin": "yes"},
    ],
)
def test_verify_rejects_signed_non_identity_payload(signer: HmacTokenSigner, claims) -> None:
    token = signer._serializer.dumps(claims)

    assert signer.verify(token) is None


def test_empty_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        HmacTokenSigner("")
