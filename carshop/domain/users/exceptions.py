# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from carshop.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    default_code = "user_already_exists"
    default_message = "Username taken"


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Not you!"


class UserNotFoundError(DomainError):
    default_code = "user_not_found"

    def __init__(self, user_id: str) -> None:
        super().__init__(message=f"Cannot find user - {user_id}", context={"user_id": user_id})


class InsufficientCreditError(DomainError):
    """Applying the delta would take the score below zero."""

    default_code = "insufficient_credit"
    default_message = "No credit"

    def __init__(self, score: int, diff: int) -> None:
        super().__init__(context={"score": score, "diff": diff})
