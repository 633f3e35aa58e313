# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TokenIdentity, User
from .exceptions import (
    InsufficientCreditError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenSigner, UserRepository

__all__ = [
    "InsufficientCreditError",
    "InvalidCredentialsError",
    "PasswordHasher",
    "TokenIdentity",
    "TokenSigner",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
