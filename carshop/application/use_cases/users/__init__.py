# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .adjust_score import AdjustScoreUseCase
from .get_user import GetUserUseCase
from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase

__all__ = [
    "AdjustScoreUseCase",
    "GetUserUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
