# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sqlalchemy_car_repository import SqlAlchemyCarRepository

__all__ = ["SqlAlchemyCarRepository"]
