# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .get_car import GetCarUseCase
from .query_cars import QueryCarsUseCase
from .remove_car import RemoveCarUseCase
from .save_car import SaveCarUseCase

__all__ = [
    "GetCarUseCase",
    "QueryCarsUseCase",
    "RemoveCarUseCase",
    "SaveCarUseCase",
]
