# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Car, CarDraft, CarFilter, OwnerRef
from .exceptions import CarNotFoundError, NotCarOwnerError
from .repositories import CarRepository

__all__ = [
    "Car",
    "CarDraft",
    "CarFilter",
    "CarNotFoundError",
    "CarRepository",
    "NotCarOwnerError",
    "OwnerRef",
]
