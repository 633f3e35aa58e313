# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from carshop.shared.errors.base import DomainError


class CarNotFoundError(DomainError):
    default_code = "car_not_found"

    def __init__(self, car_id: str) -> None:
        super().__init__(message=f"Cannot find car - {car_id}", context={"car_id": car_id})


class NotCarOwnerError(DomainError):
    default_code = "not_car_owner"
    default_message = "Not your car"

    def __init__(self, car_id: str, user_id: str) -> None:
        super().__init__(context={"car_id": car_id, "user_id": user_id})
