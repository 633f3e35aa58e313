# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from carshop.domain.cars.exceptions import CarNotFoundError, NotCarOwnerError
from carshop.domain.cars.repositories import CarRepository
from carshop.domain.users.entities import TokenIdentity
from carshop.shared.logging import logger

REMOVED_MESSAGE = "Car removed"


class RemoveCarUseCase:
    def __init__(self, *, cars: CarRepository) -> None:
        self._cars = cars

    def execute(self, car_id: str, acting: TokenIdentity) -> str:
        existing = self._cars.find_by_id(car_id)
        if existing is None:
            raise CarNotFoundError(car_id)
        if not existing.is_owned_by(acting):
            raise NotCarOwnerError(car_id=car_id, user_id=acting.id)
        if not self._cars.remove(car_id):
            raise CarNotFoundError(car_id)
        logger.info(f"cars.remove: removed car_id={car_id} owner={acting.id}")
        return REMOVED_MESSAGE
