# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for listing a new car or editing an owned one."""

from __future__ import annotations

from carshop.domain.cars.entities import Car, CarDraft, OwnerRef
from carshop.domain.cars.exceptions import CarNotFoundError, NotCarOwnerError
from carshop.domain.cars.repositories import CarRepository
from carshop.domain.users.entities import TokenIdentity
from carshop.shared.logging import logger


class SaveCarUseCase:
    def __init__(self, *, cars: CarRepository) -> None:
        self._cars = cars

    def execute(self, draft: CarDraft, acting: TokenIdentity) -> Car:
        if draft.id is None:
            car = self._cars.add(draft, OwnerRef.of(acting))
            logger.info(f"cars.save: added car_id={car.id} owner={acting.id}")
            return car

        existing = self._cars.find_by_id(draft.id)
        if existing is None:
            raise CarNotFoundError(draft.id)
        if not existing.is_owned_by(acting):
            raise NotCarOwnerError(car_id=existing.id, user_id=acting.id)
        car = self._cars.replace(existing.updated_from(draft))
        logger.info(f"cars.save: updated car_id={car.id} owner={acting.id}")
        return car
