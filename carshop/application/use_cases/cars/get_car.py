# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from carshop.domain.cars.entities import Car
from carshop.domain.cars.exceptions import CarNotFoundError
from carshop.domain.cars.repositories import CarRepository


class GetCarUseCase:
    def __init__(self, *, cars: CarRepository) -> None:
        self._cars = cars

    def execute(self, car_id: str) -> Car:
        car = self._cars.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return car
