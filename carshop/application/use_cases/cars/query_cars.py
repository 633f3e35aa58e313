# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from carshop.domain.cars.entities import Car, CarFilter
from carshop.domain.cars.repositories import CarRepository


class QueryCarsUseCase:
    def __init__(self, *, cars: CarRepository) -> None:
        self._cars = cars

    def execute(self, car_filter: CarFilter) -> Sequence[Car]:
        return self._cars.query(car_filter)
