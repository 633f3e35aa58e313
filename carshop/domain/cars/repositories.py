# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Car, CarDraft, CarFilter, OwnerRef


class CarRepository(Protocol):
    def query(self, car_filter: CarFilter) -> Sequence[Car]: ...
    def find_by_id(self, car_id: str) -> Car | None: ...
    def add(self, draft: CarDraft, owner: OwnerRef) -> Car: ...
    def replace(self, car: Car) -> Car: ...
    def remove(self, car_id: str) -> bool: ...
