# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session

from carshop.domain.cars.entities import Car as DomainCar
from carshop.domain.cars.entities import CarDraft, CarFilter, OwnerRef
from carshop.domain.cars.exceptions import CarNotFoundError
from carshop.domain.cars.repositories import CarRepository
from carshop.infrastructure.db.models import Car
from carshop.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: Car) -> DomainCar:
    return DomainCar(
        id=row.id,
        vendor=row.vendor,
        speed=float(row.speed),
        price=float(row.price),
        owner=OwnerRef(id=row.owner_id, fullname=row.owner_fullname),
        msgs=tuple(row.msgs or ()),
    )


class SqlAlchemyCarRepository(CarRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def query(self, car_filter: CarFilter) -> Sequence[DomainCar]:
        with unit_of_work_scope(self._session_factory) as session:
            q = session.query(Car)
            if car_filter.max_price is not None:
                q = q.filter(Car.price <= car_filter.max_price)
            rows = q.order_by(Car.created_at.asc()).all()
            cars = [_to_domain(row) for row in rows]
        # SQLite lower()/LIKE only fold ASCII, so vendor matching stays in Python
        return [car for car in cars if car_filter.matches(car)]

    def find_by_id(self, car_id: str) -> DomainCar | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Car, car_id)
            return _to_domain(row) if row else None

    def add(self, draft: CarDraft, owner: OwnerRef) -> DomainCar:
        with unit_of_work_scope(self._session_factory) as session:
            row = Car(
                vendor=draft.vendor,
                speed=draft.speed,
                price=draft.price,
                owner_id=owner.id,
                owner_fullname=owner.fullname,
                msgs=[],
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def replace(self, car: DomainCar) -> DomainCar:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Car, car.id)
            if row is None:
                raise CarNotFoundError(car.id)
            row.vendor = car.vendor
            row.speed = car.speed
            row.price = car.price
            row.owner_id = car.owner.id
            row.owner_fullname = car.owner.fullname
            row.msgs = list(car.msgs)
            session.flush()
            return _to_domain(row)

    def remove(self, car_id: str) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            deleted = session.query(Car).filter(Car.id == car_id).delete()
            return deleted > 0
