from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import pytest

from carshop.application.use_cases.cars import (
    GetCarUseCase,
    QueryCarsUseCase,
    RemoveCarUseCase,
    SaveCarUseCase,
)
from carshop.domain.cars.entities import Car, CarDraft, CarFilter, OwnerRef
from carshop.domain.cars.exceptions import CarNotFoundError, NotCarOwnerError
from carshop.domain.cars.repositories import CarRepository
from carshop.domain.users.entities import TokenIdentity


class InMemoryCarRepository(CarRepository):
    def __init__(self) -> None:
        self._cars: dict[str, Car] = {}
        self._seq = 1

    def query(self, car_filter: CarFilter) -> Sequence[Car]:
        return [car for car in self._cars.values() if car_filter.matches(car)]

    def find_by_id(self, car_id: str) -> Car | None:
        return self._cars.get(car_id)

    def add(self, draft: CarDraft, owner: OwnerRef) -> Car:
        car = Car(
            id=f"c{self._seq}",
            vendor=draft.vendor,
            speed=draft.speed,
            price=draft.price,
            owner=owner,
        )
        self._seq += 1
        self._cars[car.id] = car
        return car

    def replace(self, car: Car) -> Car:
        self._cars[car.id] = car
        return car

    def remove(self, car_id: str) -> bool:
        return self._cars.pop(car_id, None) is not None


ALICE = TokenIdentity(id="u1", username="alice", fullname="Alice")
BOB = TokenIdentity(id="u2", username="bob", fullname="Bob")


@pytest.fixture()
def cars() -> InMemoryCarRepository:
    return InMemoryCarRepository()


@pytest.fixture()
def save(cars: InMemoryCarRepository) -> SaveCarUseCase:
    return SaveCarUseCase(cars=cars)


def _seed(save: SaveCarUseCase) -> dict[str, Car]:
    return {
        vendor: save.execute(CarDraft(vendor=vendor, speed=150, price=price), ALICE)
        for vendor, price in [("Subaru", 80), ("ABCar", 150), ("xabcx", 90), ("Tesla", 50_000)]
    }


def test_query_by_text_is_case_insensitive_substring(
    cars: InMemoryCarRepository, save: SaveCarUseCase
) -> None:
    _seed(save)

    found = QueryCarsUseCase(cars=cars).execute(CarFilter(txt="abc"))

    assert sorted(car.vendor for car in found) == ["ABCar", "xabcx"]


def test_query_by_max_price_is_inclusive(
    cars: InMemoryCarRepository, save: SaveCarUseCase
) -> None:
    _seed(save)
    save.execute(CarDraft(vendor="Exact", speed=1, price=100), ALICE)

    found = QueryCarsUseCase(cars=cars).execute(CarFilter(max_price=100))

    assert sorted(car.vendor for car in found) == ["Exact", "Subaru", "xabcx"]
    assert all(car.price <= 100 for car in found)


def test_query_filters_intersect(cars: InMemoryCarRepository, save: SaveCarUseCase) -> None:
    _seed(save)

    found = QueryCarsUseCase(cars=cars).execute(CarFilter(txt="abc", max_price=100))

    assert [car.vendor for car in found] == ["xabcx"]


def test_query_without_filters_returns_everything(
    cars: InMemoryCarRepository, save: SaveCarUseCase
) -> None:
    _seed(save)

    assert len(QueryCarsUseCase(cars=cars).execute(CarFilter())) == 4


def test_save_without_id_creates_car_owned_by_caller(save: SaveCarUseCase) -> None:
    car = save.execute(CarDraft(vendor="Tesla", speed=200, price=50_000), ALICE)

    assert car.owner == OwnerRef(id="u1", fullname="Alice")
    assert car.msgs == ()


def test_save_with_id_by_owner_updates_fields_and_keeps_owner(
    cars: InMemoryCarRepository, save: SaveCarUseCase
) -> None:
    car = save.execute(CarDraft(vendor="Tesla", speed=200, price=50_000), ALICE)
    cars.replace(replace(car, msgs=("hello",)))

    updated = save.execute(CarDraft(vendor="Tesla S", speed=250, price=60_000, id=car.id), ALICE)

    assert (updated.vendor, updated.speed, updated.price) == ("Tesla S", 250, 60_000)
    assert updated.owner == car.owner
    assert updated.msgs == ("hello",)


def test_save_with_id_by_other_user_is_forbidden_and_leaves_record(
    cars: InMemoryCarRepository, save: SaveCarUseCase
) -> None:
    car = save.execute(CarDraft(vendor="Tesla", speed=200, price=50_000), ALICE)

    with pytest.raises(NotCarOwnerError):
        save.execute(CarDraft(vendor="Stolen", speed=1, price=1, id=car.id), BOB)

    assert cars.find_by_id(car.id) == car


def test_save_with_unknown_id_raises_not_found(save: SaveCarUseCase) -> None:
    with pytest.raises(CarNotFoundError):
        save.execute(CarDraft(vendor="Ghost", speed=1, price=1, id="missing"), ALICE)


def test_remove_unknown_car_raises_not_found(cars: InMemoryCarRepository) -> None:
    with pytest.raises(CarNotFoundError):
        RemoveCarUseCase(cars=cars).execute("missing", ALICE)


def test_remove_owned_car_then_get_raises_not_found(
    cars: InMemoryCarRepository, save: SaveCarUseCase
) -> None:
    car = save.execute(CarDraft(vendor="Tesla", speed=200, price=50_000), ALICE)

    assert RemoveCarUseCase(cars=cars).execute(car.id, ALICE) == "Car removed"
    with pytest.raises(CarNotFoundError):
        GetCarUseCase(cars=cars).execute(car.id)


def test_remove_other_users_car_is_forbidden(
    cars: InMemoryCarRepository, save: SaveCarUseCase
) -> None:
    car = save.execute(CarDraft(vendor="Tesla", speed=200, price=50_000), ALICE)

    with pytest.raises(NotCarOwnerError):
        RemoveCarUseCase(cars=cars).execute(car.id, BOB)

    assert GetCarUseCase(cars=cars).execute(car.id) == car
