# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain entities for car listings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from carshop.domain.exceptions import InvariantViolation
from carshop.domain.users.entities import TokenIdentity


@dataclass(slots=True, frozen=True)
class OwnerRef:
    """Back-reference to the user who listed a car."""

    id: str
    fullname: str

    @classmethod
    def of(cls, identity: TokenIdentity) -> OwnerRef:
        return cls(id=identity.id, fullname=identity.fullname)


@dataclass(slots=True, frozen=True)
class CarDraft:
    """Car fields supplied by a client; ``id`` is set when updating."""

    vendor: str
    speed: float
    price: float
    id: str | None = None

    def __post_init__(self) -> None:
        for name in ("speed", "price"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvariantViolation("must be a finite number", field=name, value=value)


@dataclass(slots=True, frozen=True)
class Car:
    id: str
    vendor: str
    speed: float
    price: float
    owner: OwnerRef
    msgs: tuple[str, ...] = field(default_factory=tuple)

    def is_owned_by(self, identity: TokenIdentity) -> bool:
        return self.owner.id == identity.id

    def updated_from(self, draft: CarDraft) -> Car:
        return replace(self, vendor=draft.vendor, speed=draft.speed, price=draft.price)


@dataclass(slots=True, frozen=True)
class CarFilter:
    """Listing query: vendor substring and price ceiling, both optional."""

    txt: str | None = None
    max_price: float | None = None

    def __post_init__(self) -> None:
        if self.txt is not None and not self.txt.strip():
            object.__setattr__(self, "txt", None)
        if self.max_price is not None and not math.isfinite(self.max_price):
            object.__setattr__(self, "max_price", None)

    def matches(self, car: Car) -> bool:
        """Return whether the car satisfies every configured constraint."""

        if self.txt is not None and self.txt.casefold() not in car.vendor.casefold():
            return False
        if self.max_price is not None and car.price > self.max_price:
            return False
        return True
