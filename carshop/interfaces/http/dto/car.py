# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from carshop.domain.cars.entities import Car, CarDraft, CarFilter


class CarQueryDTO(BaseModel):
    txt: str | None = None
    max_price: float | None = Field(None, alias="maxPrice")

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("max_price", mode="before")
    @classmethod
    def _lenient_price(cls, value: object) -> float | None:
        # Anything that is not a finite number disables the price filter.
        if value is None or value == "":
            return None
        try:
            price = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        return price if math.isfinite(price) else None

    def to_filter(self) -> CarFilter:
        return CarFilter(txt=self.txt, max_price=self.max_price)


class CarCreateDTO(BaseModel):
    vendor: str = Field(min_length=1, max_length=128)
    speed: float = Field(allow_inf_nan=False)
    price: float = Field(allow_inf_nan=False)

    def to_draft(self) -> CarDraft:
        return CarDraft(vendor=self.vendor, speed=self.speed, price=self.price)


class OwnerDTO(BaseModel):
    id: str = Field(alias="_id")
    fullname: str

    model_config = ConfigDict(validate_by_name=True)


class CarUpdateDTO(CarCreateDTO):
    id: str = Field(alias="_id", min_length=1)
    # Accepted for compatibility; ownership always comes from the stored record.
    owner: OwnerDTO | None = None

    model_config = ConfigDict(validate_by_name=True)

    def to_draft(self) -> CarDraft:
        return CarDraft(vendor=self.vendor, speed=self.speed, price=self.price, id=self.id)


class CarDTO(BaseModel):
    id: str = Field(alias="_id")
    vendor: str
    speed: float
    price: float
    owner: OwnerDTO
    msgs: list[str] = Field(default_factory=list)

    model_config = ConfigDict(validate_by_name=True)

    @classmethod
    def from_entity(cls, car: Car) -> CarDTO:
        return cls(
            id=car.id,
            vendor=car.vendor,
            speed=car.speed,
            price=car.price,
            owner=OwnerDTO(id=car.owner.id, fullname=car.owner.fullname),
            msgs=list(car.msgs),
        )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
