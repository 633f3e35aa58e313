# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from carshop.application.use_cases.cars import (
    GetCarUseCase,
    QueryCarsUseCase,
    RemoveCarUseCase,
    SaveCarUseCase,
)
from carshop.interfaces.http.cookies import CookieAuthenticator
from carshop.interfaces.http.dto.car import CarCreateDTO, CarDTO, CarQueryDTO, CarUpdateDTO
from carshop.shared.errors import failure_response
from carshop.shared.errors.validation import validate_payload
from carshop.shared.logging import logger


class CarController:
    def __init__(
        self,
        *,
        query_use_case: QueryCarsUseCase,
        get_use_case: GetCarUseCase,
        save_use_case: SaveCarUseCase,
        remove_use_case: RemoveCarUseCase,
        authenticator: CookieAuthenticator,
    ) -> None:
        self._query_use_case = query_use_case
        self._get_use_case = get_use_case
        self._save_use_case = save_use_case
        self._remove_use_case = remove_use_case
        self._auth = authenticator

    @failure_response("Cannot load cars")
    def list_cars(self) -> Response:
        dto = validate_payload(CarQueryDTO, request.args.to_dict())

        cars = self._query_use_case.execute(dto.to_filter())
        logger.info(f"cars.list: ok txt={dto.txt!r} max_price={dto.max_price} count={len(cars)}")
        return jsonify([CarDTO.from_entity(car).to_payload() for car in cars])

    @failure_response("Cannot add car")
    def add_car(self) -> Response:
        identity = self._auth.require_identity()
        dto = validate_payload(CarCreateDTO, request.get_json(silent=True) or {})

        car = self._save_use_case.execute(dto.to_draft(), identity)
        return jsonify(CarDTO.from_entity(car).to_payload())

    @failure_response("Cannot update car")
    def update_car(self) -> Response:
        identity = self._auth.require_identity()
        dto = validate_payload(CarUpdateDTO, request.get_json(silent=True) or {})

        car = self._save_use_case.execute(dto.to_draft(), identity)
        return jsonify(CarDTO.from_entity(car).to_payload())

    @failure_response("Cannot get car")
    def get_car(self, car_id: str) -> Response:
        car = self._get_use_case.execute(car_id)
        return jsonify(CarDTO.from_entity(car).to_payload())

    @failure_response("Cannot delete car", detail=True)
    def remove_car(self, car_id: str) -> Response:
        identity = self._auth.require_identity()
        msg = self._remove_use_case.execute(car_id, identity)
        return jsonify({"msg": msg, "carId": car_id})

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("cars", __name__, url_prefix="/api/car")
        bp.add_url_rule("", view_func=self.list_cars, methods=["GET"])
        bp.add_url_rule("", view_func=self.add_car, methods=["POST"])
        bp.add_url_rule("", view_func=self.update_car, methods=["PUT"])
        bp.add_url_rule("/<car_id>", view_func=self.get_car, methods=["GET"])
        bp.add_url_rule("/<car_id>", view_func=self.remove_car, methods=["DELETE"])
        return bp
