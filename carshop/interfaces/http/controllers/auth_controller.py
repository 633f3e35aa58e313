# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, make_response, request

from carshop.application.use_cases.users import (
    GetUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from carshop.interfaces.http.cookies import CookieAuthenticator
from carshop.interfaces.http.dto.auth import LoginRequestDTO, SignupRequestDTO, UserDTO
from carshop.shared.errors import failure_response
from carshop.shared.errors.validation import validate_payload
from carshop.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        get_user_use_case: GetUserUseCase,
        authenticator: CookieAuthenticator,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._get_user_use_case = get_user_use_case
        self._auth = authenticator

    @failure_response("Cannot get user")
    def get_user(self, user_id: str) -> Response:
        user = self._get_user_use_case.execute(user_id)
        return jsonify(UserDTO.from_entity(user).to_payload())

    @failure_response("Not you!", status=HTTPStatus.UNAUTHORIZED)
    def login(self) -> Response:
        dto = validate_payload(LoginRequestDTO, request.get_json(silent=True) or {})

        user, token = self._login_use_case.execute(dto.username, dto.password)
        response = jsonify(UserDTO.from_entity(user).to_payload())
        self._auth.set_token(response, token)
        logger.info(f"auth.login: ok user_id={user.id} username={user.username}")
        return response

    @failure_response("Nope!", status=HTTPStatus.UNAUTHORIZED)
    def signup(self) -> Response:
        dto = validate_payload(SignupRequestDTO, request.get_json(silent=True) or {})

        user, token = self._register_use_case.execute(dto.username, dto.password, dto.fullname)
        response = jsonify(UserDTO.from_entity(user).to_payload())
        self._auth.set_token(response, token)
        logger.info(f"auth.signup: ok user_id={user.id} username={user.username}")
        return response

    def logout(self) -> Response:
        response = make_response("logged-out!")
        response.mimetype = "text/plain"
        self._auth.clear_token(response)
        logger.info("auth.logout: ok")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/<user_id>", view_func=self.get_user, methods=["GET"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
