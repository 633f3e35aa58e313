# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from carshop.application.use_cases.users import AdjustScoreUseCase
from carshop.interfaces.http.cookies import CookieAuthenticator
from carshop.interfaces.http.dto.auth import ScoreUpdateRequestDTO, UserDTO
from carshop.shared.errors import failure_response
from carshop.shared.errors.validation import validate_payload
from carshop.shared.logging import logger


class UserController:
    def __init__(
        self, *, adjust_score_use_case: AdjustScoreUseCase, authenticator: CookieAuthenticator
    ) -> None:
        self._adjust_score_use_case = adjust_score_use_case
        self._auth = authenticator

    @failure_response("No logged in user")
    def update_score(self) -> Response:
        identity = self._auth.require_identity()
        dto = validate_payload(ScoreUpdateRequestDTO, request.get_json(silent=True) or {})

        user, token = self._adjust_score_use_case.execute(identity, dto.diff)
        response = jsonify(UserDTO.from_entity(user).to_payload())
        self._auth.set_token(response, token)
        logger.info(f"user.score: ok user_id={user.id} diff={dto.diff} score={user.score}")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("user", __name__, url_prefix="/api/user")
        bp.add_url_rule("", view_func=self.update_score, methods=["PUT"])
        return bp
