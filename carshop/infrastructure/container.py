# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from carshop.application.services.password_hashing import WerkzeugPasswordHasher
from carshop.application.use_cases.cars import (
    GetCarUseCase,
    QueryCarsUseCase,
    RemoveCarUseCase,
    SaveCarUseCase,
)
from carshop.application.use_cases.users import (
    AdjustScoreUseCase,
    GetUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from carshop.infrastructure.auth.token_signer import HmacTokenSigner
from carshop.infrastructure.db import Database
from carshop.infrastructure.repositories.cars import SqlAlchemyCarRepository
from carshop.infrastructure.repositories.users import SqlAlchemyUserRepository
from carshop.interfaces.http.controllers.auth_controller import AuthController
from carshop.interfaces.http.controllers.car_controller import CarController
from carshop.interfaces.http.controllers.misc_controller import MiscController
from carshop.interfaces.http.controllers.user_controller import UserController
from carshop.interfaces.http.cookies import CookieAuthenticator
from carshop.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_signer(self) -> HmacTokenSigner:
        return HmacTokenSigner(self.config.secret_key)

    @cached_property
    def authenticator(self) -> CookieAuthenticator:
        return CookieAuthenticator(tokens=self.token_signer, config=self.config)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session_factory)

    @cached_property
    def car_repository(self) -> SqlAlchemyCarRepository:
        return SqlAlchemyCarRepository(self.database.session_factory)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_signer,
            password_hasher=self.password_hasher,
            default_score=self.config.default_score,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_signer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(users=self.user_repository)

    @cached_property
    def adjust_score_use_case(self) -> AdjustScoreUseCase:
        return AdjustScoreUseCase(users=self.user_repository, tokens=self.token_signer)

    # Car use cases

    @cached_property
    def query_cars_use_case(self) -> QueryCarsUseCase:
        return QueryCarsUseCase(cars=self.car_repository)

    @cached_property
    def get_car_use_case(self) -> GetCarUseCase:
        return GetCarUseCase(cars=self.car_repository)

    @cached_property
    def save_car_use_case(self) -> SaveCarUseCase:
        return SaveCarUseCase(cars=self.car_repository)

    @cached_property
    def remove_car_use_case(self) -> RemoveCarUseCase:
        return RemoveCarUseCase(cars=self.car_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            get_user_use_case=self.get_user_use_case,
            authenticator=self.authenticator,
        )

    @cached_property
    def user_controller(self) -> UserController:
        return UserController(
            adjust_score_use_case=self.adjust_score_use_case,
            authenticator=self.authenticator,
        )

    @cached_property
    def car_controller(self) -> CarController:
        return CarController(
            query_use_case=self.query_cars_use_case,
            get_use_case=self.get_car_use_case,
            save_use_case=self.save_car_use_case,
            remove_use_case=self.remove_car_use_case,
            authenticator=self.authenticator,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            engine=self.database.engine,
            public_dir=self.config.public_dir,
            metrics_enabled=self.config.metrics_enabled,
        )
