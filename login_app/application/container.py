"""Composition root / DI container.

UI should not import services or repositories directly. This container lives
in the application layer and wires up concrete implementations.

Unlike a service locator, nothing is cached: every ``build_*`` call constructs
a fresh object graph from the leaf (service) up.
"""

from __future__ import annotations

from login_app.application.ports.users import (
    CreateUserUseCasePort,
    FetchUsersUseCasePort,
    UserRepositoryPort,
    UserServicePort,
)
from login_app.application.use_cases import CreateUserUseCase, FetchUsersUseCase
from login_app.config import AppConfig
from login_app.repositories import UserRepository
from login_app.services import UserService


class Container:
    """Builds application components. Single place to swap implementations if needed."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()

    @property
    def config(self) -> AppConfig:
        return self._config

    def build_user_service(self) -> UserServicePort:
        return UserService(delay_s=self._config.service_delay_s)

    def build_user_repository(self) -> UserRepositoryPort:
        return UserRepository(service=self.build_user_service())

    def build_create_user_use_case(self) -> CreateUserUseCasePort:
        return CreateUserUseCase(repository=self.build_user_repository())

    def build_fetch_users_use_case(self) -> FetchUsersUseCasePort:
        return FetchUsersUseCase(repository=self.build_user_repository())
