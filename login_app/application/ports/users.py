"""Application ports for the user flow.

Each layer depends on the port of the layer below, so tests can inject a
fake at any seam (e.g. a failing service under a real repository).
"""

from __future__ import annotations

from typing import Protocol

from login_app.models import User


class UserServicePort(Protocol):
    async def fetch_users(self) -> list[User]:
        """Retrieve users from the outside world. May raise UserFetchError."""


class UserRepositoryPort(Protocol):
    @property
    def service(self) -> UserServicePort: ...

    def create(self, nick: str, password: str) -> User: ...

    async def fetch_users(self) -> list[User]: ...


class CreateUserUseCasePort(Protocol):
    @property
    def repository(self) -> UserRepositoryPort: ...

    def execute(self, nick: str, password: str) -> User: ...


class FetchUsersUseCasePort(Protocol):
    @property
    def repository(self) -> UserRepositoryPort: ...

    async def execute(self) -> list[User]: ...
