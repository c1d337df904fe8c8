"""Fetch users use case (application layer)."""

from __future__ import annotations

from login_app.application.ports.users import UserRepositoryPort
from login_app.models import User


class FetchUsersUseCase:
    """Retrieve all users. Repository errors propagate unchanged."""

    def __init__(self, repository: UserRepositoryPort) -> None:
        self._repository = repository

    @property
    def repository(self) -> UserRepositoryPort:
        return self._repository

    async def execute(self) -> list[User]:
        return await self._repository.fetch_users()
