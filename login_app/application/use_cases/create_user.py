"""Create user use case (application layer)."""

from __future__ import annotations

from login_app.application.ports.users import UserRepositoryPort
from login_app.models import User


class CreateUserUseCase:
    """Create a user from raw credentials."""

    def __init__(self, repository: UserRepositoryPort) -> None:
        self._repository = repository

    @property
    def repository(self) -> UserRepositoryPort:
        return self._repository

    def execute(self, nick: str, password: str) -> User:
        # Business rules (non-empty nick, password policy) belong here; none yet.
        return self._repository.create(nick, password)
