"""User repository backed by a user service."""

from __future__ import annotations

from login_app.application.ports.users import UserServicePort
from login_app.models import User


class UserRepository:
    def __init__(self, service: UserServicePort) -> None:
        self._service = service

    @property
    def service(self) -> UserServicePort:
        return self._service

    def create(self, nick: str, password: str) -> User:
        return User(nick=nick, password=password)

    async def fetch_users(self) -> list[User]:
        """Delegate to the service; its errors propagate unchanged."""
        return await self._service.fetch_users()


__all__ = ["UserRepository"]
