from __future__ import annotations

import asyncio

import pytest

from login_app.core.errors import ServiceTimeoutError
from login_app.models import User
from login_app.repositories import UserRepository


class StaticUserService:
    def __init__(self, users: list[User]) -> None:
        self.users = users
        self.calls = 0

    async def fetch_users(self) -> list[User]:
        self.calls += 1
        return list(self.users)


class FailingUserService:
    def __init__(self, error: Exception) -> None:
        self.error = error

    async def fetch_users(self) -> list[User]:
        raise self.error


@pytest.mark.parametrize(
    ("nick", "password"),
    [("test", "123"), ("", ""), ("ana", ""), ("  spaced  ", "pässwörd")],
)
def test_create_returns_user_with_given_fields(nick: str, password: str) -> None:
    repo = UserRepository(service=StaticUserService([]))

    user = repo.create(nick, password)

    assert user.nick == nick
    assert user.password == password


def test_create_returns_new_instance_each_time() -> None:
    repo = UserRepository(service=StaticUserService([]))

    assert repo.create("a", "b") is not repo.create("a", "b")


def test_fetch_users_delegates_to_service() -> None:
    service = StaticUserService([User("ana", "1")])
    repo = UserRepository(service=service)

    users = asyncio.run(repo.fetch_users())

    assert users == [User("ana", "1")]
    assert service.calls == 1
    assert repo.service is service


def test_fetch_users_propagates_service_error_unchanged() -> None:
    error = ServiceTimeoutError("no answer")
    repo = UserRepository(service=FailingUserService(error))

    with pytest.raises(ServiceTimeoutError) as exc_info:
        asyncio.run(repo.fetch_users())

    assert exc_info.value is error
