from __future__ import annotations

import asyncio

import pytest

pytest.importorskip("PySide6.QtCore")

from login_app.models import User
from login_app.ui.views.login.view import LoginViewController


class FakeViewModel:
    def __init__(self) -> None:
        self.user: User | None = None
        self.users: list[User] | None = None
        self.create_calls: list[tuple[str, str]] = []
        self.fetch_calls = 0
        self.create_user_use_case = None
        self.fetch_users_use_case = None

    def create_new_user(self, nick: str, password: str) -> None:
        self.create_calls.append((nick, password))
        self.user = User(nick, password)

    async def fetch_users(self) -> None:
        self.fetch_calls += 1
        await asyncio.sleep(0)
        self.users = [User("", ""), User("", "")]


def test_create_new_user_forwards_hard_coded_credentials() -> None:
    vm = FakeViewModel()
    controller = LoginViewController(vm)
    emitted: list[object] = []
    controller.user_changed.connect(emitted.append)

    controller.create_new_user()

    assert vm.create_calls == [("test", "123")]
    assert emitted == [User("test", "123")]


def test_fetch_users_schedules_task_and_emits_result() -> None:
    vm = FakeViewModel()
    controller = LoginViewController(vm)
    emitted: list[object] = []
    controller.users_changed.connect(emitted.append)

    async def _scenario() -> None:
        task = controller.fetch_users()
        assert isinstance(task, asyncio.Task)
        assert vm.fetch_calls == 0  # not started until the loop runs it
        await task

    asyncio.run(_scenario())

    assert vm.fetch_calls == 1
    assert emitted == [[User("", ""), User("", "")]]


def test_fetch_users_requires_running_loop() -> None:
    controller = LoginViewController(FakeViewModel())

    with pytest.raises(RuntimeError):
        controller.fetch_users()


def test_view_model_is_injected() -> None:
    vm = FakeViewModel()

    assert LoginViewController(vm).view_model is vm


class FailingFetchViewModel(FakeViewModel):
    async def fetch_users(self) -> None:
        # Mirrors LoginViewModel: a failed fetch leaves ``users`` untouched.
        self.fetch_calls += 1


def test_users_changed_fires_with_previous_value_after_failed_fetch() -> None:
    vm = FailingFetchViewModel()
    previous = [User("ana", "1")]
    vm.users = previous
    controller = LoginViewController(vm)
    emitted: list[object] = []
    controller.users_changed.connect(emitted.append)

    async def _scenario() -> None:
        await controller.fetch_users()

    asyncio.run(_scenario())

    assert vm.fetch_calls == 1
    assert len(emitted) == 1
    assert emitted[0] is previous
