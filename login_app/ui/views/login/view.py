"""
Login view controller: forwards the screen's two user actions to the ViewModel
and re-emits the resulting state as Qt signals. No widgets; a view connects
to the signals to render.
"""

from __future__ import annotations

import asyncio

from PySide6.QtCore import QObject, Signal

from login_app.config import DEMO_NICK, DEMO_PASSWORD
from login_app.ui.views.login.view_model import LoginViewModelPort


class LoginViewController(QObject):
    """Presentation surface of the login screen."""

    user_changed = Signal(object)  # User | None
    users_changed = Signal(object)  # list[User] | None

    def __init__(self, view_model: LoginViewModelPort, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._view_model = view_model
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def view_model(self) -> LoginViewModelPort:
        return self._view_model

    def create_new_user(self) -> None:
        self._view_model.create_new_user(DEMO_NICK, DEMO_PASSWORD)
        self.user_changed.emit(self._view_model.user)

    def fetch_users(self) -> asyncio.Task[None]:
        """Start a fetch on the running event loop and return its task.

        Must be called from inside the loop, like a button handler would be.
        """
        task = asyncio.get_running_loop().create_task(self._fetch_users())
        # The loop only keeps weak references to tasks.
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _fetch_users(self) -> None:
        await self._view_model.fetch_users()
        self.users_changed.emit(self._view_model.users)


__all__ = ["LoginViewController"]
