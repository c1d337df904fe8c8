"""Login ViewModel (MVVM).

Holds the user created on this screen and the list of fetched users. The
view controller calls create_new_user/fetch_users and reads the two fields
back; the ViewModel owns data and talks to the use cases.
"""

from __future__ import annotations

import logging
from typing import Protocol

from login_app.application.ports.users import CreateUserUseCasePort, FetchUsersUseCasePort
from login_app.models import User

log = logging.getLogger(__name__)


class LoginViewModelPort(Protocol):
    @property
    def create_user_use_case(self) -> CreateUserUseCasePort: ...

    @property
    def fetch_users_use_case(self) -> FetchUsersUseCasePort: ...

    user: User | None
    users: list[User] | None

    def create_new_user(self, nick: str, password: str) -> None: ...

    async def fetch_users(self) -> None: ...


class LoginViewModel:
    def __init__(
        self,
        create_user_use_case: CreateUserUseCasePort,
        fetch_users_use_case: FetchUsersUseCasePort,
    ) -> None:
        self._create_user_uc = create_user_use_case
        self._fetch_users_uc = fetch_users_use_case
        self.user: User | None = None
        self.users: list[User] | None = None

    @property
    def create_user_use_case(self) -> CreateUserUseCasePort:
        return self._create_user_uc

    @property
    def fetch_users_use_case(self) -> FetchUsersUseCasePort:
        return self._fetch_users_uc

    def create_new_user(self, nick: str, password: str) -> None:
        self.user = self._create_user_uc.execute(nick, password)

    async def fetch_users(self) -> None:
        """Refresh ``users``.

        Failures are discarded: ``users`` keeps its previous value, nothing is
        raised, retried or shown to the user. Task cancellation still propagates.
        """
        try:
            users = await self._fetch_users_uc.execute()
        except Exception:
            log.debug("Fetching users failed; keeping previous list", exc_info=True)
            return
        self.users = users
        log.debug("Users fetched", extra={"event": "users_fetched", "count": len(users)})


__all__ = ["LoginViewModel", "LoginViewModelPort"]
