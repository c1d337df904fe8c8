"""Stub user service.

Simulates a remote call: waits for a fixed delay without blocking the event
loop, then returns two placeholder users. A real implementation would raise
ConnectivityError / ServiceTimeoutError / MalformedDataError from
login_app.core.errors.
"""

from __future__ import annotations

import asyncio
import logging

from login_app.config import USER_SERVICE_DELAY_S
from login_app.models import User

log = logging.getLogger(__name__)


class UserService:
    def __init__(self, delay_s: float = USER_SERVICE_DELAY_S) -> None:
        self._delay_s = delay_s

    @property
    def delay_s(self) -> float:
        return self._delay_s

    async def fetch_users(self) -> list[User]:
        log.debug("Fetching users", extra={"event": "fetch_users", "delay_s": self._delay_s})
        # call the connection to retrieve data
        await asyncio.sleep(self._delay_s)
        return [User(nick="", password=""), User(nick="", password="")]


__all__ = ["UserService"]
