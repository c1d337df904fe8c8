"""Shared error types.

The goal is to make errors explicit and easy to handle at the UI boundary.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AppError(Exception):
    """Base error for application-level failures."""

    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} (cause: {self.cause})"


class UserFetchError(AppError):
    """Fetching users from the outside world failed.

    Raised by user services and passed unchanged through the repository and
    FetchUsersUseCase. LoginViewModel.fetch_users discards it: the user gets
    no notification and nothing is retried. Only a DEBUG log line remains.
    """


class ConnectivityError(UserFetchError):
    """Backend (DB, remote server, API, Bluetooth) unreachable."""


class ServiceTimeoutError(UserFetchError):
    """Backend did not answer in time."""


class MalformedDataError(UserFetchError):
    """Backend answered with data that cannot be turned into users."""
