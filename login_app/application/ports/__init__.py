"""Capabilities the layers depend on instead of concrete classes."""

from .users import (
    CreateUserUseCasePort,
    FetchUsersUseCasePort,
    UserRepositoryPort,
    UserServicePort,
)

__all__ = [
    "UserServicePort",
    "UserRepositoryPort",
    "CreateUserUseCasePort",
    "FetchUsersUseCasePort",
]
