"""Use cases (application services)."""

from .create_user import CreateUserUseCase
from .fetch_users import FetchUsersUseCase

__all__ = ["CreateUserUseCase", "FetchUsersUseCase"]
