"""Repositories: build domain objects and hide where data comes from."""

from .user_repository import UserRepository

__all__ = ["UserRepository"]
