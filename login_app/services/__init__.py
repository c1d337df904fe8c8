"""Services: connections to the outside world (DB, remote server, API, Bluetooth)."""

from .user_service import UserService

__all__ = ["UserService"]
