from __future__ import annotations

from typing import TYPE_CHECKING

from .view_model import LoginViewModel, LoginViewModelPort

if TYPE_CHECKING:  # pragma: no cover
    from .view import LoginViewController as LoginViewController

__all__ = ["LoginViewController", "LoginViewModel", "LoginViewModelPort"]


def __getattr__(name: str):
    if name == "LoginViewController":
        from .view import LoginViewController
        return LoginViewController
    raise AttributeError(name)
