"""UI composition root.

Extends the application container with the presentation components, keeping
layer boundaries: the application layer never imports Qt.
"""

from __future__ import annotations

from login_app.application.container import Container as AppContainer
from login_app.config import AppConfig
from login_app.ui.views.login.view import LoginViewController
from login_app.ui.views.login.view_model import LoginViewModel


class CompositionRoot(AppContainer):
    def build_login_view_model(self) -> LoginViewModel:
        return LoginViewModel(
            create_user_use_case=self.build_create_user_use_case(),
            fetch_users_use_case=self.build_fetch_users_use_case(),
        )

    def build_login_view_controller(self) -> LoginViewController:
        return LoginViewController(view_model=self.build_login_view_model())


def create_composition_root(config: AppConfig | None = None) -> CompositionRoot:
    """Create the root once at process start and pass it down explicitly."""
    return CompositionRoot(config or AppConfig.from_env())


__all__ = ["CompositionRoot", "create_composition_root"]
