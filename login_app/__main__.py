"""
Entry point for the login screen skeleton.

Run: python -m login_app  (or the login-app script)
Builds the object graph once, then plays the screen's two hard-coded actions:
create a user and fetch the user list.
"""
from __future__ import annotations

import asyncio
import logging
import sys

from login_app.core.observability.logging_config import setup_logging
from login_app.ui.di import create_composition_root
from login_app.ui.views.login.view import LoginViewController

log = logging.getLogger(__name__)


async def _run_actions(controller: LoginViewController) -> None:
    controller.create_new_user()
    await controller.fetch_users()


def main() -> None:
    setup_logging()
    root = create_composition_root()
    controller = root.build_login_view_controller()
    controller.user_changed.connect(lambda user: log.info("User created: %r", user))
    controller.users_changed.connect(lambda users: log.info("Users loaded: %d", len(users or [])))

    log.info("Fetching users (delay %.1fs)", root.config.service_delay_s)
    asyncio.run(_run_actions(controller))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
