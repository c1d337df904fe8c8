"""Where the app keeps its state (logs).

An installed package must never write next to its own code, so the project
folder is only used for a source checkout, recognised by its pyproject.toml.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from login_app.config import PROJECT_ROOT

APP_DATA_FOLDER = "login_app"
STATE_DIR_ENV = "LOGIN_APP_STATE_DIR"

log = logging.getLogger(__name__)


def is_source_checkout(root: Path | None = None) -> bool:
    return ((root or PROJECT_ROOT) / "pyproject.toml").is_file()


def get_user_data_dir() -> Path:
    """OS user data dir: %APPDATA%\\<app>, ~/Library/Application Support/<app>, $XDG_DATA_HOME/<app>."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg) if xdg else (Path.home() / ".local" / "share")
    return (base / APP_DATA_FOLDER).resolve()


def _is_writable_dir(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
        test_file = path / ".write_test"
        test_file.write_text("ok", encoding="utf-8")
        test_file.unlink(missing_ok=True)
    except OSError:
        log.debug("State dir probe failed for %s", path, exc_info=True)
        return False
    return True


def get_app_state_dir(app_folder_name: str = ".app_state") -> Path:
    """Return the directory for app state.

    Preference order:
    1) $LOGIN_APP_STATE_DIR, as given
    2) <PROJECT_ROOT>/.app_state in a writable source checkout
    3) OS user data dir
    """
    override = os.environ.get(STATE_DIR_ENV)
    if override:
        return Path(override).expanduser().resolve()

    if is_source_checkout():
        proj_dir = PROJECT_ROOT / app_folder_name
        if _is_writable_dir(proj_dir):
            return proj_dir

    return get_user_data_dir()
