from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def test_logging_setup_imports(tmp_path) -> None:
    from login_app.core.observability.logging_config import setup_logging

    setup_logging(level="INFO", log_to_file=True, state_dir=tmp_path)
    logging.getLogger(__name__).info("smoke")

    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "smoke" in (tmp_path / "logs" / "app.log").read_text(encoding="utf-8")


def test_json_logs_include_extras(capsys) -> None:
    from login_app.core.observability.logging_config import setup_logging

    setup_logging(level="DEBUG", json_logs=True, log_to_file=False)
    logging.getLogger("login_app.test").info("fetched", extra={"event": "users_fetched", "count": 2})

    out = capsys.readouterr().out
    assert '"event": "users_fetched"' in out
    assert '"count": 2' in out
