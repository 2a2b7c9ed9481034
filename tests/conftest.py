"""Shared pytest fixtures."""

import pytest

from statement_dashboard.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True, scope="session")
def _logs_in_tmp_dir(tmp_path_factory):
    """Keep log files written during tests out of the project tree."""
    log_root = tmp_path_factory.mktemp("project")
    with pytest.MonkeyPatch.context() as patcher:
        patcher.setattr(logger_module, "get_project_root", lambda: log_root)
        yield


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start every test from default settings."""
    for name in ("STATEMENT_FILE_TYPE", "BALANCE_SAMPLING", "CURRENCY_CODE"):
        monkeypatch.delenv(name, raising=False)
