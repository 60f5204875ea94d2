"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Settings come from the packaged appmgr/settings/*.yaml. Endpoint
environment variables are cleared so that application.yaml defaults
(localhost:8080) apply.
"""

import logging

import pytest

from appmgr.core.config import get_app_config, get_settings


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Isolate each test from APPMGR_* variables and cached configuration."""
    monkeypatch.delenv("APPMGR_HOST", raising=False)
    monkeypatch.delenv("APPMGR_PORT", raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Drop handlers bound to streams that a CliRunner closed."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
