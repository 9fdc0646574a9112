"""Shared pytest fixtures for pathregex tests."""

import pytest
from click.testing import CliRunner

from pathregex.core.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's real config and environment out of the tests."""
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', tmp_path / '.pathregexconfig')
    for key in ('PATHREGEX_COLOR_UI', 'PATHREGEX_CORE_VERBOSE', 'PATHREGEX_CORE_NAME'):
        monkeypatch.delenv(key, raising=False)
    return tmp_path / '.pathregexconfig'


@pytest.fixture
def runner():
    return CliRunner()
