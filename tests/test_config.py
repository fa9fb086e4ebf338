"""Tests for config.py -- defaults, env var overrides."""

from pathlib import Path

import pytest

from gallery_mover.config import MoverSettings

# Env vars that pydantic-settings reads -- must be cleaned for default tests
_CONFIG_ENV_VARS = [
    "MAPPING_FILE", "LOG_DIR", "LOG_LEVEL", "OVERWRITE_EXISTING",
    "CONSOLE_PROMPT", "VERBOSE",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove settings env vars so defaults tests see actual defaults."""
    for var in _CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_default_values(self):
        settings = MoverSettings(_env_file=None)
        assert settings.mapping_file == Path("delivery-guide-config.yaml")
        assert settings.overwrite_existing is True
        assert settings.console_prompt == ">> "
        assert settings.verbose is False
        assert settings.log_level == "INFO"

    def test_log_file_under_log_dir(self, tmp_path):
        settings = MoverSettings(_env_file=None, log_dir=tmp_path)
        assert settings.log_file == tmp_path / "gallery-mover.log"


class TestOverrides:
    def test_constructor_override(self):
        settings = MoverSettings(_env_file=None, overwrite_existing=False)
        assert settings.overwrite_existing is False

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("OVERWRITE_EXISTING", "false")
        monkeypatch.setenv("CONSOLE_PROMPT", "$ ")
        settings = MoverSettings(_env_file=None)
        assert settings.overwrite_existing is False
        assert settings.console_prompt == "$ "

    def test_path_from_env(self, monkeypatch):
        monkeypatch.setenv("MAPPING_FILE", "/tmp/guide.yaml")
        settings = MoverSettings(_env_file=None)
        assert settings.mapping_file == Path("/tmp/guide.yaml")

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("MAPPING_FILE=/srv/guide.yaml\nLOG_LEVEL=debug\n")
        settings = MoverSettings(_env_file=env_file)
        assert settings.mapping_file == Path("/srv/guide.yaml")
        assert settings.log_level == "debug"
