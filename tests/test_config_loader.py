"""Tests for memory_match.services.config_loader – optional TOML configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.memory_match.app.state import Settings
from src.memory_match.services import config_loader
from src.memory_match.services.config_loader import (
    get_app_title,
    get_leaderboard_path,
    load_config_file,
    load_default_settings,
    load_default_settings_values,
    set_runtime_config,
)


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "memory_match.toml"
    p.write_text(text, encoding="utf-8")
    return p


# ---------------------------------------------------------------------------
# load_config_file
# ---------------------------------------------------------------------------

class TestLoadConfigFile:
    def test_missing_file(self, tmp_path: Path):
        assert load_config_file(tmp_path / "nope.toml") == {}

    def test_invalid_toml(self, tmp_path: Path):
        assert load_config_file(_write(tmp_path, "title = ")) == {}

    def test_reads_tables(self, tmp_path: Path):
        cfg = load_config_file(_write(tmp_path, 'title = "M"\n[settings]\nlevel = "hard"\n'))
        assert cfg == {"title": "M", "settings": {"level": "hard"}}


# ---------------------------------------------------------------------------
# Getters with defaults
# ---------------------------------------------------------------------------

class TestGetters:
    def test_defaults_when_empty(self):
        assert get_app_title() == "メモリーマッチ"
        assert get_leaderboard_path() is None
        assert load_default_settings_values() == {}
        assert load_default_settings() == Settings()

    def test_title(self):
        set_runtime_config({"title": "  Pairs  "})
        assert get_app_title() == "Pairs"

    def test_blank_title_falls_back(self):
        set_runtime_config({"title": "   "})
        assert get_app_title("x") == "x"

    def test_leaderboard_path(self):
        set_runtime_config({"leaderboard": {"path": "/tmp/lb.json"}})
        assert get_leaderboard_path() == "/tmp/lb.json"

    def test_settings_values(self):
        set_runtime_config({"settings": {"level": "medium", "images": True}})
        assert load_default_settings() == Settings(level="medium", use_images=True)

    def test_unknown_level_ignored(self):
        set_runtime_config({"settings": {"level": "insane", "images": "yes"}})
        assert load_default_settings_values() == {}


# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------

class TestConfigPath:
    def test_env_var_points_to_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        p = _write(tmp_path, '[settings]\nlevel = "hard"\nimages = true\n')
        monkeypatch.setenv(config_loader.CONFIG_ENV_VAR, str(p))
        set_runtime_config(None)
        assert load_default_settings() == Settings(level="hard", use_images=True)

    def test_default_name_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        _write(tmp_path, 'title = "Here"\n')
        monkeypatch.delenv(config_loader.CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        set_runtime_config(None)
        assert get_app_title() == "Here"
