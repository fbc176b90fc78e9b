from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from src.memory_match.domain.constants import LEVELS

logger = logging.getLogger(__name__)

# 設定ファイルの場所を上書きする環境変数
CONFIG_ENV_VAR = "MEMORY_MATCH_CONFIG"
DEFAULT_CONFIG_NAME = "memory_match.toml"


class _RuntimeStore:
    config: dict[str, Any] | None = None
    loaded: bool = False


_RUNTIME_STORE = _RuntimeStore()


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時の設定を差し替える。None で解除（次回参照時にファイルを読み直す）。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None
    _RUNTIME_STORE.loaded = cfg is not None


def config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_NAME).expanduser()


def load_config_file(path: str | Path) -> dict[str, Any]:
    """TOML ファイルを読み込んで辞書を返す。

    - ファイルが無い場合は空辞書。
    - 構文エラーや読み込み失敗も空辞書（警告ログを残す）。
    """
    p = Path(path)
    if not p.exists():
        return {}
    try:
        with p.open("rb") as f:
            cfg = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Could not load config from %s: %s", p, e)
        return {}
    return cfg if isinstance(cfg, dict) else {}


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。

    方針:
    - set_runtime_config() で与えられた設定があればそれを返す。
    - 無ければ初回参照時に設定ファイルを読み込み、以後は保持した値を使う。
    """
    if not _RUNTIME_STORE.loaded:
        _RUNTIME_STORE.config = load_config_file(config_path())
        _RUNTIME_STORE.loaded = True
    return _RUNTIME_STORE.config or {}


def get_app_title(default: str = "メモリーマッチ") -> str:
    cfg = _get_config()
    title = cfg.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def get_leaderboard_path(default: str | None = None) -> str | None:
    cfg = _get_config()
    lb = cfg.get("leaderboard") or {}
    if isinstance(lb, dict):
        v = lb.get("path")
        if isinstance(v, str) and v.strip():
            return v.strip()
    return default


def load_default_settings_values() -> dict[str, str | bool]:
    result: dict[str, str | bool] = {}
    cfg = _get_config()
    settings = cfg.get("settings")
    if isinstance(settings, dict):
        # 不正な値の場合は各呼び出し側でコード既定値へフォールバックする。
        level = settings.get("level")
        if isinstance(level, str) and level in LEVELS:
            result["level"] = level
        elif level is not None:
            logger.warning("Ignoring unknown level in config: %r", level)
        if isinstance(settings.get("images"), bool):
            result["images"] = bool(settings["images"])
    return result


if TYPE_CHECKING:
    from src.memory_match.app.state import Settings as _SettingsType


def load_default_settings() -> _SettingsType:
    from src.memory_match.app.state import Settings  # 局所インポートで循環回避

    values = load_default_settings_values()
    return Settings(
        level=str(values.get("level", Settings.level)),
        use_images=bool(values.get("images", Settings.use_images)),
    )
