"""アプリケーションの状態モデル定義。

目的:
- UI とドメインの境界で用いる明示的な状態構造を提供する。
- ラウンドそのものは domain.round.RoundState が持ち、ここでは設定のみを扱う。

使い方:
- サービス層が Settings をセッションに保存し、UI はそれを読み書きする。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Settings:
    """ゲーム設定。

    現状の契約:
    - level は LEVELS のキー（easy/medium/hard）。
    - use_images は画像モード（生成 SVG）か絵文字モードか。
    """

    level: str = "easy"
    use_images: bool = False


def load_settings() -> Settings:
    """設定ファイルから Settings を読み込む（フォールバックあり）。"""
    from src.memory_match.services.config_loader import load_default_settings

    return load_default_settings()
