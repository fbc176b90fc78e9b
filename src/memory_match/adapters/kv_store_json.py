"""JSON ファイル実装の永続ストア。

目的:
- `KeyValueStore` ポートをローカルの JSON ファイルで実装する。
- ブラウザのセッションやプロセスが終了しても値が残る。

契約:
- ファイル全体を1つの JSON オブジェクトとして読み書きする（キー -> 値）。
- 読み込み失敗（破損・権限など）は空として扱い、警告ログのみ残す。
- 書き込み失敗も警告ログのみ。メモリ上の値は更新済みのまま。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from src.memory_match.app.ports.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".memory_match" / "leaderboard.json"


class JsonFileStore(KeyValueStore):
    def __init__(self, file_path: str | Path | None = None) -> None:
        self._file_path = Path(file_path).expanduser() if file_path else DEFAULT_PATH
        self._data = self._load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get(self, key: str) -> Any:  # noqa: ANN401 - JSON 値のため Any 許容
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - JSON 値のため Any 許容
        self._data[key] = value
        self._save()

    def reload(self) -> None:
        """ファイルから読み直す（他セッションの書き込みを反映する）。"""
        self._data = self._load()

    def _load(self) -> dict[str, Any]:
        if not self._file_path.exists():
            return {}
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load store from %s: %s", self._file_path, e)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Ignoring store %s: top-level value is not an object", self._file_path)
            return {}
        return payload

    def _save(self) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8"
            )
        except OSError as e:
            logger.warning("Could not save store to %s: %s", self._file_path, e)
