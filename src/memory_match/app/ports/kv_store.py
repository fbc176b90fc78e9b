"""
アプリケーション層のポート: 永続キーバリューストア

目的:
- ランキングの保存先（ファイル等）をサービス層から切り離す。
- セッションをまたいで値が残ることを実装側の責務とする。
"""

from __future__ import annotations

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """永続ストアへのアクセス抽象。

    契約:
    - 値は JSON へ直列化できるもの（dict/list/str/int 等）に限る。
    - 保存に失敗しても例外は投げず、読み出しは未保存扱い（None）でよい。
    """

    def get(self, key: str) -> Any:  # noqa: ANN401 - JSON 値のため Any 許容
        """キーに対応する値を返す。存在しない場合は None。"""

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - JSON 値のため Any 許容
        """キーに値を保存する。"""
