"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# レベル識別子 -> ペア数
LEVELS: dict[str, int] = {
    "easy": 4,
    "medium": 8,
    "hard": 12,
}

# 絵柄の候補（ペア数の最大値以上を保証すること）
SYMBOL_POOL: list[str] = [
    "🍎", "⭐", "🎮", "🎲", "🐱", "⚽", "🎵", "🚗", "🌵", "🍩", "🍇", "🐶",
    "🍕", "🌙", "🍓", "🦊", "🍉", "🍔", "🎸", "🧩", "🐼", "🪐", "🚀", "⚓",
]

# 画像モードの背景色（足りなければ循環して使う）
PALETTE: list[str] = [
    "#ffd166", "#06d6a0", "#118ab2", "#ef476f", "#f78c6b", "#9b5de5",
    "#00eaff", "#ffafcc", "#8ac926", "#1982c4", "#ffb703", "#52b69a",
]

# 得点
MATCH_SCORE: int = 10
MISMATCH_PENALTY: int = 1

# 不一致表示を戻すまでの秒数
MISMATCH_DELAY_SEC: float = 0.7
# 経過時間の更新間隔（秒）
TICK_SEC: float = 1.0

# ランキング
LEADERBOARD_SIZE: int = 5
LEADERBOARD_KEY_PREFIX: str = "mem_lb_"
DEFAULT_PLAYER_NAME: str = "Anonymous"

# 画面表示用のレベル名
LEVEL_LABELS: dict[str, str] = {
    "easy": "かんたん",
    "medium": "ふつう",
    "hard": "むずかしい",
}
