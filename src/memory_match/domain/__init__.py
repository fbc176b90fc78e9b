"""ドメイン層（純粋ロジック/データモデル）。

提供物:
- 山札の構築（deck, imagery）
- ラウンドの状態機械（round）
- ランキングの並べ替え・保持ルール（leaderboard）
"""

from src.memory_match.domain.constants import (
    LEADERBOARD_KEY_PREFIX,
    LEADERBOARD_SIZE,
    LEVEL_LABELS,
    LEVELS,
    MATCH_SCORE,
    MISMATCH_DELAY_SEC,
    MISMATCH_PENALTY,
    TICK_SEC,
)
from src.memory_match.domain.deck import Card, Face, build_deck, grid_columns, pair_count
from src.memory_match.domain.imagery import generate_svg_data, is_image_content, pick_colors
from src.memory_match.domain.leaderboard import (
    LeaderboardEntry,
    normalize_name,
    rank_entries,
)
from src.memory_match.domain.round import (
    PickResult,
    RoundState,
    final_stats,
    is_won,
    new_round,
    pick,
    resolve_mismatch,
    tick,
    total_pairs,
)

__all__ = [
    # deck
    "Card",
    "Face",
    "build_deck",
    "grid_columns",
    "pair_count",
    # imagery
    "generate_svg_data",
    "pick_colors",
    "is_image_content",
    # round
    "PickResult",
    "RoundState",
    "new_round",
    "pick",
    "resolve_mismatch",
    "tick",
    "total_pairs",
    "is_won",
    "final_stats",
    # leaderboard
    "LeaderboardEntry",
    "rank_entries",
    "normalize_name",
    # constants
    "LEVELS",
    "LEVEL_LABELS",
    "MATCH_SCORE",
    "MISMATCH_PENALTY",
    "MISMATCH_DELAY_SEC",
    "TICK_SEC",
    "LEADERBOARD_SIZE",
    "LEADERBOARD_KEY_PREFIX",
]
