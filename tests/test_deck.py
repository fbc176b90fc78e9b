"""Tests for memory_match.domain.deck and imagery – deck construction."""

from __future__ import annotations

import base64
import random
from collections import Counter

import pytest

from src.memory_match.domain import (
    LEVELS,
    Face,
    build_deck,
    generate_svg_data,
    grid_columns,
    is_image_content,
    pair_count,
    pick_colors,
)
from src.memory_match.domain.constants import PALETTE, SYMBOL_POOL


# ---------------------------------------------------------------------------
# Levels
# ---------------------------------------------------------------------------

class TestPairCount:
    def test_configured_levels(self):
        assert pair_count("easy") == 4
        assert pair_count("medium") == 8
        assert pair_count("hard") == 12

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError):
            pair_count("nightmare")

    def test_pool_covers_every_level(self):
        assert len(SYMBOL_POOL) >= max(LEVELS.values())
        assert len(set(SYMBOL_POOL)) == len(SYMBOL_POOL)


class TestGridColumns:
    def test_four_columns_up_to_eight_pairs(self):
        assert grid_columns(4) == 4
        assert grid_columns(8) == 4

    def test_six_columns_for_hard(self):
        assert grid_columns(12) == 6


# ---------------------------------------------------------------------------
# build_deck
# ---------------------------------------------------------------------------

class TestBuildDeck:
    @pytest.mark.parametrize("level", list(LEVELS))
    def test_every_symbol_exactly_twice(self, level):
        deck = build_deck(level, rng=random.Random(7))
        counts = Counter(c.content for c in deck)
        assert len(deck) == 2 * LEVELS[level]
        assert len(counts) == LEVELS[level]
        assert set(counts.values()) == {2}

    @pytest.mark.parametrize("level", list(LEVELS))
    def test_image_mode_every_image_exactly_twice(self, level):
        deck = build_deck(level, use_images=True, rng=random.Random(7))
        counts = Counter(c.content for c in deck)
        assert len(counts) == LEVELS[level]
        assert set(counts.values()) == {2}
        assert all(is_image_content(c.content) for c in deck)

    def test_positions_and_faces(self):
        deck = build_deck("medium", rng=random.Random(3))
        assert [c.position for c in deck] == list(range(16))
        assert all(c.face is Face.HIDDEN for c in deck)

    def test_symbols_come_from_pool(self):
        deck = build_deck("hard", rng=random.Random(3))
        assert {c.content for c in deck} <= set(SYMBOL_POOL)

    def test_unknown_level_builds_nothing(self):
        with pytest.raises(ValueError):
            build_deck("impossible")

    def test_same_seed_same_deck(self):
        a = build_deck("hard", rng=random.Random(42))
        b = build_deck("hard", rng=random.Random(42))
        assert [c.content for c in a] == [c.content for c in b]

    def test_order_varies_across_runs(self):
        orders = {
            tuple(c.content for c in build_deck("hard", rng=random.Random(seed)))
            for seed in range(20)
        }
        assert len(orders) > 1

    def test_shuffle_is_a_permutation(self):
        rng = random.Random(99)
        for _ in range(50):
            deck = build_deck("medium", rng=rng)
            counts = Counter(c.content for c in deck)
            assert sorted(counts.values()) == [2] * 8

    def test_pair_partner_not_always_adjacent(self):
        # unshuffled decks would always place pairs side by side
        adjacent_only = True
        for seed in range(10):
            deck = build_deck("hard", rng=random.Random(seed))
            if any(deck[i].content != deck[i + 1].content for i in range(0, len(deck), 2)):
                adjacent_only = False
                break
        assert not adjacent_only


# ---------------------------------------------------------------------------
# imagery
# ---------------------------------------------------------------------------

class TestImagery:
    def test_data_url_prefix(self):
        url = generate_svg_data("⭐", "#ffd166")
        assert url.startswith("data:image/svg+xml;base64,")

    def test_svg_contains_label_and_color(self):
        url = generate_svg_data("⭐", "#ffd166")
        svg = base64.b64decode(url.split(",", 1)[1]).decode("utf-8")
        assert "⭐" in svg
        assert "#ffd166" in svg

    def test_same_inputs_equal_content(self):
        assert generate_svg_data("🍎", "#06d6a0") == generate_svg_data("🍎", "#06d6a0")

    def test_different_color_differs(self):
        assert generate_svg_data("🍎", "#06d6a0") != generate_svg_data("🍎", "#118ab2")

    def test_pick_colors_cycles(self):
        colors = pick_colors(len(PALETTE) + 2)
        assert colors[: len(PALETTE)] == PALETTE
        assert colors[len(PALETTE):] == PALETTE[:2]

    def test_is_image_content(self):
        assert not is_image_content("🍎")
        assert is_image_content(generate_svg_data("🍎", "#000000"))
