"""
Tests for the board initializer.

Tests cover:
- Centred origin
- Row-major placement
- Bonus block assignment (including repeated picks)
- Configuration validation
"""

import random
from unittest.mock import Mock

import pytest

from yabog.game.board import BoardConfig, board_origin, init_blocks
from yabog.game.entities.block import BlockKind
from yabog.models import Point2D


class TestBoardOrigin:

    def test_default_grid_on_500_wide_screen(self):
        assert board_origin(500, BoardConfig()) == Point2D(x=-53.0, y=50.0)

    def test_grid_narrower_than_screen(self):
        config = BoardConfig(columns=4)
        assert board_origin(1000, config) == Point2D(x=298.0, y=50.0)


class TestInitBlocks:

    def test_layout_is_row_major(self, rng):
        blocks = init_blocks(500, rng, BoardConfig())
        assert len(blocks) == 36
        for i, block in enumerate(blocks):
            col = i % 6
            row = i // 6
            assert block.rect.x == -53.0 + col * 101.0
            assert block.rect.y == 50.0 + row * 41.0
            assert block.rect.width == 100.0
            assert block.rect.height == 40.0
            assert block.lives == 2

    def test_at_most_three_bonus_blocks(self, rng):
        blocks = init_blocks(500, rng)
        bonus = [b for b in blocks if b.kind == BlockKind.SPAWN_BALL_ON_DEATH]
        regular = [b for b in blocks if b.kind == BlockKind.REGULAR]
        assert 1 <= len(bonus) <= 3
        assert len(bonus) + len(regular) == 36

    def test_distinct_picks_give_three_bonus_blocks(self):
        rng = Mock(spec=random.Random)
        rng.randrange.side_effect = [0, 7, 35]
        blocks = init_blocks(500, rng)
        bonus = [i for i, b in enumerate(blocks) if b.is_bonus]
        assert bonus == [0, 7, 35]
        rng.randrange.assert_called_with(36)

    def test_repeated_pick_is_idempotent(self):
        rng = Mock(spec=random.Random)
        rng.randrange.side_effect = [4, 4, 4]
        blocks = init_blocks(500, rng)
        bonus = [i for i, b in enumerate(blocks) if b.is_bonus]
        assert bonus == [4]
        assert blocks[4].lives == 2

    def test_same_seed_same_board(self):
        a = init_blocks(500, random.Random(3))
        b = init_blocks(500, random.Random(3))
        assert [blk.kind for blk in a] == [blk.kind for blk in b]

    def test_custom_grid(self, rng):
        config = BoardConfig(columns=2, rows=3, padding=0.0, bonus_blocks=0, top_margin=10.0)
        blocks = init_blocks(200, rng, config)
        assert len(blocks) == 6
        assert [(b.rect.x, b.rect.y) for b in blocks] == [
            (0.0, 10.0), (100.0, 10.0),
            (0.0, 50.0), (100.0, 50.0),
            (0.0, 90.0), (100.0, 90.0),
        ]
        assert not any(b.is_bonus for b in blocks)

    def test_layout_logged(self, rng, capsys):
        init_blocks(500, rng)
        assert "[board] INFO: Board 6x6" in capsys.readouterr().out


class TestBoardConfig:

    def test_defaults(self):
        config = BoardConfig()
        assert (config.columns, config.rows) == (6, 6)
        assert config.cell_width == 101.0
        assert config.cell_height == 41.0
        assert config.bonus_blocks == 3
        assert config.block_count == 36

    @pytest.mark.parametrize("kwargs", [
        {"columns": 0},
        {"rows": 0},
        {"padding": -1.0},
        {"bonus_blocks": -1},
    ])
    def test_invalid_config_rejected(self, kwargs):
        with pytest.raises(ValueError):
            BoardConfig(**kwargs)
