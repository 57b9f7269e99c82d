"""Tests for life_kernel.config.types module."""

from __future__ import annotations

from random import Random

import pytest

from life_kernel.config.types import BoardConfig, RunConfig, SeedMode
from life_kernel.domain.board import Board


class TestBoardConfig:
    def test_defaults_are_valid(self) -> None:
        config = BoardConfig()
        assert config.seed_mode == SeedMode.RANDOM
        assert config.width > 0 and config.height > 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"width": 0},
            {"height": 0},
            {"probability": 1.1},
            {"probability": -0.5},
            {"seed_mode": SeedMode.PATTERN},
            {"pattern": "not-a-pattern"},
            {"pattern": "glider", "pattern_offset": (-1, 0)},
            {"width": 2, "height": 2, "seed_mode": SeedMode.PATTERN, "pattern": "glider"},
            {
                "width": 5,
                "height": 5,
                "seed_mode": SeedMode.PATTERN,
                "pattern": "glider",
                "pattern_offset": (3, 0),
            },
        ],
    )
    def test_invalid_values_raise(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValueError):
            BoardConfig(**kwargs)  # type: ignore[arg-type]

    def test_build_each_seed_mode(self) -> None:
        rng = Random(0)
        assert BoardConfig(width=3, height=3, seed_mode=SeedMode.EMPTY).build(rng).is_empty()
        assert BoardConfig(width=3, height=3, seed_mode=SeedMode.FULL).build(rng) == Board.full(
            3, 3
        )
        pattern_board = BoardConfig(
            width=5,
            height=5,
            seed_mode=SeedMode.PATTERN,
            pattern="blinker",
            pattern_offset=(1, 1),
        ).build(rng)
        assert set(pattern_board) == {(2, 1), (2, 2), (2, 3)}

    def test_build_random_uses_given_rng(self) -> None:
        config = BoardConfig(width=8, height=8, probability=0.3)
        assert config.build(Random(5)) == config.build(Random(5))
        assert config.build(Random(5)) == Board.rand(8, 8, 0.3, Random(5))


class TestRunConfig:
    def test_defaults_are_valid(self) -> None:
        config = RunConfig()
        assert config.steps >= 1
        assert config.workers == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"steps": 0},
            {"halt_window": 0},
            {"short_period_max_period": 1},
            {"short_period_max_period": 5, "short_period_history_size": 9},
            {"workers": 0},
        ],
    )
    def test_invalid_values_raise(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValueError):
            RunConfig(**kwargs)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        config = RunConfig()
        with pytest.raises(AttributeError):
            config.steps = 5  # type: ignore[misc]
