"""
Tests for configuration loading and validation.
"""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakegame.config import GameConfig
from snakegame.domain import DOWN, UP

ENV_VARS = ["SNAKE_WIDTH", "SNAKE_HEIGHT", "SNAKE_TICK_MS", "SNAKE_FOOD_COUNT", "SNAKE_SEED"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    def test_defaults(self):
        config = GameConfig()
        assert (config.width, config.height) == (19, 19)
        assert config.tick_ms == 200
        assert config.tick_seconds == pytest.approx(0.2)
        assert config.initial_head == (9, 9)
        assert config.initial_tail == (9, 10)
        assert config.initial_direction == UP
        assert config.food_count == 1
        assert config.seed is None

    def test_defaults_are_valid(self):
        assert GameConfig().validate() is not None


class TestFromEnv:
    def test_reads_environment(self, clean_env):
        clean_env.setenv("SNAKE_WIDTH", "25")
        clean_env.setenv("SNAKE_HEIGHT", "15")
        clean_env.setenv("SNAKE_TICK_MS", "120")
        clean_env.setenv("SNAKE_SEED", "9")

        config = GameConfig.from_env()

        assert (config.width, config.height) == (25, 15)
        assert config.tick_ms == 120
        assert config.seed == 9
        assert config.food_count == 1

    def test_empty_values_fall_back_to_defaults(self, clean_env):
        clean_env.setenv("SNAKE_WIDTH", "")
        assert GameConfig.from_env().width == 19

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        env_file = tmp_path / "snake.env"
        env_file.write_text("SNAKE_FOOD_COUNT=3\n")

        try:
            config = GameConfig.from_env(str(env_file))
        finally:
            # load_dotenv writes straight into os.environ
            os.environ.pop("SNAKE_FOOD_COUNT", None)

        assert config.food_count == 3

    def test_non_integer_rejected(self, clean_env):
        clean_env.setenv("SNAKE_TICK_MS", "fast")
        with pytest.raises(ValueError, match="SNAKE_TICK_MS"):
            GameConfig.from_env()


class TestValidate:
    @pytest.mark.parametrize("overrides,message", [
        ({"width": 0}, "Board size"),
        ({"height": -3}, "Board size"),
        ({"tick_ms": 0}, "Tick interval"),
        ({"food_count": 0}, "Food count"),
        ({"initial_head": (30, 9)}, "outside"),
        ({"initial_tail": (9, 12)}, "adjacent"),
        ({"initial_direction": DOWN}, "points into the tail"),
        ({"width": 2, "height": 2, "initial_head": (0, 0), "initial_tail": (0, 1),
          "food_count": 3}, "Cannot place"),
    ])
    def test_invalid_settings(self, overrides, message):
        with pytest.raises(ValueError, match=message):
            GameConfig(**overrides).validate()
