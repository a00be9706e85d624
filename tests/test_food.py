"""
Tests for food placement.
"""

import os
import random
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakegame.domain import FoodSpawner, GameInvariantError, Position, Snake


class SequenceRandom:
    """Random source that replays fixed values."""

    def __init__(self, values, choice_index=0):
        self.values = iter(values)
        self.choice_index = choice_index
        self.choices = []

    def randrange(self, stop):
        return next(self.values)

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[self.choice_index]


def make_snake(cells):
    snake = Snake(Position(*cells[0]), Position(*cells[-1]))
    for cell in cells[1:-1]:
        snake.body.append(Position(*cell))
    return snake


def serpentine(width, height, length):
    """Head-to-tail cells that zig-zag across the board row by row."""
    cells = []
    for y in range(height):
        xs = range(width) if y % 2 == 0 else range(width - 1, -1, -1)
        for x in xs:
            cells.append((x, y))
    return list(reversed(cells[:length]))


class TestFoodSpawner:
    def test_spawn_skips_snake_and_food(self):
        """Occupied samples are rejected until a free cell comes up."""
        snake = Snake(Position(1, 1), Position(1, 2))
        # (1,1) head, (1,2) tail, (3,3) food, then (0,0) is free
        rng = SequenceRandom([1, 1, 1, 2, 3, 3, 0, 0])
        spawner = FoodSpawner(5, 5, rng=rng)

        assert spawner.spawn(snake, [Position(3, 3)]) == Position(0, 0)

    def test_spawn_uses_board_bounds(self):
        """Spawned cells always lie on the board."""
        rng = random.Random(3)
        spawner = FoodSpawner(4, 3, rng=rng)
        snake = Snake(Position(0, 0), Position(1, 0))
        for _ in range(50):
            p = spawner.spawn(snake, [])
            assert 0 <= p.x < 4
            assert 0 <= p.y < 3

    @pytest.mark.parametrize("seed", range(10))
    def test_spawn_never_hits_occupied_cell(self, seed):
        """Even with most of the board covered, spawn finds a free cell."""
        snake = make_snake(serpentine(6, 6, 30))
        food = [Position(0, 5)] if not snake.contains(Position(0, 5)) else []
        spawner = FoodSpawner(6, 6, rng=random.Random(seed))

        for _ in range(25):
            p = spawner.spawn(snake, food)
            assert not snake.contains(p)
            assert p not in food

    def test_fallback_enumerates_free_cells(self):
        """Past max_attempts the spawner picks from the remaining free cells."""
        snake = make_snake([(0, 0), (1, 0), (2, 0)])
        rng = SequenceRandom([0, 0], choice_index=1)
        spawner = FoodSpawner(3, 2, rng=rng, max_attempts=1)

        p = spawner.spawn(snake, [Position(0, 1)])

        assert rng.choices == [[Position(1, 1), Position(2, 1)]]
        assert p == Position(2, 1)

    def test_full_board_returns_none(self):
        """With every cell taken there is nowhere to spawn."""
        snake = make_snake([(0, 0), (1, 0), (1, 1)])
        spawner = FoodSpawner(2, 2, rng=random.Random(0), max_attempts=5)
        assert spawner.spawn(snake, [Position(0, 1)]) is None

    def test_default_attempt_cap_scales_with_board(self):
        """The random attempt cap defaults to four tries per cell."""
        assert FoodSpawner(19, 19).max_attempts == 4 * 19 * 19

    def test_occupied_result_is_an_invariant_error(self):
        """Handing out an occupied cell is treated as a defect."""
        snake = Snake(Position(1, 1), Position(1, 2))
        spawner = FoodSpawner(5, 5)
        with pytest.raises(GameInvariantError):
            spawner._checked(Position(1, 2), snake, set())
