"""
GameSession - binds a SnakeGame to a timer, an input source and renderers.

The session owns the scheduling lifecycle: it starts the timer and the input
listener, forwards ticks and keys to the game, and on game over tears both
down in one step inside the tick callback, before any further input can be
delivered.
"""

import logging
from typing import Iterable, List, Optional

from snakegame.domain.snapshot import BoardSnapshot
from snakegame.game import SnakeGame
from .input_source import InputSource
from .renderer import Renderer
from .timer import IntervalTimer

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(
        self,
        game: SnakeGame,
        input_source: InputSource,
        renderers: Iterable[Renderer],
        timer: Optional[IntervalTimer] = None,
        max_ticks: Optional[int] = None
    ):
        self.game = game
        self.input_source = input_source
        self.renderers: List[Renderer] = list(renderers)
        self.timer = timer if timer is not None else IntervalTimer(game.config.tick_seconds)
        self.max_ticks = max_ticks
        self.active = False
        self.end_reason: Optional[str] = None
        self.last_snapshot: Optional[BoardSnapshot] = None

    def start(self) -> BoardSnapshot:
        snapshot = self.game.start()
        self.input_source.subscribe(self.game.on_key)
        self.timer.start(self._on_tick)
        self.active = True
        self._render(snapshot)
        return snapshot

    def run(self) -> dict:
        """
        Drive the session until the game ends, the user quits or the tick
        limit is reached.

        Returns:
            A summary dict (score, ticks, length, reason).
        """
        if self.game.game_over or self.end_reason is not None:
            return self.summary()
        if not self.active:
            self.start()

        while self.active:
            if not self.input_source.poll(self.timer.seconds_until_due()):
                self.stop("quit")
                break
            self.timer.poll()

        return self.summary()

    def stop(self, reason: str):
        """End the session without a game over (user quit or tick limit)."""
        if not self.active:
            return
        self.timer.cancel()
        self.input_source.unsubscribe()
        self.active = False
        self.end_reason = reason
        for renderer in self.renderers:
            renderer.close()
        logger.info(f"Session stopped: {reason} at tick {self.game.tick_count}")

    def summary(self) -> dict:
        snapshot = self.last_snapshot or self.game.snapshot()
        return {
            "score": snapshot.score,
            "ticks": snapshot.tick,
            "length": len(snapshot.snake),
            "reason": self.end_reason,
        }

    def _on_tick(self):
        snapshot = self.game.tick()
        if snapshot is None:
            return

        if snapshot.game_over:
            self._finish(snapshot)
            return

        self._render(snapshot)
        if self.max_ticks is not None and snapshot.tick >= self.max_ticks:
            self.stop("max_ticks")

    def _finish(self, snapshot: BoardSnapshot):
        self.timer.cancel()
        self.input_source.unsubscribe()
        self.active = False
        self.end_reason = snapshot.death_reason
        self.last_snapshot = snapshot
        for renderer in self.renderers:
            renderer.render_game_over(snapshot)
            renderer.close()

    def _render(self, snapshot: BoardSnapshot):
        self.last_snapshot = snapshot
        for renderer in self.renderers:
            renderer.render(snapshot)
