#!/usr/bin/env python3
"""
Play snake in the terminal.

Usage:
    snakegame                         # interactive, arrow keys to steer, q to quit
    snakegame --headless --keys LEFT,-,-,DOWN --max-ticks 50
    snakegame --headless --keys UP,UP --record ./session.gif

Settings default to the environment (SNAKE_WIDTH, SNAKE_HEIGHT, SNAKE_TICK_MS,
SNAKE_FOOD_COUNT, SNAKE_SEED, also read from a local .env) and can be
overridden with flags.
"""

import argparse
import curses
import json
import logging
import sys
from typing import List, Optional

from snakegame.config import GameConfig
from snakegame.domain.constants import Direction, KEY_TO_DIRECTION
from snakegame.domain.snapshot import BoardSnapshot
from snakegame.game import SnakeGame
from snakegame.services import (
    FrameRenderer,
    GameSession,
    InputSource,
    IntervalTimer,
    Renderer,
    ScriptedInput,
    TextRenderer,
)
from snakegame.services.renderer import game_over_lines, status_line

logger = logging.getLogger(__name__)

CURSES_KEYS = {
    curses.KEY_UP: "ArrowUp",
    curses.KEY_DOWN: "ArrowDown",
    curses.KEY_LEFT: "ArrowLeft",
    curses.KEY_RIGHT: "ArrowRight",
}
QUIT_KEYS = {ord("q"), ord("Q")}


class CursesInput(InputSource):
    """Reads key presses from a curses window."""

    def __init__(self, stdscr):
        super().__init__()
        self.stdscr = stdscr

    def poll(self, timeout: float) -> bool:
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        ch = self.stdscr.getch()
        if ch == -1:
            return True
        if ch in QUIT_KEYS:
            return False
        key = CURSES_KEYS.get(ch)
        if key is None:
            key = curses.keyname(ch).decode("utf-8", errors="replace")
        self.emit(key)
        return True


class CursesRenderer(Renderer):
    """Draws the text board into a curses window."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def _put(self, row: int, text: str, attr: int = curses.A_NORMAL):
        try:
            self.stdscr.addstr(row, 0, text, attr)
        except curses.error:
            # Terminal smaller than the board; the line is clipped
            pass

    def render(self, snapshot: BoardSnapshot):
        self.stdscr.erase()
        lines = snapshot.print_board().split("\n")
        for row, line in enumerate(lines):
            self._put(row, line)
        self._put(len(lines) + 1, status_line(snapshot))
        self._put(len(lines) + 2, "Arrow keys to steer, q to quit")
        self.stdscr.refresh()

    def render_game_over(self, snapshot: BoardSnapshot):
        self.render(snapshot)
        for row, line in enumerate(game_over_lines(snapshot)):
            self._put(snapshot.height // 2 + row, f"   {line}   ", curses.A_REVERSE | curses.A_BOLD)
        self._put(snapshot.height + 4, "Press any key to exit")
        self.stdscr.refresh()


def parse_keys(script: Optional[str]) -> List[Optional[str]]:
    """
    Parse a comma separated key script.

    Entries may be key identifiers ("ArrowUp") or direction names ("UP",
    "left"); "-" or an empty entry means no key on that step.
    """
    if not script:
        return []
    keys: List[Optional[str]] = []
    for raw in script.split(","):
        token = raw.strip()
        if token in ("", "-"):
            keys.append(None)
        elif token in KEY_TO_DIRECTION:
            keys.append(token)
        elif token.upper() in Direction.__members__:
            keys.append(Direction[token.upper()].key)
        else:
            raise ValueError(f"Unknown key '{token}' in key script")
    return keys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play a single-player game of snake."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width in cells (default: SNAKE_WIDTH or 19)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height in cells (default: SNAKE_HEIGHT or 19)")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Milliseconds between ticks (default: SNAKE_TICK_MS or 200)")
    parser.add_argument("--food-count", type=int, default=None,
                        help="Food items kept on the board (default: SNAKE_FOOD_COUNT or 1)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a terminal UI, replaying --keys one per tick")
    parser.add_argument("--keys", type=str, default=None,
                        help="Comma separated key script for headless runs, e.g. 'LEFT,-,DOWN'")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--quiet", action="store_true",
                        help="Headless only: do not print frames")
    parser.add_argument("--record", type=str, default=None,
                        help="Write the session as an animated GIF to this path")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file instead of stderr")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    return parser


def configure_logging(level: str, log_file: Optional[str] = None):
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        filename=log_file
    )


def build_config(args: argparse.Namespace) -> GameConfig:
    """Environment defaults, overridden by any flags that were given."""
    config = GameConfig.from_env()
    if args.width is not None:
        config.width = args.width
    if args.height is not None:
        config.height = args.height
    if args.tick_ms is not None:
        config.tick_ms = args.tick_ms
    if args.food_count is not None:
        config.food_count = args.food_count
    if args.seed is not None:
        config.seed = args.seed
    return config.validate()


def run_headless(
    config: GameConfig,
    keys: List[Optional[str]],
    renderers: List[Renderer],
    max_ticks: Optional[int] = None
) -> dict:
    """Replay a key script as fast as possible, one key per tick."""
    session = GameSession(
        SnakeGame(config),
        ScriptedInput(keys),
        renderers,
        timer=IntervalTimer(0),
        max_ticks=max_ticks
    )
    return session.run()


def run_interactive(
    stdscr,
    config: GameConfig,
    extra_renderers: List[Renderer],
    max_ticks: Optional[int] = None
) -> dict:
    curses.curs_set(0)
    stdscr.keypad(True)

    session = GameSession(
        SnakeGame(config),
        CursesInput(stdscr),
        [CursesRenderer(stdscr), *extra_renderers],
        max_ticks=max_ticks
    )
    summary = session.run()

    if session.game.game_over:
        stdscr.timeout(-1)
        stdscr.getch()
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_file)

    try:
        config = build_config(args)
        keys = parse_keys(args.keys)
    except ValueError as e:
        parser.error(str(e))

    if keys and not args.headless:
        parser.error("--keys can only be used with --headless")

    recorder = FrameRenderer(fps=max(1, round(1000 / config.tick_ms))) if args.record else None
    extra_renderers: List[Renderer] = [recorder] if recorder else []

    if args.headless:
        renderers = list(extra_renderers)
        if not args.quiet:
            renderers.insert(0, TextRenderer())
        result = run_headless(config, keys, renderers, max_ticks=args.max_ticks)
    else:
        result = curses.wrapper(run_interactive, config, extra_renderers, args.max_ticks)

    if recorder is not None and recorder.frames:
        result["recording"] = recorder.save_gif(args.record)

    logger.info(f"Session finished: {result}")

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
