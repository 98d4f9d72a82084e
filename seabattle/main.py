"""Terminal entry point."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Iterable
from typing import TextIO

from seabattle.game.app.commands import USAGE, CommandError, parse_command
from seabattle.game.app.dispatch import IntentDispatcher
from seabattle.game.app.projection import build_game_view
from seabattle.game.app.session import GameSession
from seabattle.game.infra.config import GameConfig, load_default_env_files, load_game_config
from seabattle.game.infra.logging import setup_logging, shutdown_logging
from seabattle.game.ui.text_view import render_game_view

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit", "q"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play seabattle against a random AI.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the AI random source.")
    parser.add_argument(
        "--message-limit",
        type=int,
        default=None,
        help="Number of recent messages to show.",
    )
    return parser


def run_loop(
    session: GameSession,
    lines: Iterable[str],
    out: TextIO,
    *,
    message_limit: int,
) -> GameSession:
    """Read commands, apply them and print the resulting view after each one."""
    out.write(render_game_view(build_game_view(session.state, message_limit=message_limit)) + "\n")
    out.write(USAGE + "\n")
    for line in lines:
        if line.strip().lower() in QUIT_COMMANDS:
            break
        parsed = parse_command(line, session.state)
        if parsed is None:
            continue
        if isinstance(parsed, CommandError):
            out.write(parsed.text + "\n")
            continue
        session.apply(parsed)
        view = build_game_view(session.state, message_limit=message_limit)
        out.write(render_game_view(view) + "\n")
    return session


def main(argv: list[str] | None = None) -> int:
    """Run the seabattle terminal game."""
    args = build_parser().parse_args(argv)
    env_files = load_default_env_files()
    config: GameConfig = load_game_config()
    setup_logging(config.log_level)
    for path, keys in env_files.items():
        logger.debug("env_file_loaded path=%s keys=%d", path, len(keys))

    seed = args.seed if args.seed is not None else config.seed
    message_limit = args.message_limit if args.message_limit is not None else config.message_limit
    logger.info("session_start seed=%s message_limit=%d", seed, message_limit)

    dispatcher = IntentDispatcher(
        random.Random(seed), max_placement_attempts=config.placement_attempts
    )
    try:
        session = run_loop(GameSession(dispatcher), sys.stdin, sys.stdout, message_limit=message_limit)
        logger.info("session_end revision=%d phase=%s", session.revision, session.state.phase)
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
