"""
Command line entry point: run a headless game and print a summary.
"""

import argparse
import json
import logging
import random
import time

from .config import GameConfig
from .engine import GameSession
from .players import RandomPlayer, ScriptedPlayer
from .services import FixedTickScheduler, run_game


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a single-player grid snake game without a display."
    )
    parser.add_argument("--player", choices=["random", "scripted"], default="random",
                        help="Input source for the snake")
    parser.add_argument("--moves", type=str, default="",
                        help="Comma separated intents for the scripted player, '-' for no input (e.g. 'UP,-,LEFT')")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Stop after this many ticks")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace frames and ticks on the wall clock")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every frame")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    config = GameConfig.from_env(seed=args.seed)
    session = GameSession(config)
    session.add_game_over_listener(lambda: print("Game Over"))

    if args.player == "scripted":
        player = ScriptedPlayer.from_string(args.moves)
    else:
        player = RandomPlayer(random.Random(config.seed))

    scheduler = None
    sleep = None
    if args.realtime:
        scheduler = FixedTickScheduler(config.tick_seconds)
        sleep = time.sleep

    render = None
    if args.show_board:
        def render(state):
            print("\n" + state.print_board() + "\n")

    result = run_game(
        session,
        player,
        scheduler=scheduler,
        max_ticks=args.max_ticks,
        sleep=sleep,
        render=render,
    )

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
