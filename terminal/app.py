"""
Terminal front end for the snake game.

Runs the game in a curses screen: keys are collected between ticks into the
player's key buffer, the session is ticked at a fixed interval, and the
frame is redrawn after every tick. When the game ends the terminal is
restored and, unless the player quit, their name and final length are
appended to the score file.

Usage:
    python -m terminal.app --size 20 --tick-ms 75
"""
import argparse
import curses
import json
import logging
import random
import sys
import time
from pathlib import Path
from typing import Callable, Optional

from games.config import GameConfig
from games.snake import SnakeEnv
from terminal.players import HumanPlayer, create_player
from terminal.scores import ScoreBoard
from terminal.session import Session
from terminal.validation import (
    validate_grid_size,
    validate_player_name,
    validate_tick_interval,
)

logger = logging.getLogger('snake')

KEY_NAMES = {
    curses.KEY_LEFT: 'left',
    curses.KEY_RIGHT: 'right',
    ord('q'): 'q',
    ord('Q'): 'q',
}


def build_log_handlers(log_file: Optional[str]) -> list:
    """
    Handlers for the root logger.

    Nothing may write to the terminal while curses owns it, so without a
    log file the records are discarded.
    """
    if log_file is None:
        return [logging.NullHandler()]
    return [logging.FileHandler(log_file)]


def setup_logging(log_file: Optional[str], level: str = 'INFO'):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
        handlers=build_log_handlers(log_file),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play snake in the terminal")
    parser.add_argument("--config", help="JSON file with game settings")
    parser.add_argument("--size", help="Square grid size (overrides --width/--height)")
    parser.add_argument("--width", help="Grid width")
    parser.add_argument("--height", help="Grid height")
    parser.add_argument("--tick-ms", help="Milliseconds between ticks")
    parser.add_argument("--scores-file", help="Score file to append to")
    parser.add_argument("--save-on-quit", action="store_true", help="Offer to save the score after quitting with q")
    parser.add_argument("--seed", type=int, help="Seed the random generator for a repeatable layout")
    parser.add_argument("--log-file", default="snake.log", help="Log file (default: snake.log)")
    parser.add_argument("--no-log-file", action="store_true", help="Discard log output instead of writing a log file")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--show-scores", action="store_true", help="Print the best saved scores and exit")
    return parser


def _validated(value, validator, label: str) -> int:
    is_valid, error, corrected = validator(value)
    if not is_valid:
        logger.warning(f"{label} validation warning: {error}, using {corrected}")
    return corrected


def build_config(args: argparse.Namespace) -> GameConfig:
    """Merge the optional JSON config file with command-line overrides."""
    data = {}
    if args.config:
        with open(args.config, "r") as f:
            data = json.load(f)

    if args.size is not None:
        size = _validated(args.size, validate_grid_size, "Grid size")
        data["width"] = data["height"] = size
    else:
        if args.width is not None:
            data["width"] = _validated(args.width, validate_grid_size, "Grid width")
        if args.height is not None:
            data["height"] = _validated(args.height, validate_grid_size, "Grid height")

    if args.tick_ms is not None:
        data["tick_interval_ms"] = _validated(args.tick_ms, validate_tick_interval, "Tick interval")
    if args.scores_file:
        data["scores_file"] = args.scores_file
    if args.save_on_quit:
        data["save_on_quit"] = True

    return GameConfig.from_dict(data)


def key_name(code: int) -> Optional[str]:
    """Translate a curses key code into a key name, None for ignored keys."""
    return KEY_NAMES.get(code)


def drain_keys(stdscr, player: HumanPlayer):
    """Read every key waiting in the input queue. The newest one wins."""
    while True:
        code = stdscr.getch()
        if code == -1:
            return
        name = key_name(code)
        if name is not None:
            player.set_key(name)


def draw(stdscr, frame: str):
    stdscr.erase()
    for row, line in enumerate(frame.splitlines()):
        try:
            stdscr.addstr(row, 0, line)
        except curses.error:
            # Terminal too small for the whole frame
            pass
    stdscr.refresh()


def run_loop(stdscr, session: Session, interval_ms: int) -> dict:
    """
    Tick the session at a fixed interval until the game ends.

    Returns:
        dict: Final game state
    """
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.nodelay(True)

    interval = interval_ms / 1000.0
    next_tick = time.monotonic()

    while True:
        drain_keys(stdscr, session.player)
        state = session.tick()
        draw(stdscr, session.render())

        if session.done:
            return state

        next_tick += interval
        delay = next_tick - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        else:
            # Running behind: don't try to catch up with a burst of ticks
            next_tick = time.monotonic()


def prompt_player_name(input_fn: Callable[[str], str] = input,
                       output_fn: Callable[[str], None] = print) -> Optional[str]:
    """
    Ask for the player's name until a valid one is given.

    Returns:
        The cleaned name, or None if input was closed or interrupted
    """
    while True:
        try:
            raw = input_fn('Enter your name: ')
        except (EOFError, KeyboardInterrupt):
            logger.warning("Name prompt closed, score not saved")
            return None

        is_valid, error, name = validate_player_name(raw)
        if is_valid:
            return name
        output_fn(f"Invalid name: {error}")


def finish(session: Session, scoreboard: ScoreBoard,
           input_fn: Callable[[str], str] = input,
           output_fn: Callable[[str], None] = print) -> bool:
    """
    Game-over sequence once the terminal is back to normal.

    Returns:
        True if a score line was written
    """
    output_fn(session.exit_message + "\n")

    if not session.should_save_score:
        return False

    name = prompt_player_name(input_fn, output_fn)
    if name is None:
        return False

    if scoreboard.append_score(name, session.final_length):
        output_fn(f"\t-> Saved to '{scoreboard.path}'.")
        return True

    output_fn(f"ERROR SAVING SCORE TO {scoreboard.path}")
    return False


def show_scores(scoreboard: ScoreBoard, output_fn: Callable[[str], None] = print):
    scores = scoreboard.top_scores()
    if not scores:
        output_fn(f"No scores saved in '{scoreboard.path}' yet.")
        return
    for rank, (name, length) in enumerate(scores, start=1):
        output_fn(f"{rank:2d}. {name}:\t{length}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(None if args.no_log_file else args.log_file, args.log_level)

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    scoreboard = ScoreBoard(Path(config.scores_file))
    if args.show_scores:
        show_scores(scoreboard)
        return 0

    if args.seed is not None:
        random.seed(args.seed)

    try:
        game = SnakeEnv(config)
    except RuntimeError as e:
        # e.g. probabilities that leave no empty cell to spawn on
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    player = create_player('human')
    session = Session(game, player, save_on_quit=config.save_on_quit)
    logger.info(f"Starting game: {config.to_dict()}")

    try:
        curses.wrapper(run_loop, session, config.tick_interval_ms)
    except KeyboardInterrupt:
        # Ctrl+C counts as quitting
        logger.info("Interrupted, quitting")
        if not session.done:
            player.set_key('q')
            session.tick()

    finish(session, scoreboard)
    return 0


if __name__ == '__main__':
    sys.exit(main())
