"""
Command line entry point: print a fresh board or play a hot-seat game.
"""
import os
import argparse
import logging
from typing import Optional, Sequence

from .config import Config, get_default_config
from .game import Board, IllegalMove, Position, TileState
from .logger import setup_logger

logger = logging.getLogger(__name__)


def parse_move(text: str) -> Position:
    """Parse 'x,y' or 'x y' into a Position."""
    sep = ',' if ',' in text else None
    parts = [t for t in text.split(sep) if t.strip() != '']
    if len(parts) != 2:
        raise ValueError(f"Expected two coordinates, got {text!r}")
    return Position(int(parts[0]), int(parts[1]))


def play(board: Board, first: TileState = TileState.BLACK, show_moves: bool = True) -> Board:
    """
    Run a two-player game on the terminal until neither side can move.

    A player without a legal move passes. Entering 'q' or closing stdin
    ends the game early.
    """
    colour = first
    while True:
        if not board.has_legal_move(colour):
            if not board.has_legal_move(colour.opponent):
                break
            print(f"{colour.name} has no legal move and passes.")
            colour = colour.opponent
            continue

        print(board.dump())
        if show_moves:
            moves = board.legal_moves(colour)
            print(f"{colour.name} to move. Legal moves: {' '.join(str(m) for m in moves)}")
        else:
            print(f"{colour.name} to move.")
        try:
            text = input('Enter your move as x,y or x y (q to quit): ').strip()
        except EOFError:
            print()
            break
        if text.lower() == 'q':
            break

        try:
            board.take_move(parse_move(text), colour)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        except IllegalMove as e:
            print(f"{e}. Try again.")
            continue
        colour = colour.opponent

    print(board.dump())
    black, white = board.get_score()
    print(f"Score - Black: {black}, White: {white}")
    return board


def main(argv: Optional[Sequence[str]] = None):
    """Build a board from the configuration and dump it or play on it."""
    parser = argparse.ArgumentParser(description='Reversi rules engine')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--size', type=int, default=None,
                        help='Board size (overrides the config)')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (overrides the config)')
    parser.add_argument('--play', action='store_true',
                        help='Play a two-player game in the terminal')
    args = parser.parse_args(argv)

    if args.config is not None:
        if not os.path.exists(args.config):
            parser.error(f"Config file {args.config} not found")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.size is not None:
        config.board.size = args.size
    if args.log_level is not None:
        config.logging.log_level = args.log_level

    try:
        session_logger = setup_logger(config)
    except ValueError as e:
        parser.error(str(e))
    try:
        try:
            board = Board(config.board.size)
        except ValueError as e:
            parser.error(str(e))
        logger.info("Created %dx%d board", board.width, board.width)

        if args.play:
            play(board, show_moves=config.logging.verbose)
        else:
            print(board.dump())
    finally:
        session_logger.close()
    return 0


if __name__ == "__main__":
    main()
