#!/usr/bin/env python3
"""Play QuadraX in the terminal.

Example:
    python scripts/play.py --mode human-vs-ai --rules classic
    python scripts/play.py --mode ai-vs-ai --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quadrax.config import RULES_PRESETS, get_rules
from quadrax.core import Cell, Movement, Phase, Placement
from quadrax.errors import QuadraXError
from quadrax.game import apply_move, new_game
from quadrax.selfplay import scripted_agent, search_agent


def setup_logging(level: str) -> logging.Logger:
    """Setup logging for the console game."""
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger(__name__)


def print_board(board):
    """Print board with cell indices alongside."""
    symbols = board.render().splitlines()
    for r, row in enumerate(symbols):
        indices = " ".join(f"{r * 4 + c:2d}" for c in range(4))
        print(f"  {row}     {indices}")
    print()


def read_human_move(state):
    """Prompt until the user enters a move of the right shape."""
    while True:
        prompt = "place at: " if state.phase is Phase.PLACEMENT else "move from to: "
        try:
            raw = input(f"{state.current_player.name} {prompt}").split()
        except EOFError:
            return None
        try:
            if state.phase is Phase.PLACEMENT and len(raw) == 1:
                return Placement(int(raw[0]))
            if state.phase is Phase.MOVEMENT and len(raw) == 2:
                return Movement(int(raw[0]), int(raw[1]))
        except (ValueError, QuadraXError) as exc:
            print(f"  invalid: {exc}")
            continue
        print("  enter one index to place, or two indices (from to) to move")


def main():
    parser = argparse.ArgumentParser(description='Play QuadraX in the terminal')
    parser.add_argument('--mode', type=str, choices=['human-vs-ai', 'ai-vs-human', 'ai-vs-ai', 'human-vs-human'],
                        default='human-vs-ai', help='Who controls player one and player two')
    parser.add_argument('--rules', type=str, choices=list(RULES_PRESETS.keys()),
                        default='classic', help='Rules preset')
    parser.add_argument('--ai', type=str, choices=['scripted', 'search'],
                        default='scripted', help='Move choice for AI-controlled players')
    parser.add_argument('--depth', type=int, default=2, help='Search depth for --ai search')
    parser.add_argument('--max-moves', type=int, default=200,
                        help='Stop an undecided game after this many moves')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING'],
                        default='INFO', help='Logging verbosity')

    args = parser.parse_args()
    logger = setup_logging(args.log_level)

    first, second = args.mode.split('-vs-')
    controllers = {Cell.PLAYER_ONE: first, Cell.PLAYER_TWO: second}
    ai = search_agent(args.depth) if args.ai == 'search' else scripted_agent()

    state = new_game(get_rules(args.rules))
    logger.info("New game: %s", get_rules(args.rules).description)

    while state.active and state.move_count < args.max_moves:
        print_board(state.board)
        if controllers[state.current_player] == 'ai':
            move = ai(state)
            print(f"{state.current_player.name} (ai) plays {move}")
        else:
            move = read_human_move(state)
            if move is None:
                logger.info("Input closed; leaving game")
                return 1
        try:
            apply_move(state, move)
        except QuadraXError as exc:
            print(f"  rejected: {exc}")

    print_board(state.board)
    if state.active:
        logger.info("Stopped after %d moves without a result", state.move_count)
    else:
        logger.info("Game over: %s", state.outcome())
    return 0


if __name__ == '__main__':
    sys.exit(main())
