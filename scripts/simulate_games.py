#!/usr/bin/env python3
"""Play many AI-vs-random QuadraX games and report the tally.

Example:
    python scripts/simulate_games.py --games 200 --rules classic --seed 7
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quadrax.config import RULES_PRESETS, get_rules
from quadrax.selfplay import play_match, random_agent, scripted_agent, search_agent


def setup_logging() -> logging.Logger:
    """Setup logging for the simulation run."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description='AI vs random agent statistics')
    parser.add_argument('--games', type=int, default=100, help='Games per seat assignment')
    parser.add_argument('--rules', type=str, choices=list(RULES_PRESETS.keys()),
                        default='classic', help='Rules preset')
    parser.add_argument('--max-moves', type=int, default=200,
                        help='Truncate games longer than this')
    parser.add_argument('--agent', type=str, choices=['scripted', 'search'],
                        default='scripted', help='AI played against the random agent')
    parser.add_argument('--depth', type=int, default=2, help='Search depth for --agent search')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the random agent')
    parser.add_argument('--no-progress', action='store_true', help='Disable progress bars')

    args = parser.parse_args()
    logger = setup_logging()

    if args.games <= 0:
        logger.error("--games must be positive")
        return 1

    rules = get_rules(args.rules)
    ai = search_agent(args.depth) if args.agent == 'search' else scripted_agent()
    rand = random_agent(args.seed)

    logger.info("=" * 60)
    logger.info("Rules: %s (%s)", args.rules, rules.description)
    logger.info("Agent: %s", args.agent)
    logger.info("=" * 60)

    as_first = play_match(ai, rand, args.games, rules, args.max_moves,
                          disable_tqdm=args.no_progress)
    logger.info("AI as PLAYER_ONE: %s", as_first)

    as_second = play_match(rand, ai, args.games, rules, args.max_moves,
                           disable_tqdm=args.no_progress)
    logger.info("AI as PLAYER_TWO: %s", as_second)

    wins = as_first["player_one"] + as_second["player_two"]
    total = 2 * args.games
    logger.info("AI win rate: %.1f%% (%d/%d)", 100.0 * wins / total, wins, total)
    return 0


if __name__ == '__main__':
    sys.exit(main())
