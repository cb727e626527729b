import argparse
import random
from collections import Counter
from typing import Optional

from loguru import logger

from .config import config, session_config
from .game import LudoGame
from .strategy import available


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play computer-only Ludo games and report the winners"
    )
    parser.add_argument(
        "--players",
        type=int,
        choices=sorted(config.ACTIVE_SLOTS),
        default=session_config.num_players,
        help="Number of players in each game",
    )
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="Seed for dice and tie-breaks")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=sorted(available()),
        default=session_config.computer_strategy,
        help="Strategy used by every seat",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=session_config.max_steps,
        help="Safety cap on roll/select steps per game",
    )
    return parser.parse_args(argv)


def play_game(game: LudoGame, players: int, max_steps: int) -> Optional[int]:
    """Play one full game; returns the winner slot or None if capped."""
    slots = config.ACTIVE_SLOTS[players]
    game.start(players, computer_slots=slots)
    state = game.run_computer_turns(max_steps)
    return state.winner


def run(args: argparse.Namespace) -> Counter:
    rng = random.Random(args.seed)
    wins: Counter = Counter()

    for idx in range(args.games):
        game = LudoGame(rng=rng, default_strategy=args.strategy)
        winner = play_game(game, args.players, args.max_steps)
        moves = len(game.state.history)
        if winner is None:
            logger.warning(f"Game {idx + 1}: no winner after {moves} moves")
        else:
            logger.info(
                f"Game {idx + 1}: {config.PLAYER_NAMES[winner]} wins after {moves} moves"
            )
        wins[winner] += 1

    print(f"--- {args.games} games, {args.players} players, strategy={args.strategy} ---")
    for slot in config.ACTIVE_SLOTS[args.players]:
        print(f"{config.PLAYER_NAMES[slot]:>7}: {wins[slot]}")
    if wins[None]:
        print(f"Unfinished: {wins[None]}")
    return wins


def main(argv: Optional[list[str]] = None) -> None:
    run(parse_args(argv))


if __name__ == "__main__":
    main()
