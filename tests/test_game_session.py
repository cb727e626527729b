import random
import unittest

from ludo_core import LudoGame
from ludo_core.exceptions import InvariantError
from ludo_core.strategy import HeuristicStrategy
from ludo_core.types import Phase


class NoMoveStrategy:
    def decide(self, player, dice_roll, board, legal=None):
        return None


class TestLudoGame(unittest.TestCase):
    def test_computer_only_game_finishes(self):
        game = LudoGame(rng=random.Random(3))
        game.start(2, computer_slots=(0, 2))
        state = game.run_computer_turns()
        self.assertEqual(state.phase, Phase.GAME_OVER)
        self.assertIn(state.winner, (0, 2))
        self.assertEqual(state.board.finished_count(state.winner), 4)
        self.assertTrue(state.history)

    def test_four_player_random_game_finishes(self):
        game = LudoGame(rng=random.Random(5), default_strategy="random")
        game.start(4, computer_slots=(0, 1, 2, 3))
        state = game.run_computer_turns()
        self.assertTrue(state.is_over)
        self.assertIn(state.winner, (0, 1, 2, 3))

    def test_seeded_games_replay(self):
        histories = []
        for _ in range(2):
            game = LudoGame(rng=random.Random(11))
            game.start(3, computer_slots=(0, 1, 2))
            histories.append(game.run_computer_turns().history)
        self.assertEqual(histories[0], histories[1])

    def test_human_seat_stops_computer_loop(self):
        game = LudoGame(rng=random.Random(1))
        state = game.start(2, computer_slots=(2,))
        self.assertFalse(game.is_current_player_computer())
        self.assertFalse(game.play_computer_step())
        self.assertIs(game.run_computer_turns(), state)

        # A wasted roll hands the turn to the computer, which plays back to Red
        game.roll(3)
        self.assertEqual(game.state.current_player, 2)
        state = game.run_computer_turns()
        self.assertEqual(state.current_player, 0)
        self.assertEqual(state.phase, Phase.AWAITING_ROLL)

    def test_roll_outside_phase_keeps_rng(self):
        rng = random.Random(2)
        game = LudoGame(rng=rng)
        before = rng.getstate()
        self.assertIs(game.roll(), game.state)
        self.assertEqual(rng.getstate(), before)

    def test_human_turn_flow(self):
        game = LudoGame(rng=random.Random(4))
        game.start(2)
        state = game.roll(6)
        self.assertEqual(state.phase, Phase.AWAITING_SELECTION)
        self.assertEqual(game.legal_moves(), {"0-0", "0-1", "0-2", "0-3"})
        state = game.select("0-2")
        self.assertTrue(state.board.token("0-2").is_on_board())
        self.assertEqual(state.current_player, 0)

    def test_strategy_cached_per_player(self):
        game = LudoGame()
        strategy = game.strategy_for(2)
        self.assertIsInstance(strategy, HeuristicStrategy)
        self.assertIs(game.strategy_for(2), strategy)
        self.assertIs(strategy.rng, game.rng)

    def test_strategy_without_move_is_an_error(self):
        game = LudoGame(rng=random.Random(0))
        game.start(2, computer_slots=(0,))
        game.roll(6)
        game.strategies[0] = NoMoveStrategy()
        with self.assertRaises(InvariantError):
            game.play_computer_step()

    def test_unsupported_player_count_keeps_default(self):
        game = LudoGame()
        state = game.start(7)
        self.assertEqual(state.player_count, 4)
        self.assertEqual(state.phase, Phase.AWAITING_ROLL)

    def test_reset(self):
        game = LudoGame()
        game.start(2)
        self.assertEqual(game.reset().phase, Phase.SETUP)
        self.assertEqual(game.legal_moves(), frozenset())


if __name__ == "__main__":
    unittest.main()
