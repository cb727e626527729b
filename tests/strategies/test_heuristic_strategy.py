import random
import unittest

from ludo_core.board import BoardState
from ludo_core.strategy import (
    HeuristicStrategy,
    RandomStrategy,
    available,
    build_move_options,
    create,
    threat_score,
)


class FixedRandom:
    """Stand-in for random.Random that always draws the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


def place(board: BoardState, token_id: str, progress: int) -> BoardState:
    return board.with_token(board.token(token_id).moved_to(progress))


def score_of(strategy, player, dice, board, token_id):
    ctx = build_move_options(player, dice, board)
    move = next(m for m in ctx.moves if m.token_id == token_id)
    return strategy._score_move(ctx, move)


class TestThreatScore(unittest.TestCase):
    def test_closer_threats_weigh_more(self):
        board = BoardState.new((0, 1, 2, 3))
        # Yellow progress 34 sits on cell 8, four short of cell 12
        board = place(board, "2-0", 34)
        self.assertEqual(threat_score(0, 12, board), 60)
        # Green progress 50 sits on cell 11, one short of cell 12
        board = place(board, "1-0", 50)
        self.assertEqual(threat_score(0, 12, board), 180)

    def test_tokens_leaving_the_ring_do_not_threaten(self):
        board = BoardState.new((0, 1, 2, 3))
        # Green progress 51 is cell 12 but its next step is the home lane
        board = place(board, "1-0", 51)
        self.assertEqual(threat_score(0, 13, board), 0)

    def test_own_and_base_tokens_ignored(self):
        board = place(BoardState.new((0, 2)), "0-1", 10)
        self.assertEqual(threat_score(0, 12, board), 0)


class TestMoveOptions(unittest.TestCase):
    def test_capture_features(self):
        board = BoardState.new((0, 2))
        board = place(board, "0-0", 9)
        board = place(board, "2-0", 38)  # cell 12
        ctx = build_move_options(0, 3, board)
        self.assertEqual([m.token_id for m in ctx.moves], ["0-0"])
        move = ctx.moves[0]
        self.assertTrue(move.can_capture)
        self.assertEqual(move.captured_progress, 38)
        self.assertEqual(move.new_progress, 12)
        self.assertTrue(move.lands_on_ring)
        self.assertFalse(move.lands_on_safe)
        self.assertEqual(ctx.on_board_count, 1)
        self.assertEqual(ctx.finished_count, 0)

    def test_restricted_token_ids(self):
        board = BoardState.new((0, 2))
        ctx = build_move_options(0, 6, board, ["0-2"])
        self.assertEqual([m.token_id for m in ctx.moves], ["0-2"])
        self.assertTrue(ctx.moves[0].exits_base)


class TestHeuristicScores(unittest.TestCase):
    def setUp(self):
        self.strategy = HeuristicStrategy(rng=FixedRandom(0.99))
        self.board = BoardState.new((0, 2))

    def test_base_exit_scores(self):
        self.assertEqual(score_of(self.strategy, 0, 6, self.board, "0-0"), 700)
        board = place(self.board, "0-1", 10)
        self.assertEqual(score_of(self.strategy, 0, 6, board, "0-0"), 400)
        board = place(board, "0-2", 20)
        self.assertEqual(score_of(self.strategy, 0, 6, board, "0-0"), 200)

    def test_safe_landing(self):
        board = place(self.board, "0-0", 6)
        self.assertEqual(score_of(self.strategy, 0, 2, board, "0-0"), 300 + 18)

    def test_home_lane_entry(self):
        board = place(self.board, "0-0", 48)
        self.assertEqual(score_of(self.strategy, 0, 5, board, "0-0"), 350 + 144)

    def test_six_keeps_safe_token_parked(self):
        board = place(self.board, "0-0", 8)
        self.assertEqual(score_of(self.strategy, 0, 6, board, "0-0"), 24 - 100)

    def test_escape_from_threat(self):
        board = place(self.board, "0-0", 10)
        # Yellow on cell 6 threatens cell 10 with a 4 and cell 12 with a 6
        board = place(board, "2-0", 32)
        self.assertEqual(score_of(self.strategy, 0, 2, board, "0-0"), 30 - 20 + 150)

    def test_finish_beats_progress(self):
        board = place(self.board, "0-0", 50)
        board = place(board, "0-1", 40)
        self.assertEqual(self.strategy.decide(0, 6, board), "0-0")

    def test_capture_beats_progress(self):
        board = place(self.board, "0-0", 9)
        board = place(board, "0-1", 40)
        board = place(board, "2-0", 38)
        self.assertEqual(self.strategy.decide(0, 3, board), "0-0")

    def test_deep_capture_bonus(self):
        board = place(self.board, "0-0", 9)
        board = place(board, "2-0", 38)  # Yellow progress 38 > 30
        self.assertEqual(score_of(self.strategy, 0, 3, board, "0-0"), 800 + 200 + 27)


class TestSelection(unittest.TestCase):
    def setUp(self):
        board = BoardState.new((0, 2))
        board = place(board, "0-0", 20)  # scores 60 moving to cell 22
        self.board = place(board, "0-1", 23)  # scores 69 moving to cell 25

    def test_best_move_without_tie_break(self):
        strategy = HeuristicStrategy(rng=FixedRandom(0.9))
        self.assertEqual(strategy.decide(0, 2, self.board), "0-1")

    def test_close_runner_up_taken_on_tie_break(self):
        strategy = HeuristicStrategy(rng=FixedRandom(0.1))
        self.assertEqual(strategy.decide(0, 2, self.board), "0-0")

    def test_wide_gap_ignores_rng(self):
        strategy = HeuristicStrategy(rng=FixedRandom(0.0))
        board = place(BoardState.new((0, 2)), "0-0", 50)
        board = place(board, "0-1", 5)
        # Finishing scores 1150, the best alternative 200
        self.assertEqual(strategy.decide(0, 6, board), "0-0")

    def test_gap_of_exactly_tie_margin_keeps_best(self):
        strategy = HeuristicStrategy(rng=FixedRandom(0.0), progress_weight=5)
        board = place(BoardState.new((0, 2)), "0-0", 20)  # scores 100
        board = place(board, "0-1", 30)  # scores 150
        self.assertEqual(strategy.decide(0, 2, board), "0-1")

    def test_single_move_skips_scoring(self):
        # FixedRandom(0.0) would pick the runner-up if scoring ran
        strategy = HeuristicStrategy(rng=FixedRandom(0.0))
        board = place(BoardState.new((0, 2)), "0-0", 5)
        self.assertEqual(strategy.decide(0, 3, board), "0-0")

    def test_no_moves(self):
        strategy = HeuristicStrategy(rng=FixedRandom(0.0))
        self.assertIsNone(strategy.decide(0, 3, BoardState.new((0, 2))))

    def test_random_strategy_picks_legal(self):
        strategy = RandomStrategy(rng=random.Random(7))
        for _ in range(20):
            self.assertIn(strategy.decide(0, 6, self.board), {"0-0", "0-1", "0-2", "0-3"})


class TestRegistry(unittest.TestCase):
    def test_create(self):
        rng = random.Random(1)
        strategy = create("Heuristic", rng=rng)
        self.assertIsInstance(strategy, HeuristicStrategy)
        self.assertIs(strategy.rng, rng)
        self.assertIsInstance(create("random"), RandomStrategy)

    def test_unknown(self):
        with self.assertRaises(KeyError):
            create("minimax")

    def test_available(self):
        self.assertEqual(set(available()), {"heuristic", "random"})


if __name__ == "__main__":
    unittest.main()
