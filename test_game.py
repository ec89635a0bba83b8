import unittest

from game import (
    Board,
    BoardConfig,
    ConfigurationError,
    DuplicatePick,
    Phase,
    apply_pick,
    deal_board,
    hide_mismatch,
    new_game,
    render_board,
    resolve,
)


def make_board(rows):
    return Board.from_symbols(len(rows), len(rows[0]), ''.join(rows))


def find_pair(board, symbol):
    return [coord for coord in board.coords() if board.at(*coord).symbol == symbol]


class TestMemoryMatchBasics(unittest.TestCase):
    def test_default_deal_has_eight_pairs(self):
        board = deal_board(BoardConfig(), seed=1)
        counts = board.symbol_counts()
        self.assertEqual(len(counts), 8)
        self.assertEqual(set(counts.values()), {2})

    def test_same_card_twice_on_four_by_four(self):
        state = new_game(deal_board(BoardConfig(4, 4), seed=3))
        state, _ = apply_pick(state, (0, 0))
        state, events = apply_pick(state, (0, 0))
        self.assertIsInstance(events[0].error, DuplicatePick)
        self.assertFalse(state.board.at(0, 0).revealed)
        self.assertEqual(state.moves, 0)

    def test_matching_pair_scores(self):
        state = new_game(deal_board(BoardConfig(4, 4), seed=3))
        a, b = find_pair(state.board, 'A')
        state, _ = apply_pick(state, a)
        state, _ = apply_pick(state, b)
        state, _ = resolve(state)
        self.assertTrue(state.board.at(*a).matched and state.board.at(*b).matched)
        self.assertEqual((state.pairs_found, state.moves), (1, 1))

    def test_non_matching_pair_hides_after_acknowledgment(self):
        board = make_board(['AB', 'BA'])
        state, _ = apply_pick(new_game(board), (0, 0))
        state, _ = apply_pick(state, (1, 0))
        state, _ = resolve(state)
        state, _ = hide_mismatch(state)
        self.assertEqual(state.board.open_cells(), [])
        self.assertEqual(state.board.matched_count(), 0)
        self.assertEqual(state.moves, 1)

    def test_full_game_reaches_won(self):
        state = new_game(deal_board(BoardConfig(2, 3), seed=9))
        for symbol in 'ABC':
            a, b = find_pair(state.board, symbol)
            state, _ = apply_pick(state, a)
            state, _ = apply_pick(state, b)
            state, _ = resolve(state)
        self.assertIs(state.phase, Phase.WON)
        self.assertEqual(state.moves, 3)
        self.assertNotIn('*', render_board(state.board))

    def test_alphabet_too_small(self):
        with self.assertRaises(ConfigurationError):
            deal_board(BoardConfig(2, 64))


if __name__ == '__main__':
    unittest.main(verbosity=2)
