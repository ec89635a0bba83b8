import io
import random
import unittest
from contextlib import redirect_stderr
from unittest.mock import patch

from game import Board, BoardConfig, Console, deal_board, new_game, play
from memory_core import cli


def _solving_inputs(board):
    """One line per pick that matches every pair on the first try, 1-based."""
    positions = {}
    for r, c in board.coords():
        positions.setdefault(board.at(r, c).symbol, []).append((r, c))
    lines = []
    for (r1, c1), (r2, c2) in positions.values():
        lines += [f'{r1 + 1} {c1 + 1}', f'{r2 + 1} {c2 + 1}']
    return lines


class _Script:
    """Feeds scripted lines to a Console and records everything printed."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.out = []
        self.console = Console(input_fn=self._input, output_fn=self.out.append)

    def _input(self, prompt):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class TestPlay(unittest.TestCase):
    def test_given_scripted_game_when_played_then_wins_with_moves_and_time(self):
        board = Board.from_symbols(2, 2, 'ABBA')
        script = _Script([
            '1 1', '1 2',  # A / B: no match
            '',            # acknowledge
            '1 1', '1 1',  # same card twice: abandoned, no move
            'x',           # malformed first pick
            '1 1', '2 2',  # A / A
            '2 2',         # already matched
            '1 2', '2 1',  # B / B
        ])
        state = play(new_game(board, started_at=100.0), script.console, clock=lambda: 183.0)
        self.assertTrue(state.is_won)
        self.assertEqual(state.moves, 3)
        self.assertEqual(state.pairs_found, 2)
        self.assertEqual(script.lines, [])
        self.assertIn('Not a match. Cards will be hidden.', script.out)
        self.assertIn('You picked the same card twice. Try again.', script.out)
        self.assertIn('Invalid input. Please enter two numbers.', script.out)
        self.assertIn('That card is already matched. Pick another.', script.out)
        self.assertEqual(script.out[-3:], [
            'CONGRATULATIONS! You matched all pairs.',
            'Moves: 3',
            'Time: 1:23 (minutes:seconds)',
        ])

    def test_given_invalid_second_pick_when_played_then_attempt_restarts_without_move(self):
        board = Board.from_symbols(1, 2, 'AA')
        script = _Script(['1 1', '3 3', '1 2', '1 1'])
        state = play(new_game(board), script.console, clock=lambda: 5.0)
        self.assertTrue(state.is_won)
        self.assertEqual(state.moves, 1)
        self.assertIn('Coordinates out of range. Try again.', script.out)

    def test_given_closed_input_when_playing_then_eof_propagates(self):
        board = Board.from_symbols(1, 2, 'AA')
        script = _Script([])
        with self.assertRaises(EOFError):
            play(new_game(board), script.console)


class TestMain(unittest.TestCase):
    def test_given_odd_board_when_main_then_exit_status_one(self):
        err = io.StringIO()
        with redirect_stderr(err):
            self.assertEqual(cli.main(['--rows', '3', '--cols', '3']), 1)
        self.assertIn('error:', err.getvalue())

    def test_given_too_many_pairs_when_main_then_exit_status_one_before_play(self):
        err = io.StringIO()
        with patch.object(cli, 'play') as play_mock, redirect_stderr(err):
            self.assertEqual(cli.main(['--rows', '12', '--cols', '12']), 1)
        play_mock.assert_not_called()
        self.assertIn('Not enough unique symbols', err.getvalue())

    def test_given_seed_when_main_plays_perfect_game_then_exit_status_zero(self):
        board = deal_board(BoardConfig(2, 4), rng=random.Random(7))
        script = _Script(_solving_inputs(board))
        with patch.object(cli, 'Console', return_value=script.console):
            code = cli.main(['--rows', '2', '--cols', '4', '--seed', '7'])
        self.assertEqual(code, 0)
        self.assertEqual(script.lines, [])
        self.assertIn('Moves: 4', script.out)

    def test_given_closed_input_when_main_then_aborts_with_status_one(self):
        script = _Script([])
        with patch.object(cli, 'Console', return_value=script.console):
            self.assertEqual(cli.main(['--seed', '1']), 1)
        self.assertIn('Game aborted.', script.out)


if __name__ == '__main__':
    unittest.main(verbosity=2)
