from __future__ import annotations

from typing import Callable, List

from .board import Board, Coord
from .errors import MalformedInput
from .turns import Event, EventKind

HIDDEN_GLYPH = '*'


def render_board(board: Board) -> str:
    """Generates the text grid shown to the player, with 1-based row and column headers."""
    rw = len(str(board.rows))
    margin = ' ' * (rw + 2)
    separator = margin + '+' + '---+' * board.cols
    header = margin + ' ' + ''.join(f"{c + 1:^3} " for c in range(board.cols))
    lines: List[str] = [header.rstrip(), separator]
    for r in range(board.rows):
        row: List[str] = []
        for c in range(board.cols):
            cell = board.at(r, c)
            row.append(f" {cell.symbol if cell.shown else HIDDEN_GLYPH} |")
        lines.append(f" {r + 1:>{rw}} |" + ''.join(row))
        lines.append(separator)
    return '\n'.join(lines)


def parse_pick(text: str) -> Coord:
    """Parses '<row> <col>' (1-based, space or comma separated) into a 0-based coordinate."""
    tokens = text.replace(',', ' ').split()
    if len(tokens) != 2:
        raise MalformedInput()
    try:
        r, c = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise MalformedInput() from None
    return (r - 1, c - 1)


def format_elapsed(seconds: float) -> str:
    """Formats a duration as minutes:seconds, e.g. 83 -> '1:23'."""
    total = max(0, int(seconds))
    return f"{total // 60}:{total % 60:02d}"


class Console:
    """Terminal presentation: renders the board, reads picks and reports events."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn

    def say(self, text: str = '') -> None:
        self._output(text)

    def welcome(self, total_pairs: int) -> None:
        self.say('Welcome to Memory Match!')
        self.say(f'Match all {total_pairs} pairs. Enter coordinates as row and column (1-based).')
        self.say()

    def show(self, board: Board) -> None:
        self.say()
        self.say(render_board(board))
        self.say()

    def read_pick(self, board: Board, slot: str) -> Coord:
        """Prompts for one pick. Raises MalformedInput for anything but two integers."""
        self.say(f'Pick {slot} card:')
        text = self._input(
            f'Enter row (1-{board.rows}) and column (1-{board.cols}) separated by space: '
        )
        return parse_pick(text)

    def await_acknowledgment(self) -> None:
        self._input('Press Enter to continue...')

    def report(self, event: Event) -> None:
        if event.kind is EventKind.PICK_REJECTED and event.error is not None:
            self.say(event.error.message)
            self.say()
        elif event.kind is EventKind.MATCH:
            self.say("Nice! It's a match.")
            self.say()
        elif event.kind is EventKind.NO_MATCH:
            self.say('Not a match. Cards will be hidden.')
            self.say()
        elif event.kind is EventKind.WON:
            self.say('CONGRATULATIONS! You matched all pairs.')
        # Reveals and hides show up in the next board render.

    def summary(self, moves: int, elapsed_seconds: float) -> None:
        self.say(f'Moves: {moves}')
        self.say(f'Time: {format_elapsed(elapsed_seconds)} (minutes:seconds)')
