from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import Callable, List, Optional

from .console import Console
from .config import config_from_env
from .deal import deal_board
from .errors import ConfigurationError, MalformedInput
from .state import GameState, Phase, new_game
from .turns import Event, apply_pick, hide_mismatch, is_pending_mismatch, reject_pick, resolve

logger = logging.getLogger(__name__)


def _report_all(console: Console, events: List[Event]) -> None:
    for event in events:
        console.report(event)


def _take_pick(state: GameState, console: Console, slot: str) -> GameState:
    try:
        coord = console.read_pick(state.board, slot)
    except MalformedInput as err:
        state, events = reject_pick(state, err)
    else:
        state, events = apply_pick(state, coord)
    _report_all(console, events)
    return state


def play(state: GameState, console: Console, clock: Callable[[], float] = time.monotonic) -> GameState:
    """
    Drives one game to the end: pick, pick, compare, repeat until every pair is matched.
    Returns the final (won) state after printing the summary.
    """
    console.welcome(state.total_pairs)
    while not state.is_won:
        console.show(state.board)
        state = _take_pick(state, console, 'first')
        if state.phase is not Phase.AWAITING_SECOND_PICK:
            continue
        console.show(state.board)
        state = _take_pick(state, console, 'second')
        if state.phase is not Phase.RESOLVING:
            continue
        console.show(state.board)
        state, events = resolve(state)
        _report_all(console, events)
        if is_pending_mismatch(state):
            console.await_acknowledgment()
            state, events = hide_mismatch(state)
            _report_all(console, events)
    console.summary(state.moves, clock() - state.started_at)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Memory Match: uncover all pairs of hidden cards')
    parser.add_argument('--rows', type=int, default=None, help='Board rows (default 4, env MEMORY_MATCH_ROWS)')
    parser.add_argument('--cols', type=int, default=None, help='Board columns (default 4, env MEMORY_MATCH_COLS)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--verbose', action='store_true', help='Log state transitions to stderr')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        config = config_from_env(args.rows, args.cols)
        board = deal_board(config, rng=random.Random(args.seed))
    except ConfigurationError as err:
        print(f'error: {err}', file=sys.stderr)
        return 1

    console = Console()
    try:
        play(new_game(board, started_at=time.monotonic()), console)
    except (EOFError, KeyboardInterrupt):
        logger.debug('input closed, aborting game')
        console.say()
        console.say('Game aborted.')
        return 1
    return 0
