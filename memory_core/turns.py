from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Coord, Symbol
from .errors import AlreadyMatched, AlreadyRevealed, DuplicatePick, OutOfRange, PickError
from .state import GameState, Phase

logger = logging.getLogger(__name__)


class EventKind(Enum):
    CARD_REVEALED = "card_revealed"
    PICK_REJECTED = "pick_rejected"
    ATTEMPT_ABANDONED = "attempt_abandoned"
    MATCH = "match"
    NO_MATCH = "no_match"
    CARDS_HIDDEN = "cards_hidden"
    WON = "won"


@dataclass(frozen=True)
class Event:
    """Something the player should be told about after a transition."""
    kind: EventKind
    coord: Optional[Coord] = None
    symbol: Optional[Symbol] = None
    error: Optional[PickError] = None


Transition = Tuple[GameState, List[Event]]


def check_pick(board: Board, coord: Coord) -> None:
    """Raises the PickError describing why coord cannot be picked, if any."""
    if not board.in_bounds(coord):
        raise OutOfRange()
    cell = board.at(*coord)
    if cell.matched:
        raise AlreadyMatched()
    if cell.revealed:
        raise AlreadyRevealed()


def is_valid_pick(board: Board, coord: Coord) -> bool:
    try:
        check_pick(board, coord)
    except PickError:
        return False
    return True


def apply_pick(state: GameState, coord: Coord) -> Transition:
    """
    Applies one pick to the game.

    First slot: a valid pick is revealed and the game waits for the second pick.
    Second slot: a valid, distinct pick is revealed, the move counter goes up by one
    and the game moves on to resolving. Any invalid pick goes through reject_pick.
    """
    if state.phase not in (Phase.AWAITING_FIRST_PICK, Phase.AWAITING_SECOND_PICK):
        raise ValueError(f"Cannot pick a card while {state.phase.value}")
    if state.phase is Phase.AWAITING_SECOND_PICK and coord == state.first:
        return reject_pick(state, DuplicatePick())
    try:
        check_pick(state.board, coord)
    except PickError as err:
        return reject_pick(state, err)

    board = state.board.reveal(coord)
    event = Event(EventKind.CARD_REVEALED, coord=coord, symbol=board.at(*coord).symbol)
    if state.phase is Phase.AWAITING_FIRST_PICK:
        logger.debug("first pick %s", coord)
        return state.with_phase(Phase.AWAITING_SECOND_PICK, board=board, first=coord), [event]
    logger.debug("second pick %s, move %d", coord, state.moves + 1)
    return (
        state.with_phase(Phase.RESOLVING, board=board, second=coord, moves=state.moves + 1),
        [event],
    )


def reject_pick(state: GameState, error: PickError) -> Transition:
    """
    Handles a pick that could not be made (including malformed input).
    In the first slot nothing changes; in the second slot the attempt is abandoned
    and the first card is hidden again.
    """
    events = [Event(EventKind.PICK_REJECTED, error=error)]
    if state.phase is Phase.AWAITING_FIRST_PICK:
        logger.debug("first pick rejected: %s", type(error).__name__)
        return state, events
    if state.phase is not Phase.AWAITING_SECOND_PICK or state.first is None:
        raise ValueError(f"Cannot reject a pick while {state.phase.value}")
    first = state.first
    logger.debug("second pick rejected: %s; hiding %s", type(error).__name__, first)
    events.append(Event(EventKind.ATTEMPT_ABANDONED, coord=first))
    return (
        state.with_phase(Phase.AWAITING_FIRST_PICK, board=state.board.hide(first), first=None),
        events,
    )


def _open_pair(state: GameState) -> Tuple[Coord, Coord]:
    if state.phase is not Phase.RESOLVING or state.first is None or state.second is None:
        raise ValueError(f"No pair to resolve while {state.phase.value}")
    return state.first, state.second


def is_pending_mismatch(state: GameState) -> bool:
    """True when two different cards are face up and wait for the player's acknowledgment."""
    if state.phase is not Phase.RESOLVING:
        return False
    first, second = _open_pair(state)
    return state.board.at(*first).symbol != state.board.at(*second).symbol


def resolve(state: GameState) -> Transition:
    """
    Compares the two open cards.
    A match is marked permanently (and may win the game); a mismatch leaves the state
    unchanged until hide_mismatch is called after the player has looked at the cards.
    """
    first, second = _open_pair(state)
    symbol = state.board.at(*first).symbol
    if symbol != state.board.at(*second).symbol:
        logger.debug("no match: %s %s", first, second)
        return state, [Event(EventKind.NO_MATCH)]

    board = state.board.mark_matched(first).mark_matched(second)
    pairs_found = state.pairs_found + 1
    events = [Event(EventKind.MATCH, symbol=symbol)]
    logger.debug("match %r at %s %s (%d/%d)", symbol, first, second, pairs_found, state.total_pairs)
    if pairs_found == state.total_pairs:
        events.append(Event(EventKind.WON))
        next_phase = Phase.WON
    else:
        next_phase = Phase.AWAITING_FIRST_PICK
    return (
        state.with_phase(next_phase, board=board, first=None, second=None, pairs_found=pairs_found),
        events,
    )


def hide_mismatch(state: GameState) -> Transition:
    """Turns a non-matching pair face down again and starts the next attempt."""
    if not is_pending_mismatch(state):
        raise ValueError("No mismatched pair to hide")
    first, second = _open_pair(state)
    board = state.board.hide(first).hide(second)
    return (
        state.with_phase(Phase.AWAITING_FIRST_PICK, board=board, first=None, second=None),
        [Event(EventKind.CARDS_HIDDEN)],
    )
