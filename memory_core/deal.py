from __future__ import annotations

import logging
import random
import string
from typing import List, MutableSequence, Optional, TypeVar

from .board import Board, Symbol
from .config import BoardConfig

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Uppercase, then lowercase, then digits: 62 distinct symbols.
SYMBOL_POOL: str = string.ascii_uppercase + string.ascii_lowercase + string.digits


def symbol_pool() -> List[Symbol]:
    """Returns the ordered symbol alphabet cards are drawn from."""
    return list(SYMBOL_POOL)


def fisher_yates_shuffle(items: MutableSequence[T], rng: random.Random) -> None:
    """
    Shuffles items in place with the Fisher-Yates algorithm.
    For i from len-1 down to 1, swap item i with an item at a uniform index in [0, i].
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def paired_symbols(pair_count: int) -> List[Symbol]:
    """The first pair_count pool symbols, each twice, unshuffled."""
    pool = symbol_pool()
    deck: List[Symbol] = []
    for symbol in pool[:pair_count]:
        deck.extend((symbol, symbol))
    return deck


def deal_board(
    config: BoardConfig,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Board:
    """
    Creates a shuffled board for the given dimensions.
    Raises ConfigurationError before building anything when the alphabet is too small.
    """
    config.check_alphabet(len(SYMBOL_POOL))
    if rng is None:
        rng = random.Random(seed)
    deck = paired_symbols(config.pair_count)
    fisher_yates_shuffle(deck, rng)
    logger.debug("dealt %dx%d board with %d pairs", config.rows, config.cols, config.pair_count)
    return Board.from_symbols(config.rows, config.cols, deck)
