from __future__ import annotations

# Facade module that re-exports Memory Match core functionality.
# Tests and the console entry point import from here.
# Single-responsibility modules live under memory_core/*.

# Works both as part of a parent package and as a top-level module.
try:
    from .memory_core.board import Board, Cell, Coord, Symbol  # type: ignore
    from .memory_core.config import BoardConfig, config_from_env  # type: ignore
    from .memory_core.console import Console, format_elapsed, parse_pick, render_board  # type: ignore
    from .memory_core.deal import (  # type: ignore
        SYMBOL_POOL,
        deal_board,
        fisher_yates_shuffle,
        paired_symbols,
        symbol_pool,
    )
    from .memory_core.errors import (  # type: ignore
        AlreadyMatched,
        AlreadyRevealed,
        ConfigurationError,
        DuplicatePick,
        MalformedInput,
        OutOfRange,
        PickError,
    )
    from .memory_core.state import GameState, Phase, new_game  # type: ignore
    from .memory_core.turns import (  # type: ignore
        Event,
        EventKind,
        apply_pick,
        check_pick,
        hide_mismatch,
        is_pending_mismatch,
        is_valid_pick,
        reject_pick,
        resolve,
    )
    from .memory_core.cli import main as _main, play  # type: ignore
except ImportError:
    from memory_core.board import Board, Cell, Coord, Symbol  # type: ignore
    from memory_core.config import BoardConfig, config_from_env  # type: ignore
    from memory_core.console import Console, format_elapsed, parse_pick, render_board  # type: ignore
    from memory_core.deal import (  # type: ignore
        SYMBOL_POOL,
        deal_board,
        fisher_yates_shuffle,
        paired_symbols,
        symbol_pool,
    )
    from memory_core.errors import (  # type: ignore
        AlreadyMatched,
        AlreadyRevealed,
        ConfigurationError,
        DuplicatePick,
        MalformedInput,
        OutOfRange,
        PickError,
    )
    from memory_core.state import GameState, Phase, new_game  # type: ignore
    from memory_core.turns import (  # type: ignore
        Event,
        EventKind,
        apply_pick,
        check_pick,
        hide_mismatch,
        is_pending_mismatch,
        is_valid_pick,
        reject_pick,
        resolve,
    )
    from memory_core.cli import main as _main, play  # type: ignore


def main() -> int:
    # CLI driver delegated to memory_core.cli
    return _main()


if __name__ == '__main__':
    raise SystemExit(main())
