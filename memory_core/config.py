from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

DEFAULT_ROWS = 4
DEFAULT_COLS = 4


@dataclass(frozen=True)
class BoardConfig:
    """Grid dimensions for one game. Validated once, on construction."""
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError(
                f"Board dimensions must be positive (got {self.rows}x{self.cols})."
            )
        if (self.rows * self.cols) % 2 != 0:
            raise ConfigurationError(
                f"rows * cols must be even (pairs); got {self.rows}x{self.cols}."
            )

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    @property
    def pair_count(self) -> int:
        return self.cell_count // 2

    def check_alphabet(self, alphabet_size: int) -> None:
        """Raises ConfigurationError when the board needs more distinct symbols than exist."""
        if self.pair_count > alphabet_size:
            raise ConfigurationError(
                f"Not enough unique symbols to create pairs: {self.pair_count} pairs needed, "
                f"{alphabet_size} symbols available. Reduce board size."
            )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer (got {raw!r}).") from None


def config_from_env(rows: Optional[int] = None, cols: Optional[int] = None) -> BoardConfig:
    """Builds a BoardConfig; explicit values win over MEMORY_MATCH_ROWS / MEMORY_MATCH_COLS."""
    if rows is None:
        rows = _env_int("MEMORY_MATCH_ROWS", DEFAULT_ROWS)
    if cols is None:
        cols = _env_int("MEMORY_MATCH_COLS", DEFAULT_COLS)
    return BoardConfig(rows=rows, cols=cols)
