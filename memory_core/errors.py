from __future__ import annotations


class ConfigurationError(ValueError):
    """The requested board cannot be built (bad dimensions or too few symbols)."""


class PickError(ValueError):
    """A single pick the player cannot make. Recoverable: the player is re-prompted."""

    message = "Invalid pick."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class MalformedInput(PickError):
    message = "Invalid input. Please enter two numbers."


class OutOfRange(PickError):
    message = "Coordinates out of range. Try again."


class AlreadyMatched(PickError):
    message = "That card is already matched. Pick another."


class AlreadyRevealed(PickError):
    message = "That card is already revealed this turn. Pick another."


class DuplicatePick(PickError):
    # Only raised for the second slot.
    message = "You picked the same card twice. Try again."
