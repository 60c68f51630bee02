"""Sequence game core — generates the pattern and verifies the player's input.

No timers, no I/O. The presentation layer reacts to the callbacks and
decides when to call advance_round() after a round is complete.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from enum import Enum

from simon_says.errors import InvalidStateError, InvalidSymbolError

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET = ("red", "blue", "green", "yellow")
ALPHABET_SIZE = 4


class GameState(Enum):
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    ROUND_TRANSITION = "round_transition"
    GAME_OVER = "game_over"


def validate_alphabet(alphabet: Sequence[str]) -> tuple[str, ...]:
    """Return the alphabet as a tuple, or raise ValueError if it is unusable."""
    if isinstance(alphabet, str) or not isinstance(alphabet, (list, tuple)):
        raise ValueError(f"alphabet must be a list of symbols, got {alphabet!r}")
    symbols = tuple(alphabet)
    for s in symbols:
        if not isinstance(s, str) or not s:
            raise ValueError(f"alphabet symbols must be non-empty strings, got {s!r}")
    if len(symbols) != ALPHABET_SIZE:
        raise ValueError(f"alphabet must have {ALPHABET_SIZE} symbols, got {len(symbols)}")
    if len(set(symbols)) != len(symbols):
        raise ValueError(f"alphabet has duplicate symbols: {list(symbols)}")
    return symbols


class SequenceGame:
    """One independent game: sequence, input buffer, level and state."""

    def __init__(
        self,
        alphabet: Sequence[str] = DEFAULT_ALPHABET,
        choose: Callable[[tuple[str, ...]], str] | None = None,
        seed: int | None = None,
        on_level_advanced: Callable[[int, str], None] | None = None,
        on_input_accepted: Callable[[str], None] | None = None,
        on_round_complete: Callable[[int], None] | None = None,
        on_game_over: Callable[[], None] | None = None,
    ):
        self._alphabet = validate_alphabet(alphabet)
        self._choose = choose or random.Random(seed).choice
        self.on_level_advanced = on_level_advanced
        self.on_input_accepted = on_input_accepted
        self.on_round_complete = on_round_complete
        self.on_game_over = on_game_over

        self._sequence: list[str] = []
        self._input: list[str] = []
        self._level = 0
        self._best = 0
        self._state = GameState.IDLE

    # ── operations ───────────────────────────────────────────────────

    def start(self) -> None:
        """Begin a new game from Idle or GameOver; the first symbol is drawn immediately."""
        if self._state not in (GameState.IDLE, GameState.GAME_OVER):
            raise InvalidStateError("start", self._state)
        symbol = self._draw()
        self._clear()
        logger.debug("game started")
        self._append(symbol)

    def submit(self, symbol: str) -> None:
        """Record one player choice and check it against the sequence.

        A wrong symbol ends the game through on_game_over; it is not an
        error. Sequence and input are left as they were for inspection.
        """
        if self._state is not GameState.AWAITING_INPUT:
            raise InvalidStateError("submit", self._state)
        if symbol not in self._alphabet:
            raise InvalidSymbolError(symbol, self._alphabet)

        self._input.append(symbol)
        pos = len(self._input) - 1

        if symbol != self._sequence[pos]:
            self._state = GameState.GAME_OVER
            logger.info(
                "game over at level %d: got %r at position %d, expected %r",
                self._level, symbol, pos, self._sequence[pos],
            )
            if self.on_game_over:
                self.on_game_over()
            return

        if len(self._input) < len(self._sequence):
            if self.on_input_accepted:
                self.on_input_accepted(symbol)
            return

        # Round complete
        self._state = GameState.ROUND_TRANSITION
        self._best = max(self._best, self._level)
        logger.debug("round %d complete", self._level)
        if self.on_round_complete:
            self.on_round_complete(self._level)

    def advance_round(self) -> None:
        """Move to the next level after a completed round."""
        if self._state is not GameState.ROUND_TRANSITION:
            raise InvalidStateError("advance_round", self._state)
        self._append(self._draw())

    def reset(self) -> None:
        """Back to Idle from any state."""
        self._clear()
        self._state = GameState.IDLE
        logger.debug("game reset")

    # ── queries ──────────────────────────────────────────────────────

    def current_level(self) -> int:
        return self._level

    def current_state(self) -> GameState:
        return self._state

    def sequence_so_far(self) -> tuple[str, ...]:
        return tuple(self._sequence)

    def input_so_far(self) -> tuple[str, ...]:
        return tuple(self._input)

    def alphabet(self) -> tuple[str, ...]:
        return self._alphabet

    def best_level(self) -> int:
        """Most rounds completed in a single game by this instance."""
        return self._best

    def expected_symbol(self) -> str | None:
        """Symbol the next submit must match, or the one missed after a game over."""
        if self._state is GameState.AWAITING_INPUT:
            return self._sequence[len(self._input)]
        if self._state is GameState.GAME_OVER:
            return self._sequence[len(self._input) - 1]
        return None

    # ── internals ────────────────────────────────────────────────────

    def _clear(self) -> None:
        self._sequence = []
        self._input = []
        self._level = 0

    def _draw(self) -> str:
        symbol = self._choose(self._alphabet)
        if symbol not in self._alphabet:
            raise InvalidSymbolError(symbol, self._alphabet)
        return symbol

    def _append(self, symbol: str) -> None:
        self._input = []
        self._level += 1
        self._sequence.append(symbol)
        self._state = GameState.AWAITING_INPUT
        logger.debug("level %d: added %r", self._level, symbol)
        if self.on_level_advanced:
            self.on_level_advanced(self._level, symbol)

    def __repr__(self) -> str:
        return (
            f"SequenceGame(state={self._state.name}, level={self._level}, "
            f"input={len(self._input)}/{len(self._sequence)}, best={self._best})"
        )
