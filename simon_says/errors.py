"""Errors raised when the game is driven incorrectly."""


class SimonError(Exception):
    """Base class for game misuse errors."""


class InvalidStateError(SimonError):
    """An operation was called in a state where it is not defined."""

    def __init__(self, operation: str, state):
        self.operation = operation
        self.state = state
        super().__init__(f"{operation}() not allowed in state {state.name}")


class InvalidSymbolError(SimonError, ValueError):
    """A symbol outside the configured alphabet."""

    def __init__(self, symbol, alphabet: tuple[str, ...]):
        self.symbol = symbol
        self.alphabet = alphabet
        super().__init__(f"unknown symbol {symbol!r}, expected one of {', '.join(alphabet)}")
