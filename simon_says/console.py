# simon_says/console.py
"""Simon Says — terminal front end for the sequence game.

Watch the sequence, repeat it! Each round adds one more step.
Type a color name or its first letter, one per line.

Usage:
    simon-says [--config config.yaml] [--seed 42] [-v]
"""

import argparse
import logging
import sys
import time
from collections.abc import Callable
from pathlib import Path

from simon_says.config import AppConfig, load_config
from simon_says.game import GameState, SequenceGame

logger = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")


class ConsoleSimon:
    """Drives a SequenceGame from a text stream and owns the round timing."""

    def __init__(
        self,
        config: AppConfig,
        stdin=sys.stdin,
        stdout=sys.stdout,
        sleep: Callable[[float], None] = time.sleep,
        choose: Callable[[tuple[str, ...]], str] | None = None,
    ):
        self.config = config
        self.stdin = stdin
        self.stdout = stdout
        self.sleep = sleep
        self.game = SequenceGame(
            alphabet=config.game.alphabet,
            choose=choose,
            seed=config.game.seed,
            on_level_advanced=self._on_level_advanced,
            on_input_accepted=self._on_input_accepted,
            on_round_complete=self._on_round_complete,
            on_game_over=self._on_game_over,
        )

    def _print(self, text: str = ""):
        print(text, file=self.stdout)

    def _read(self) -> str | None:
        """Next input line, or None on EOF."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def resolve(self, text: str) -> str | None:
        """Map a typed word or unique prefix to an alphabet symbol."""
        text = text.lower()
        if not text:
            return None
        symbols = self.game.alphabet()
        for s in symbols:
            if s.lower() == text:
                return s
        matches = [s for s in symbols if s.lower().startswith(text)]
        if len(matches) == 1:
            return matches[0]
        return None

    # ── callbacks ────────────────────────────────────────────────────

    def _on_level_advanced(self, level: int, symbol: str):
        self._print(f"Level {level}")
        self._print("WATCH: " + " ".join(self.game.sequence_so_far()))

    def _on_input_accepted(self, symbol: str):
        done = len(self.game.input_so_far())
        total = len(self.game.sequence_so_far())
        self._print(f"  {symbol} ({done}/{total})")

    def _on_round_complete(self, level: int):
        self._print(f"Round {level} complete!")

    def _on_game_over(self):
        self._print("*** GAME OVER ***")
        self.sleep(self.config.timing.game_over_flash)
        self._print(f"It was {self.game.expected_symbol()}. Best: {self.game.best_level()}")
        self._print("Game Over, Press Enter to Restart (q to quit)")

    # ── loop ─────────────────────────────────────────────────────────

    def play(self) -> int:
        """Run until the player quits or input ends. Returns the best level."""
        self._print("SIMON SAYS! Symbols: " + ", ".join(self.game.alphabet()))
        self._print("Press Enter to start (q to quit)")
        line = self._read()
        if line is None or line.lower() in QUIT_WORDS:
            return self.game.best_level()
        self.game.start()

        while True:
            state = self.game.current_state()

            if state is GameState.ROUND_TRANSITION:
                self.sleep(self.config.timing.round_delay)
                self.game.advance_round()
                continue

            line = self._read()
            if line is None:
                break

            if state is GameState.GAME_OVER:
                if line.lower() in QUIT_WORDS:
                    break
                self.game.start()
                continue

            # a symbol named like a quit word takes precedence
            symbol = self.resolve(line)
            if symbol is None and line.lower() in QUIT_WORDS:
                break
            if symbol is None:
                self._print(f"Unknown choice {line!r}. Type one of: {', '.join(self.game.alphabet())}")
                continue
            self.game.submit(symbol)

        logger.debug("leaving loop: %r", self.game)
        return self.game.best_level()


def main():
    parser = argparse.ArgumentParser(description="Simon Says memory game")
    parser.add_argument("--config", default=None, help="Config file path")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (overrides config)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.config is None:
        config = AppConfig()
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Config not found: {config_path}")
            sys.exit(1)
        config = load_config(config_path)

    if args.seed is not None:
        config.game.seed = args.seed

    app = ConsoleSimon(config)
    try:
        best = app.play()
    except KeyboardInterrupt:
        best = app.game.best_level()
        print()
    print(f"Bye! Best: {best} rounds")


if __name__ == "__main__":
    main()
