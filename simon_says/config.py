"""Config loader — YAML to dataclasses."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from simon_says.game import DEFAULT_ALPHABET, validate_alphabet


@dataclass
class GameConfig:
    alphabet: list[str] = field(default_factory=lambda: list(DEFAULT_ALPHABET))
    seed: int | None = None


@dataclass
class TimingConfig:
    round_delay: float = 1.0  # seconds before the next level is shown
    game_over_flash: float = 0.2


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)

    def validate(self) -> None:
        validate_alphabet(self.game.alphabet)
        for name in ("round_delay", "game_over_flash"):
            value = getattr(self.timing, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number of seconds, got {value!r}")
        if self.timing.round_delay < 0:
            raise ValueError(f"round_delay must not be negative, got {self.timing.round_delay}")
        if self.timing.game_over_flash < 0:
            raise ValueError(f"game_over_flash must not be negative, got {self.timing.game_over_flash}")


def load_config(path: Path) -> AppConfig:
    """Load config from YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    game = GameConfig(**{k: v for k, v in (raw.get("game") or {}).items()})
    timing = TimingConfig(**{k: v for k, v in (raw.get("timing") or {}).items()})

    cfg = AppConfig(game=game, timing=timing)
    cfg.validate()
    return cfg
