"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from random import Random

from core.counting import get_counting_system
from core.shoe import ShoeConfig
from core.training import TrainingOptions, TrainingSession


def _parse_bool(name: str, default: str) -> bool:
    """Parse a true/false environment variable."""
    return os.getenv(name, default).lower() == "true"


def _parse_seed() -> int | None:
    """Parse TRAINER_SEED; unset or empty means an unseeded shuffle."""
    seed = os.getenv("TRAINER_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class ShoeDefaults:
    """Default shoe configuration."""

    num_decks: int = field(default_factory=lambda: int(os.getenv("TRAINER_NUM_DECKS", "6")))
    penetration: float = field(
        default_factory=lambda: float(os.getenv("TRAINER_PENETRATION", "0.75"))
    )

    def shoe_config(self) -> ShoeConfig:
        """Build a validated shoe configuration."""
        return ShoeConfig(num_decks=self.num_decks, penetration=self.penetration)


@dataclass(frozen=True)
class TrainerConfig:
    """Count trainer configuration."""

    stand_on: int = field(default_factory=lambda: int(os.getenv("TRAINER_STAND_ON", "17")))
    ask_hand_total: bool = field(
        default_factory=lambda: _parse_bool("TRAINER_ASK_HAND_TOTAL", "false")
    )
    answer_min: int = field(default_factory=lambda: int(os.getenv("TRAINER_ANSWER_MIN", "-5")))
    answer_max: int = field(default_factory=lambda: int(os.getenv("TRAINER_ANSWER_MAX", "5")))
    counting_system: str = field(
        default_factory=lambda: os.getenv("TRAINER_COUNTING_SYSTEM", "hi-lo")
    )
    seed: int | None = field(default_factory=_parse_seed)

    def training_options(self, shoe: ShoeDefaults | None = None) -> TrainingOptions:
        """Build validated training options."""
        shoe = shoe or ShoeDefaults()
        return TrainingOptions(
            shoe=shoe.shoe_config(),
            stand_on=self.stand_on,
            ask_hand_total=self.ask_hand_total,
            answer_min=self.answer_min,
            answer_max=self.answer_max,
        )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    shoe: ShoeDefaults = field(default_factory=ShoeDefaults)
    trainer: TrainerConfig = field(default_factory=TrainerConfig)

    def training_options(self) -> TrainingOptions:
        """Build training options from the shoe and trainer sections."""
        return self.trainer.training_options(self.shoe)

    def create_session(self) -> TrainingSession:
        """Build a training session from this configuration."""
        rng = Random(self.trainer.seed) if self.trainer.seed is not None else None
        return TrainingSession(
            options=self.training_options(),
            system=get_counting_system(self.trainer.counting_system),
            rng=rng,
        )


# Global configuration instance
config = AppConfig()
