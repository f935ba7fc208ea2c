"""Structured configuration for a snake game."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict


def _default_cell_probabilities():
    return {"empty": 0.90, "block": 0.02, "food": 0.08}


@dataclass
class GameConfig:
    width: int = 20
    height: int = 20
    tick_interval_ms: int = 75
    cell_probabilities: Dict[str, float] = field(default_factory=_default_cell_probabilities)

    # Food appears over time once the opening ticks have passed
    food_spawn_after_tick: int = 80
    food_spawn_chance: float = 0.05

    # tick_rate = max(floor, base - length // divisor)
    tick_rate_base: int = 6
    tick_rate_divisor: int = 6
    tick_rate_floor: int = 2

    initial_length: int = 1
    initial_speed: int = 1

    scores_file: str = "scores.txt"
    save_on_quit: bool = False

    def __post_init__(self):
        for name in ("width", "height", "tick_interval_ms", "tick_rate_divisor",
                     "tick_rate_floor", "initial_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if self.food_spawn_after_tick < 0:
            raise ValueError("food_spawn_after_tick cannot be negative")

        if not 0.0 <= self.food_spawn_chance <= 1.0:
            raise ValueError(f"food_spawn_chance must be in [0, 1], got {self.food_spawn_chance}")

        unknown = set(self.cell_probabilities) - set(_default_cell_probabilities())
        if unknown:
            raise ValueError(f"Unknown cell types: {sorted(unknown)}")

        for name, prob in self.cell_probabilities.items():
            if not 0.0 <= prob <= 1.0:
                raise ValueError(f"Probability for '{name}' must be in [0, 1], got {prob}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        values = {k: v for k, v in data.items() if k != "cell_probabilities"}
        return cls(
            cell_probabilities={**_default_cell_probabilities(), **data.get("cell_probabilities", {})},
            **values,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "tick_interval_ms": self.tick_interval_ms,
            "cell_probabilities": dict(self.cell_probabilities),
            "food_spawn_after_tick": self.food_spawn_after_tick,
            "food_spawn_chance": self.food_spawn_chance,
            "tick_rate_base": self.tick_rate_base,
            "tick_rate_divisor": self.tick_rate_divisor,
            "tick_rate_floor": self.tick_rate_floor,
            "initial_length": self.initial_length,
            "initial_speed": self.initial_speed,
            "scores_file": self.scores_file,
            "save_on_quit": self.save_on_quit,
        }
