"""
Tests for GameConfig.
"""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from games.config import GameConfig


class TestGameConfig:
    """Tests for defaults, validation and dict conversion."""

    def test_defaults(self):
        config = GameConfig()
        assert (config.width, config.height) == (20, 20)
        assert config.tick_interval_ms == 75
        assert config.cell_probabilities == {"empty": 0.90, "block": 0.02, "food": 0.08}
        assert config.food_spawn_after_tick == 80
        assert config.food_spawn_chance == 0.05
        assert (config.tick_rate_base, config.tick_rate_divisor, config.tick_rate_floor) == (6, 6, 2)
        assert config.save_on_quit is False

    def test_from_dict_merges_probabilities(self):
        config = GameConfig.from_dict({"width": 12, "cell_probabilities": {"block": 0.1}})
        assert config.width == 12
        assert config.height == 20
        assert config.cell_probabilities == {"empty": 0.90, "block": 0.1, "food": 0.08}

    def test_round_trip(self):
        config = GameConfig(width=8, height=9, save_on_quit=True)
        assert GameConfig.from_dict(config.to_dict()) == config

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError):
            GameConfig.from_dict({"colour": "green"})

    @pytest.mark.parametrize("overrides", [
        {"width": 0},
        {"height": -3},
        {"tick_interval_ms": 0},
        {"tick_rate_divisor": 0},
        {"food_spawn_chance": 1.5},
        {"food_spawn_after_tick": -1},
        {"cell_probabilities": {"empty": 2.0}},
        {"cell_probabilities": {"lava": 0.1}},
    ])
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ValueError):
            GameConfig(**overrides)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
