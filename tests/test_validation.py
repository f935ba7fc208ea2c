"""
Tests for command-line and player name validation.
"""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from terminal.validation import (
    validate_player_name,
    validate_grid_size,
    validate_tick_interval,
)


class TestValidatePlayerName:
    """Tests for player name validation."""

    def test_valid_name(self):
        """Test that valid names pass validation."""
        is_valid, error, name = validate_player_name("Ada")
        assert is_valid
        assert error is None
        assert name == "Ada"

    def test_surrounding_whitespace_trimmed(self):
        is_valid, error, name = validate_player_name("  Grace Hopper \n")
        assert is_valid
        assert name == "Grace Hopper"

    def test_empty_name_fails(self):
        """Test that empty names fail validation."""
        is_valid, error, name = validate_player_name("")
        assert not is_valid
        assert error is not None

    def test_none_name_fails(self):
        """Test that None names fail validation."""
        is_valid, error, name = validate_player_name(None)
        assert not is_valid
        assert error is not None

    def test_whitespace_only_fails(self):
        """Test that whitespace-only names fail."""
        is_valid, error, name = validate_player_name("   ")
        assert not is_valid

    def test_too_long_name_fails(self):
        """Test that names over 50 chars fail."""
        is_valid, error, name = validate_player_name("a" * 51)
        assert not is_valid
        assert "50" in error

    @pytest.mark.parametrize("raw", ["ann:1", "tab\there", "line\nbreak"])
    def test_score_separators_fail(self, raw):
        """Test that characters used by the score file are rejected."""
        is_valid, error, name = validate_player_name(raw)
        assert not is_valid

    def test_control_characters_fail(self):
        is_valid, error, name = validate_player_name("bell\x07")
        assert not is_valid


class TestValidateGridSize:
    """Tests for grid size validation."""

    def test_valid_grid_size(self):
        """Test that valid grid sizes pass."""
        is_valid, error, corrected = validate_grid_size(20)
        assert is_valid
        assert error is None
        assert corrected == 20

    def test_minimum_grid_size(self):
        """Test minimum grid size boundary."""
        is_valid, error, corrected = validate_grid_size(5)
        assert is_valid
        assert corrected == 5

    def test_maximum_grid_size(self):
        """Test maximum grid size boundary."""
        is_valid, error, corrected = validate_grid_size(50)
        assert is_valid
        assert corrected == 50

    def test_too_small_grid_size(self):
        """Test that grid size < 5 fails."""
        is_valid, error, corrected = validate_grid_size(4)
        assert not is_valid
        assert corrected == 5

    def test_too_large_grid_size(self):
        """Test that grid size > 50 fails."""
        is_valid, error, corrected = validate_grid_size(51)
        assert not is_valid
        assert corrected == 50

    def test_string_grid_size(self):
        """Test that string grid sizes are converted."""
        is_valid, error, corrected = validate_grid_size("10")
        assert is_valid
        assert corrected == 10

    def test_invalid_string_fails(self):
        """Test that non-numeric strings fail and fall back to the default."""
        is_valid, error, corrected = validate_grid_size("abc")
        assert not is_valid
        assert corrected == 20


class TestValidateTickInterval:
    """Tests for tick interval validation."""

    def test_default_interval(self):
        is_valid, error, corrected = validate_tick_interval(75)
        assert is_valid
        assert corrected == 75

    def test_too_fast(self):
        is_valid, error, corrected = validate_tick_interval(1)
        assert not is_valid
        assert corrected == 10

    def test_too_slow(self):
        is_valid, error, corrected = validate_tick_interval(5000)
        assert not is_valid
        assert corrected == 1000

    def test_not_a_number(self):
        is_valid, error, corrected = validate_tick_interval("fast")
        assert not is_valid
        assert corrected == 75


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
