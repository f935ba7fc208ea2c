"""
Validation utilities for command-line values and the player name.
"""
import re
from typing import Any, Optional, Tuple


def validate_player_name(name: Any) -> Tuple[bool, Optional[str], str]:
    """
    Validate a player name for the score file.

    Args:
        name: The name to validate

    Returns:
        (is_valid, error_message, cleaned_name)
    """
    if not name or not isinstance(name, str):
        return False, "Name is required", ""

    trimmed = name.strip()

    if len(trimmed) == 0:
        return False, "Name cannot be empty", ""

    if len(trimmed) > 50:
        return False, "Name must be 50 characters or less", ""

    # The score file is "<name>:\t<length>" per line
    if re.search(r'[:\t\r\n]', trimmed):
        return False, "Name cannot contain colons, tabs or line breaks", ""

    if not trimmed.isprintable():
        return False, "Name can only contain printable characters", ""

    return True, None, trimmed


def validate_grid_size(size: Any) -> Tuple[bool, Optional[str], int]:
    """
    Validate a grid size (one side of the grid).

    Args:
        size: The grid size to validate

    Returns:
        (is_valid, error_message, corrected_value)
    """
    try:
        size = int(size)
    except (TypeError, ValueError):
        return False, "Grid size must be a number", 20

    if size < 5:
        return False, "Grid size must be at least 5", 5

    if size > 50:
        return False, "Grid size must be at most 50", 50

    return True, None, size


def validate_tick_interval(interval: Any) -> Tuple[bool, Optional[str], int]:
    """
    Validate the tick interval in milliseconds.

    Args:
        interval: Milliseconds between ticks

    Returns:
        (is_valid, error_message, corrected_value)
    """
    try:
        interval = int(interval)
    except (TypeError, ValueError):
        return False, "Tick interval must be a number", 75

    if interval < 10:
        return False, "Tick interval must be at least 10 ms", 10

    if interval > 1000:
        return False, "Tick interval must be at most 1000 ms", 1000

    return True, None, interval
