"""
Score file storage.

File format (append-only, one game per line):
    <player_name>:\t<final_length>
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class ScoreBoard:
    """Appends and reads back finished-game scores."""

    def __init__(self, path="scores.txt"):
        """
        Args:
            path: Score file location (default: "scores.txt")
        """
        self.path = Path(path)

    @staticmethod
    def format_line(player_name: str, length: int) -> str:
        return f"{player_name}:\t{length}\n"

    def append_score(self, player_name: str, length: int) -> bool:
        """
        Append one score line.

        Write failures are logged and reported through the return value;
        they never raise.

        Returns:
            True if the line was written
        """
        line = self.format_line(player_name, length)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except (OSError, UnicodeError) as e:
            logger.error(f"Error saving score to {self.path}: {e}")
            return False

        logger.info(f"Saved score {length} for {player_name} to {self.path}")
        return True

    def load_scores(self) -> List[Tuple[str, int]]:
        """
        Load all scores in file order.

        Malformed lines are skipped with a warning.
        """
        if not self.path.exists():
            return []

        scores = []
        with open(self.path, "rb") as f:
            for line_no, raw in enumerate(f, start=1):
                if not raw.strip():
                    continue
                try:
                    # UnicodeDecodeError is a ValueError
                    line = raw.decode("utf-8").rstrip("\r\n")
                    name, sep, value = line.rpartition(":\t")
                    if not sep:
                        raise ValueError("missing separator")
                    scores.append((name, int(value)))
                except ValueError as e:
                    logger.warning(f"Skipping malformed score line {line_no} in {self.path}: {e}")

        return scores

    def top_scores(self, limit: Optional[int] = 10) -> List[Tuple[str, int]]:
        """Best scores first. Ties keep file order."""
        ranked = sorted(self.load_scores(), key=lambda entry: entry[1], reverse=True)
        if limit is not None:
            ranked = ranked[:limit]
        return ranked
