"""
Tests for the score file.
"""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from terminal.scores import ScoreBoard


class TestScoreBoard:
    """Tests for appending and reading scores."""

    def test_line_format(self):
        assert ScoreBoard.format_line("ada", 12) == "ada:\t12\n"

    def test_append_creates_file(self, tmp_path):
        board = ScoreBoard(tmp_path / "scores.txt")
        assert board.append_score("ada", 12)
        assert (tmp_path / "scores.txt").read_text() == "ada:\t12\n"

    def test_append_keeps_existing_lines(self, tmp_path):
        path = tmp_path / "scores.txt"
        path.write_text("bob:\t3\n")
        board = ScoreBoard(path)
        board.append_score("ada", 12)
        assert path.read_text() == "bob:\t3\nada:\t12\n"

    def test_append_creates_parent_dirs(self, tmp_path):
        board = ScoreBoard(tmp_path / "nested" / "scores.txt")
        assert board.append_score("ada", 1)
        assert board.load_scores() == [("ada", 1)]

    def test_write_failure_is_reported_not_raised(self, tmp_path):
        # A directory cannot be opened for appending
        board = ScoreBoard(tmp_path)
        assert board.append_score("ada", 12) is False

    def test_load_missing_file(self, tmp_path):
        assert ScoreBoard(tmp_path / "none.txt").load_scores() == []

    def test_load_skips_malformed_lines(self, tmp_path):
        path = tmp_path / "scores.txt"
        path.write_text("ada:\t12\nnonsense\n\neve:\tlots\nbob:\t3\n")
        assert ScoreBoard(path).load_scores() == [("ada", 12), ("bob", 3)]

    def test_names_written_as_utf8(self, tmp_path):
        path = tmp_path / "scores.txt"
        board = ScoreBoard(path)
        assert board.append_score("José", 4)
        assert path.read_bytes() == "José:\t4\n".encode("utf-8")
        assert board.load_scores() == [("José", 4)]

    def test_unencodable_name_is_reported_not_raised(self, tmp_path):
        board = ScoreBoard(tmp_path / "scores.txt")
        assert board.append_score("\ud800", 4) is False

    def test_load_skips_undecodable_lines(self, tmp_path):
        path = tmp_path / "scores.txt"
        path.write_bytes(b"ada:\t3\n\xff\xfe:\t9\n")
        assert ScoreBoard(path).load_scores() == [("ada", 3)]

    def test_top_scores_sorted(self, tmp_path):
        board = ScoreBoard(tmp_path / "scores.txt")
        for name, length in [("a", 3), ("b", 9), ("c", 5), ("d", 9)]:
            board.append_score(name, length)
        assert board.top_scores(limit=3) == [("b", 9), ("d", 9), ("c", 5)]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
