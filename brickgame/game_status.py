"""Score and level bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass

MAX_LEVEL = 10
MAX_AVAILABLE_COMPLETE_LINES_COUNT = 4
SCORE_PER_LEVEL = 600
SCORE_FOR_LINES = (100, 300, 700, 1500)


@dataclass
class GameStatus:
    """The player's score and current level."""

    score: int = 0
    level: int = 0

    def reset(self) -> None:
        """Start again from zero score at level zero."""
        self.score = 0
        self.level = 0

    def add_score(self, complete_lines_count: int) -> None:
        """Award points for clearing lines; counts below one award nothing."""
        if complete_lines_count <= 0:
            return
        lines = min(complete_lines_count, MAX_AVAILABLE_COMPLETE_LINES_COUNT)
        self.score += SCORE_FOR_LINES[lines - 1]

    def update_level(self) -> None:
        """Derive the level from the score, capped at the maximum."""
        self.level = min(self.score // SCORE_PER_LEVEL, MAX_LEVEL)