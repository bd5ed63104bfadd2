from dataclasses import dataclass


@dataclass
class Score:
    """Running score for the current game plus the best seen this process."""
    score: int = 0
    best_score: int = 0

    def add(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"Score can only grow, got {points}")
        self.score += points

    def record_best(self) -> bool:
        if self.score > self.best_score:
            self.best_score = self.score
            return True
        return False

    def reset(self) -> None:
        self.score = 0
