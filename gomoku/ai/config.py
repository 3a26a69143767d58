from dataclasses import dataclass
from enum import Enum


# Pattern scores (run length x open ends)
SCORE_FIVE = 100_000
SCORE_OPEN_FOUR = 10_000
SCORE_FOUR = 1_000
SCORE_OPEN_THREE = 500
SCORE_THREE = 100
SCORE_OPEN_TWO = 50
SCORE_TWO = 10
SCORE_OPEN_ONE = 1
# Centrality weight per step closer to the center
SCORE_CENTER = 3
# Move ordering weight for nearby stones
PROXIMITY_WEIGHT = 10
PROXIMITY_RANGE = 2
# Candidate cap when optimizations are on
MAX_CANDIDATES = 15
# Adjacent search distance for pruned move generation
VICINITY_RANGE = 2


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class SearchConfig:
    depth: int
    prune_moves: bool = False     # only cells near existing stones
    cap_candidates: bool = False  # at most MAX_CANDIDATES per node
    use_cache: bool = False       # transposition cache, cleared per best_move call

    @property
    def greedy(self) -> bool:
        """Depth 1 scores each move on its own instead of searching."""
        return self.depth <= 1


AI_LEVELS = {
    Difficulty.EASY: SearchConfig(depth=1),
    Difficulty.MEDIUM: SearchConfig(depth=2),
    Difficulty.HARD: SearchConfig(depth=3, prune_moves=True, cap_candidates=True, use_cache=True),
}
