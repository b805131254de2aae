"""
Elo Rating - pairwise Elo rating updates for two competitors.
"""

from .core import (
    DEFAULT_K_FACTOR,
    DRAW,
    LOST,
    WIN,
    ExpectedScores,
    RatingDelta,
    RatingInput,
    RatingResult,
    compute_rating,
    expected_score,
    expected_scores,
    rating_delta,
    scores_for_outcome,
    update_elo,
)
from .calculator import RatingCalculator

__all__ = [
    "RatingCalculator",
    "compute_rating",
    "expected_score",
    "expected_scores",
    "rating_delta",
    "update_elo",
    "scores_for_outcome",
    "RatingInput",
    "ExpectedScores",
    "RatingDelta",
    "RatingResult",
    "WIN",
    "DRAW",
    "LOST",
    "DEFAULT_K_FACTOR",
]
