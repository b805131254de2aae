"""
Core Elo rating formula.
"""

from .rating import (
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
    validate_k_factor,
)
