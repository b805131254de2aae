"""
Object interface to the Elo formula for two players.
"""

import logging
from typing import Dict

from .core.rating import (
    DEFAULT_K_FACTOR,
    RatingInput,
    RatingResult,
    compute_rating,
    scores_for_outcome,
)

logger = logging.getLogger(__name__)


class RatingCalculator:
    """
    Calculates new ratings for two players after a match.

    All values are computed when the calculator is created. A calculator
    never changes afterwards; recompute() returns a new one that shares
    the K-factor.
    """

    def __init__(
        self,
        rating_a: float,
        rating_b: float,
        score_a: float,
        score_b: float,
        k_factor: float = DEFAULT_K_FACTOR,
    ):
        """
        Initialize the calculator and run the rating update.

        Args:
            rating_a: Current rating of A
            rating_b: Current rating of B
            score_a: Score of A
            score_b: Score of B
            k_factor: K-factor used for this and every recomputed calculator
        """
        self._result = compute_rating(rating_a, rating_b, score_a, score_b, k_factor)
        self._k_factor = float(k_factor)
        self._inputs = RatingInput(
            rating_a=float(rating_a),
            rating_b=float(rating_b),
            score_a=float(score_a),
            score_b=float(score_b),
            k_factor=self._k_factor,
        )

    @classmethod
    def from_outcome(
        cls,
        rating_a: float,
        rating_b: float,
        outcome: float,
        k_factor: float = DEFAULT_K_FACTOR,
    ) -> "RatingCalculator":
        """
        Create a calculator from a single outcome seen from A's side.

        Args:
            rating_a: Current rating of A
            rating_b: Current rating of B
            outcome: Outcome of the match (0 for B wins, 0.5 for draw, 1 for A wins)
            k_factor: K-factor for Elo calculation

        Returns:
            A new RatingCalculator
        """
        score_a, score_b = scores_for_outcome(outcome)
        return cls(rating_a, rating_b, score_a, score_b, k_factor)

    def recompute(
        self,
        rating_a: float,
        rating_b: float,
        score_a: float,
        score_b: float,
    ) -> "RatingCalculator":
        """
        Run the rating update again for new match inputs.

        Returns:
            A new RatingCalculator with the same K-factor
        """
        logger.debug("Recomputing with k=%s", self._k_factor)
        return type(self)(rating_a, rating_b, score_a, score_b, self._k_factor)

    @property
    def k_factor(self) -> float:
        return self._k_factor

    @property
    def inputs(self) -> RatingInput:
        return self._inputs

    @property
    def result(self) -> RatingResult:
        return self._result

    def get_new_ratings(self) -> Dict[str, float]:
        """Return the new ratings as {"a": ..., "b": ...}."""
        return self._result.new_ratings()

    def get_diff_ratings(self) -> Dict[str, float]:
        """Return the rating deltas as {"a": ..., "b": ...}."""
        return self._result.diff_ratings()

    def get_expected_scores(self) -> Dict[str, float]:
        return {"a": self._result.expected_a, "b": self._result.expected_b}

    def __repr__(self) -> str:
        inputs = self._inputs
        return (
            f"RatingCalculator(rating_a={inputs.rating_a}, rating_b={inputs.rating_b}, "
            f"score_a={inputs.score_a}, score_b={inputs.score_b}, k_factor={inputs.k_factor})"
        )
