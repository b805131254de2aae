"""
Core implementation of the Elo rating formula.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Dict, Tuple

import numpy as np

logger = logging.getLogger(__name__)

# Conventional match outcomes, seen from one player's side
WIN = 1.0
DRAW = 0.5
LOST = 0.0

DEFAULT_K_FACTOR = 16.0


@dataclass(frozen=True)
class RatingInput:
    """The inputs of a single two-player rating update."""

    rating_a: float
    rating_b: float
    score_a: float
    score_b: float
    k_factor: float = DEFAULT_K_FACTOR


@dataclass(frozen=True)
class ExpectedScores:
    """Expected scores of both players, each between 0 and 1."""

    expected_a: float
    expected_b: float


@dataclass(frozen=True)
class RatingDelta:
    """Signed rating adjustments of both players."""

    delta_a: float
    delta_b: float


@dataclass(frozen=True)
class RatingResult:
    """
    Everything derived from a RatingInput.

    new_rating_x is always rating_x + delta_x.
    """

    new_rating_a: float
    new_rating_b: float
    delta_a: float
    delta_b: float
    expected_a: float
    expected_b: float

    @property
    def expected(self) -> ExpectedScores:
        return ExpectedScores(self.expected_a, self.expected_b)

    @property
    def delta(self) -> RatingDelta:
        return RatingDelta(self.delta_a, self.delta_b)

    def new_ratings(self) -> Dict[str, float]:
        return {"a": self.new_rating_a, "b": self.new_rating_b}

    def diff_ratings(self) -> Dict[str, float]:
        return {"a": self.delta_a, "b": self.delta_b}

    def as_dict(self) -> Dict[str, float]:
        return {
            "new_rating_a": self.new_rating_a,
            "new_rating_b": self.new_rating_b,
            "delta_a": self.delta_a,
            "delta_b": self.delta_b,
            "expected_a": self.expected_a,
            "expected_b": self.expected_b,
        }


def _as_finite(name: str, value) -> float:
    """
    Convert a real number (builtin or numpy scalar) to a finite float.

    Args:
        name: Argument name used in the error message
        value: Value to convert

    Returns:
        The value as a builtin float

    Raises:
        TypeError: If the value is not a real number
        ValueError: If the value is NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.floating, np.integer)):
        logger.debug("Rejected %s=%r: not a real number", name, value)
        raise TypeError(f"{name} must be a real number")

    try:
        as_float = float(value)
    except OverflowError as exc:
        logger.debug("Rejected %s=%r: too large for a float", name, value)
        raise ValueError(f"{name} must be a finite number") from exc

    if not np.isfinite(as_float):
        logger.debug("Rejected %s=%r: not finite", name, value)
        raise ValueError(f"{name} must be a finite number")

    return as_float


def validate_k_factor(k_factor) -> float:
    """
    Check that a K-factor is a finite, positive number.

    Returns:
        The K-factor as a float
    """
    k_factor = _as_finite("k_factor", k_factor)
    if k_factor <= 0:
        logger.debug("Rejected k_factor=%r: not positive", k_factor)
        raise ValueError("k_factor must be positive")
    return k_factor


def expected_score(rating_a: float, rating_b: float) -> float:
    """
    Calculate the expected score for player A against player B.

    Args:
        rating_a: Elo rating of player A
        rating_b: Elo rating of player B

    Returns:
        Expected score for player A (between 0 and 1)
    """
    exponent = (rating_b - rating_a) / 400.0
    if exponent > 0:
        # Same curve, rearranged so huge gaps underflow to 0 instead of overflowing
        odds = math.pow(10, -exponent)
        return odds / (1.0 + odds)
    return 1.0 / (1.0 + math.pow(10, exponent))


def expected_scores(rating_a: float, rating_b: float) -> ExpectedScores:
    """
    Calculate the expected scores of both players.

    Each side uses its own rating difference, so equal ratings give
    exactly 0.5 for both.
    """
    return ExpectedScores(
        expected_a=expected_score(rating_a, rating_b),
        expected_b=expected_score(rating_b, rating_a),
    )


def rating_delta(expected: float, actual: float, k_factor: float = DEFAULT_K_FACTOR) -> float:
    """
    Calculate the rating adjustment for one player.

    Args:
        expected: Expected score (between 0 and 1)
        actual: Actual score (LOST, DRAW or WIN by convention)
        k_factor: K-factor (determines how much ratings change)

    Returns:
        Signed rating adjustment, neither clamped nor rounded
    """
    return k_factor * (actual - expected)


def update_elo(rating: float, expected: float, actual: float, k_factor: float = DEFAULT_K_FACTOR) -> float:
    """
    Update an Elo rating based on the expected and actual outcomes.

    Args:
        rating: Current Elo rating
        expected: Expected outcome (between 0 and 1)
        actual: Actual outcome (0 for loss, 0.5 for draw, 1 for win)
        k_factor: K-factor for Elo calculation

    Returns:
        Updated Elo rating
    """
    return rating + rating_delta(expected, actual, k_factor)


def scores_for_outcome(outcome: float) -> Tuple[float, float]:
    """
    Split an outcome seen from player A's side into both players' scores.

    Args:
        outcome: Outcome for A (0 for B wins, 0.5 for draw, 1 for A wins)

    Returns:
        Tuple of (score for A, score for B)
    """
    outcome = _as_finite("outcome", outcome)
    return outcome, 1.0 - outcome


def compute_rating(
    rating_a: float,
    rating_b: float,
    score_a: float,
    score_b: float,
    k_factor: float = DEFAULT_K_FACTOR,
) -> RatingResult:
    """
    Compute the Elo update for a match between player A and player B.

    Args:
        rating_a: Current rating of A
        rating_b: Current rating of B
        score_a: Score of A (WIN, DRAW or LOST by convention)
        score_b: Score of B
        k_factor: K-factor, must be positive

    Returns:
        RatingResult with expected scores, deltas and new ratings

    Raises:
        TypeError: If an argument is not a real number
        ValueError: If an argument is not finite or k_factor is not positive
    """
    rating_a = _as_finite("rating_a", rating_a)
    rating_b = _as_finite("rating_b", rating_b)
    score_a = _as_finite("score_a", score_a)
    score_b = _as_finite("score_b", score_b)
    k_factor = validate_k_factor(k_factor)

    expected = expected_scores(rating_a, rating_b)
    delta_a = rating_delta(expected.expected_a, score_a, k_factor)
    delta_b = rating_delta(expected.expected_b, score_b, k_factor)

    result = RatingResult(
        new_rating_a=rating_a + delta_a,
        new_rating_b=rating_b + delta_b,
        delta_a=delta_a,
        delta_b=delta_b,
        expected_a=expected.expected_a,
        expected_b=expected.expected_b,
    )
    logger.debug(
        "Elo update %.2f vs %.2f (scores %s/%s, k=%s): %+.2f / %+.2f",
        rating_a, rating_b, score_a, score_b, k_factor, delta_a, delta_b,
    )
    return result
