"""The Elo rating system, generalized to any number of competitors"""
import logging
import math
from typing import Sequence, Tuple
import numpy as np
from nelo.core.base import Player, ValidationError
from nelo.utils.data_utils import lerp, normalize, quantize
from nelo.utils.math_utils import base_to_alpha, sigmoid, sigmoid_scalar

logger = logging.getLogger(__name__)


class Elo:
    """
    Implements the rating system described by Arpad Elo.

    Ratings are compared on a logistic curve of width `base` to calculate an expected score in [0, 1].
    That is compared to the normalized actual score and scaled by each competitor's own K-factor.
    With more than two competitors everyone is sorted by score and rated as if they played a match
    against the competitor who finished just ahead of them and the one just behind them.

    Instances are immutable, DEFAULT is the usual 400 point spread.
    """

    __slots__ = ('_base', '_alpha')

    def __init__(self, base: float = 400.0):
        """
        Parameters:
            base (float, optional): The rating difference which gives the stronger competitor 10-to-1 odds
                of winning. Leagues wanting a smaller or larger point spread can adjust it. Defaults to 400.
        """
        if not (math.isfinite(base) and base > 0.0):
            raise ValidationError(f'base must be a positive finite number, got {base!r}')
        self._base = float(base)
        self._alpha = base_to_alpha(self._base)

    @property
    def base(self) -> float:
        return self._base

    @property
    def alpha(self) -> float:
        return self._alpha

    def __eq__(self, other):
        if not isinstance(other, Elo):
            return NotImplemented
        return self._base == other._base

    def __hash__(self):
        return hash((Elo, self._base))

    def __repr__(self):
        return f'Elo(base={self._base!r})'

    def predict(self, rating_a, rating_b):
        """
        The expected score of competitor a against competitor b.

        Parameters:
            rating_a: rating of the first competitor, a float or an array of ratings
            rating_b: rating of the second competitor, same shape as rating_a

        Returns:
            float or np.ndarray: probability of a beating b, with draws counting as half a win
        """
        if np.ndim(rating_a) == 0 and np.ndim(rating_b) == 0:
            return sigmoid_scalar(self._alpha * (float(rating_a) - float(rating_b)))
        diff = np.asarray(rating_a, dtype=np.float64) - np.asarray(rating_b, dtype=np.float64)
        return sigmoid(self._alpha * diff)

    def calculate(self, ratings, k_factors, normalized_scores) -> np.ndarray:
        """
        Calculate new ratings from prior ratings, K-factors and normalized scores.

        Parameters:
            ratings: current rating of each competitor
            k_factors: K-factor of each competitor
            normalized_scores: result of each competitor in [0, 1], 1 for the winner and 0 for last place

        Returns:
            np.ndarray: new ratings in the same order as the inputs

        Raises:
            ValidationError: if the three sequences are not one dimensional and the same length
        """
        ratings = np.asarray(ratings, dtype=np.float64)
        k_factors = np.asarray(k_factors, dtype=np.float64)
        scores = np.asarray(normalized_scores, dtype=np.float64)

        if ratings.ndim != 1 or k_factors.ndim != 1 or scores.ndim != 1:
            raise ValidationError('ratings, k_factors, and normalized_scores should be one dimensional sequences')
        num_competitors = ratings.shape[0]

        if num_competitors != k_factors.shape[0] or num_competitors != scores.shape[0]:
            logger.debug(
                'rejected lengths ratings=%d k_factors=%d scores=%d',
                num_competitors,
                k_factors.shape[0],
                scores.shape[0],
            )
            raise ValidationError('ratings, k_factors, and normalized_scores should be the same length')

        # no competitors means no results and no opponent means no rating change
        if num_competitors < 2:
            return ratings.copy()

        logger.debug('rating %d competitors with base %s', num_competitors, self._base)

        # order[i] is the input index of the competitor in position i of the standings
        order = np.argsort(scores, kind='stable')
        r = ratings[order]
        k = k_factors[order]
        s = scores[order]

        # each adjacent pair in the standings is one matchup
        probs_lower = sigmoid(self._alpha * (r[:-1] - r[1:]))
        probs_upper = sigmoid(self._alpha * (r[1:] - r[:-1]))
        diffs = np.zeros(num_competitors, dtype=np.float64)
        diffs[:-1] += k[:-1] * (s[:-1] - probs_lower)
        diffs[1:] += k[1:] * (s[1:] - probs_upper)

        new_ratings = ratings.copy()
        new_ratings[order] += diffs
        return new_ratings

    def h2h(self, players: Sequence[Player], scores: Sequence[float]) -> Tuple[float, float]:
        """
        New ratings for a head-to-head match, one player or team against another.
        Scores need not be normalized, the higher score wins and equal scores are a draw.
        """
        if len(players) != 2 or len(scores) != 2:
            raise ValidationError(f'h2h needs exactly 2 players and 2 scores, got {len(players)} and {len(scores)}')
        new_ratings = self.ffa(players, scores)
        return float(new_ratings[0]), float(new_ratings[1])

    def place(self, players: Sequence[Player]) -> np.ndarray:
        """
        New ratings for a match decided by finishing order.
        players[0] finished first, players[1] second, and so on.
        """
        scores = np.zeros(len(players), dtype=np.float64)
        lerp(scores)
        return self.ffa(players, scores)

    def ffa(self, players: Sequence[Player], scores) -> np.ndarray:
        """
        New ratings for a free-for-all where the highest score wins.
        Scores are normalized between the lowest and the highest, so first place gets 1, last place gets 0
        and the rest land in between relative to where their score sat.

        Raises:
            ValidationError: if the number of scores doesn't match the number of players
        """
        ratings, k_factors = _unpack(players)
        normalized_scores = np.array(scores, dtype=np.float64)
        normalize(normalized_scores)
        return self.calculate(ratings, k_factors, normalized_scores)

    def golf(self, players: Sequence[Player], scores) -> np.ndarray:
        """
        New ratings for a free-for-all where the lowest score wins.

        Raises:
            ValidationError: if the number of scores doesn't match the number of players
        """
        ratings, k_factors = _unpack(players)
        normalized_scores = np.array(scores, dtype=np.float64)
        normalize(normalized_scores)
        # lower scores are better so flip them
        normalized_scores = 1.0 - normalized_scores
        return self.calculate(ratings, k_factors, normalized_scores)

    def race(self, players: Sequence[Player], durations, step) -> np.ndarray:
        """
        New ratings for a race. Times are counted in whole steps, so times within
        the same step (e.g. the same hundredth of a second) are a tie.

        Parameters:
            players: the racers
            durations: elapsed time of each racer, as timedeltas or plain numbers
            step: resolution of the timer, in the same type as durations

        Raises:
            ValidationError: if the number of durations doesn't match the number of players or step isn't positive
        """
        return self.golf(players, quantize(durations, step))


def _unpack(players: Sequence[Player]):
    """split players into parallel arrays of ratings and K-factors"""
    ratings = np.array([player.rating() for player in players], dtype=np.float64)
    k_factors = np.array([player.k_factor() for player in players], dtype=np.float64)
    return ratings, k_factors


# a 400 point spread, someone rated 400 points higher is 10x more likely to win
DEFAULT = Elo(base=400.0)
