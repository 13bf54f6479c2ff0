"""base types shared by the rating calculators"""
from typing import Protocol, runtime_checkable


class ValidationError(ValueError):
    """Raised when the inputs to a rating calculation are malformed, e.g. parallel arrays of different lengths."""


@runtime_checkable
class Player(Protocol):
    """
    Anything which can take part in a rated match.

    The calculators only ever need two numbers from a competitor, so any domain object
    (a user row, a team, a bot) can be rated by providing these two accessors.
    """

    def rating(self) -> float:
        """An indicator of the player's strength"""
        ...

    def k_factor(self) -> float:
        """
        A "swing factor": how much the rating moves relative to the expected outcome.
        With a K of 32, a player expected to score 0 who instead wins outright gains 32 points,
        the maximum for that K. Leagues typically give new players a high K and lower it as
        they play more games.
        """
        ...


class Competitor:
    """A minimal Player holding a rating and a K-factor"""

    __slots__ = ('_rating', '_k_factor')

    def __init__(self, rating: float = 1500.0, k_factor: float = 32.0):
        self._rating = float(rating)
        self._k_factor = float(k_factor)

    def rating(self) -> float:
        return self._rating

    def k_factor(self) -> float:
        return self._k_factor

    def __repr__(self):
        return f'Competitor(rating={self._rating!r}, k_factor={self._k_factor!r})'
