"""
nelo
====

Elo ratings for matches with any number of competitors.

Competitors are sorted by their normalized score and each one is treated as if it
played a match against the competitor who finished just ahead of it and the one who
finished just behind it. Helpers cover the common shapes of competition:

- h2h: head-to-head, one player (or team) against another
- ffa: free-for-all, high score wins
- golf: free-for-all, low score wins
- race: like golf, but elapsed times are converted to scores
- place: finishing order only, first place first

Everything is also available on an Elo instance with a different base, e.g.
``Elo(base=1000.0).calculate([1700, 1500, 1300], [20, 20, 20], [1.0, 0.5, 0.0])``
"""
import logging
from nelo.core.base import Competitor, Player, ValidationError
from nelo.models.elo import DEFAULT, Elo
from nelo.utils.data_utils import lerp, normalize, quantize

logging.getLogger(__name__).addHandler(logging.NullHandler())

calculate = DEFAULT.calculate
predict = DEFAULT.predict
h2h = DEFAULT.h2h
place = DEFAULT.place
ffa = DEFAULT.ffa
golf = DEFAULT.golf
race = DEFAULT.race

__all__ = [
    'Competitor',
    'DEFAULT',
    'Elo',
    'Player',
    'ValidationError',
    'calculate',
    'ffa',
    'golf',
    'h2h',
    'lerp',
    'normalize',
    'place',
    'predict',
    'quantize',
    'race',
]
