"""math utility functions for rating systems"""
import math
from scipy.special import expit


def sigmoid(x):
    """a little faster than implementing it in numpy for d < 100000"""
    return expit(x)


def sigmoid_scalar(x):
    """no need to use numpy on scalars"""
    return 1.0 / (1.0 + math.exp(-x))


def base_to_alpha(base: float) -> float:
    """
    Convert an Elo base (the rating gap giving 10:1 odds) into the slope of the logistic curve.

    10**(r_a / base) / (10**(r_a / base) + 10**(r_b / base)) == sigmoid(alpha * (r_a - r_b))
    with alpha = ln(10) / base, and the right hand side never overflows for large ratings.
    """
    return math.log(10.0) / base
