"""Functions for turning raw results into normalized scores"""
import math
from datetime import timedelta
import numpy as np
from nelo.core.base import ValidationError

TIE_TOLERANCE = 1e-9
# decimal places kept when dividing float durations, so 0.3 / 0.1 counts as 3 steps
STEP_PRECISION = 9


def _check_holds_floats(scores):
    """results are written back in place, an int array would silently truncate them"""
    if isinstance(scores, np.ndarray) and scores.dtype.kind != 'f':
        raise ValidationError(f'scores must be a float array to be rescaled in place, got dtype {scores.dtype}')


def normalize(scores):
    """
    Rescale scores in place so the lowest maps to 0 and the highest to 1, keeping their relative spacing.

    Ties (every value the same) all map to 0.5 so that a tied match gives nobody any points
    beyond what their expected score predicts. Fewer than two scores are left alone since there
    is no opponent to be rated against anyway.

    Parameters:
        scores (list or np.ndarray): mutable sequence of raw scores, higher is better

    Raises:
        ValidationError: if scores is a numpy array which cannot hold fractions, e.g. an int array
    """
    _check_holds_floats(scores)
    if len(scores) < 2:
        return

    values = np.asarray(scores, dtype=np.float64)
    if np.all(np.abs(np.diff(values)) <= TIE_TOLERANCE):
        scores[:] = [0.5] * values.shape[0]
        return

    # two passes so that max / max is exactly 1.0
    shifted = values - values.min()
    scores[:] = (shifted / shifted.max()).tolist()


def lerp(scores):
    """fill scores in place with a linear ramp from 1 (first place) down to 0 (last place)"""
    _check_holds_floats(scores)
    n = len(scores)
    if n == 0:
        return
    # one value interpolated between 0 and 1 is 1/2
    if n == 1:
        scores[0] = 0.5
        return
    scores[:] = (1.0 - np.arange(n) / (n - 1)).tolist()


def _is_positive(step) -> bool:
    if isinstance(step, timedelta):
        return step > timedelta(0)
    if isinstance(step, np.timedelta64):
        return step > np.timedelta64(0)
    return step > 0


def _whole_steps(duration, step) -> int:
    if isinstance(duration, float) or isinstance(step, float):
        return math.trunc(round(duration / step, STEP_PRECISION))
    # timedeltas and ints divide exactly, step is already known to be positive
    count = int(abs(duration) // step)
    return -count if duration < duration * 0 else count


def quantize(durations, step) -> np.ndarray:
    """
    Convert elapsed durations into the whole number of steps elapsed, truncating toward zero.

    Parameters:
        durations: iterable of datetime.timedelta, np.timedelta64, or plain numbers in the same unit as step
        step: the resolution of the timer, e.g. timedelta(milliseconds=10)

    Returns:
        np.ndarray: float64 step counts, one per duration
    """
    if not _is_positive(step):
        raise ValidationError(f'step must be a positive duration, got {step!r}')
    return np.array([_whole_steps(duration, step) for duration in durations], dtype=np.float64)
