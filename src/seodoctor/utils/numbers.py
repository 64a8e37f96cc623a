"""Numeric helpers shared by the scoring engines."""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties going up.

    Scores shown in the dashboard are rounded this way, so ``round()``
    (banker's rounding) would disagree on values such as 12.5.

    >>> round_half_up(12.5)
    13
    >>> round_half_up(-0.5)
    0
    """
    return int(math.floor(value + 0.5))


def clamp_percentage(value: float) -> int:
    """Round half-up and clamp into ``[0, 100]``."""
    return min(100, max(0, round_half_up(value)))
