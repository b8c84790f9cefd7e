"""
Scoring Rules
=============

Score functions applied by boxes after each absorption.

- Green: square of the mean of the most recently absorbed tokens
- Blue: Cantor pairing of the smallest and largest token absorbed so far
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


DEFAULT_GREEN_WINDOW = 3


def cantor_pairing(k1: float, k2: float) -> float:
    """
    Real-valued Cantor pairing function.

    pairing(k1, k2) = 0.5 * (k1 + k2) * (k1 + k2 + 1) + k2

    Accepts arbitrary floats, so pairing(0, 1) == 2.

    Args:
        k1: First component (the smaller token for blue boxes).
        k2: Second component (the larger token for blue boxes).

    Returns:
        Paired value.
    """
    total = k1 + k2
    return 0.5 * total * (total + 1) + k2


def green_score(history: Sequence[float], window: int = DEFAULT_GREEN_WINDOW) -> float:
    """
    Square of the mean of the last `window` absorbed tokens.

    With fewer than `window` tokens the mean is over all of them.

    Args:
        history: Absorbed tokens in absorption order.
        window: Number of most recent tokens to average.

    Returns:
        Score, 0.0 if nothing was absorbed.
    """
    if len(history) == 0:
        return 0.0

    recent = np.asarray(history[-window:], dtype=np.float64)
    return float(np.mean(recent) ** 2)


def blue_score(history: Sequence[float]) -> float:
    """
    Cantor pairing of the smallest and largest absorbed token.

    Args:
        history: Absorbed tokens in absorption order.

    Returns:
        Score, 0.0 if nothing was absorbed.
    """
    if len(history) == 0:
        return 0.0

    values = np.asarray(history, dtype=np.float64)
    smallest = float(np.min(values))
    largest = float(np.max(values))
    return cantor_pairing(smallest, largest)
