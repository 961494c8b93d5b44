"""
Square-root font scale for word-cloud sizes.

Term scores are roughly power-law distributed; mapping their square roots
linearly onto the font range keeps the largest terms from dwarfing the rest.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np


def sqrt_scale(
    scores: Sequence[float],
    output_range: Tuple[float, float],
) -> np.ndarray:
    """
    Map scores onto `output_range` under a square-root transform.

    The domain is [min(scores), max(scores)]: the smallest score maps to
    exactly `output_range[0]` and the largest to exactly `output_range[1]`.
    A zero-width domain (one score, or all scores equal) maps to the top of
    the range. This deliberately differs from d3's scaleSqrt, which returns
    the midpoint of the range for a zero-width domain.

    Args:
        scores: Non-negative scores.
        output_range: (min_size, max_size) of the display scale.

    Returns:
        Array of display sizes, one per score, in input order.
    """
    lo, hi = output_range
    values = np.asarray(scores, dtype=float)
    if values.size == 0:
        return np.empty(0, dtype=float)

    roots = np.sqrt(values)
    r_min, r_max = roots.min(), roots.max()
    if r_max == r_min:
        return np.full(values.shape, float(hi))

    t = (roots - r_min) / (r_max - r_min)
    # t == 0 gives lo and t == 1 gives hi exactly
    sizes = lo * (1.0 - t) + hi * t
    return np.clip(sizes, lo, hi)
