"""Hue-circle geometry on the 0-100 degree scale, vectorised with numpy.

Every function accepts hue codes ('5YR'), colours, plain degree numbers, or
sequences/arrays of them, and returns float ndarrays. A full turn is 100
degree units, so 25 units is a quarter circle.
"""

from collections.abc import Iterable
from decimal import Decimal

import numpy as np

from munsell_model.core.degree import degree
from munsell_model.core.types import MunsellColor

FULL_CIRCLE = 100.0
HALF_CIRCLE = FULL_CIRCLE / 2

HueLike = str | MunsellColor | float | int | Decimal


def _one(hue: HueLike) -> float:
    if isinstance(hue, (str, MunsellColor)):
        return degree(hue)
    return float(hue)


def as_degrees(hues: HueLike | Iterable[HueLike] | np.ndarray) -> np.ndarray:
    """Convert hue codes, colours or numbers to degree units."""
    if isinstance(hues, np.ndarray) and hues.dtype.kind in 'iuf':
        return hues.astype(float)
    if isinstance(hues, (str, MunsellColor, Decimal)) or np.isscalar(hues):
        return np.asarray(_one(hues), dtype=float)  # type: ignore[arg-type]
    return np.array([_one(h) for h in hues], dtype=float)  # type: ignore[union-attr]


def to_radians(hues) -> np.ndarray:
    """Angle in radians, with 10RP (degree 0) at angle 0."""
    return as_degrees(hues) * (2 * np.pi / FULL_CIRCLE)


def hue_difference(a, b) -> np.ndarray:
    """Signed shortest step from a to b, in [-50, 50)."""
    diff = as_degrees(b) - as_degrees(a)
    return np.mod(diff + HALF_CIRCLE, FULL_CIRCLE) - HALF_CIRCLE


def hue_distance(a, b) -> np.ndarray:
    return np.abs(hue_difference(a, b))


def interpolate_hue(a, b, t) -> np.ndarray:
    """Walk from a towards b along the shorter arc; t=0 gives a, t=1 gives b.

    Results are wrapped into [0, 100).
    """
    start = as_degrees(a)
    t = np.asarray(t, dtype=float)
    return np.mod(start + t * hue_difference(a, b), FULL_CIRCLE)


def mean_hue(hues) -> float:
    """Circular mean of the hues, in [0, 100).

    Raises ValueError when the hues cancel out and no mean direction exists.
    """
    angles = to_radians(hues)
    x = float(np.mean(np.cos(angles)))
    y = float(np.mean(np.sin(angles)))
    if np.hypot(x, y) < 1e-12:
        raise ValueError('Hues are evenly spread; circular mean is undefined')
    return float(np.mod(np.arctan2(y, x) * FULL_CIRCLE / (2 * np.pi), FULL_CIRCLE))
