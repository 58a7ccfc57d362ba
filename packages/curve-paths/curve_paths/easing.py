"""Interpolators mapping linear animation progress to eased progress."""
from __future__ import annotations

from typing import Callable

Interpolator = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_out(t: float) -> float:
    return t * (2 - t)


def decelerate(factor: float = 1.0) -> Interpolator:
    """Power ease-out: starts fast, settles toward 1.

    factor 1.0 is 1 - (1 - t)^2; larger factors exaggerate the effect.
    """
    if factor == 1.0:
        return ease_out

    exponent = 2 * factor

    def _decelerate(t: float) -> float:
        return 1 - (1 - t) ** exponent

    return _decelerate
