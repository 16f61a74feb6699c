from __future__ import annotations

from typing import Callable, Dict, Sequence

from .types import BoxColor


def _require_history(history: Sequence[float]) -> None:
    if not history:
        raise ValueError("Cannot score a box that has absorbed nothing")


def cantor_pairing(a: float, b: float) -> float:
    # Not symmetric: pairing(0, 1) == 2, pairing(1, 0) == 1
    s = a + b
    return s * (s + 1) / 2 + b


def green_score(history: Sequence[float]) -> float:
    """Square of the mean of the 3 most recent weights (all of them if fewer)."""
    _require_history(history)
    recent = history[-3:]
    mean = sum(recent) / len(recent)
    return float(mean * mean)


def blue_score(history: Sequence[float]) -> float:
    """Cantor pairing of the smallest and largest weight absorbed so far."""
    _require_history(history)
    return float(cantor_pairing(min(history), max(history)))


SCORERS: Dict[BoxColor, Callable[[Sequence[float]], float]] = {
    "G": green_score,
    "B": blue_score,
}


def score_for(color: BoxColor, history: Sequence[float]) -> float:
    return SCORERS[color](history)
