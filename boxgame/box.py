from __future__ import annotations

from typing import List, Tuple

from .types import BoxColor, COLOR_MAP
from .scoring import score_for


class Box:
    def __init__(self, color: BoxColor, initial_weight: float) -> None:
        if color not in COLOR_MAP:
            raise ValueError(f"Unknown box color: {color!r}")
        self._color: BoxColor = color
        self.initial_weight: float = initial_weight
        self._weight: float = initial_weight
        # Absorbed token weights, oldest first
        self._history: List[float] = []

    @classmethod
    def make_green_box(cls, initial_weight: float) -> "Box":
        return cls("G", initial_weight)

    @classmethod
    def make_blue_box(cls, initial_weight: float) -> "Box":
        return cls("B", initial_weight)

    @property
    def color(self) -> BoxColor:
        return self._color

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def history(self) -> Tuple[float, ...]:
        return tuple(self._history)

    def clone(self) -> "Box":
        b = Box(self._color, self.initial_weight)
        b._weight = self._weight
        b._history = list(self._history)
        return b

    def absorb(self, token_weight: float) -> None:
        # Weight first: a non-numeric token fails before history changes
        self._weight += token_weight
        self._history.append(token_weight)

    def score_on_absorb(self) -> float:
        # Must follow an absorb(); scores the updated history
        return score_for(self._color, self._history)

    def __lt__(self, other: "Box") -> bool:
        return self._weight < other._weight

    def __repr__(self) -> str:
        return f"Box({COLOR_MAP[self._color]}, weight={self._weight}, history={self._history})"
