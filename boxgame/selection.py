from __future__ import annotations

from typing import Sequence

from .box import Box


def select_target_box(boxes: Sequence[Box]) -> int:
    """
    Index of the lightest box. Ties resolve to the earliest box in the
    sequence, so two equally heavy boxes are always picked in order.
    """
    if not boxes:
        raise ValueError("No boxes to select from")
    best_idx = 0
    for i in range(1, len(boxes)):
        if boxes[i] < boxes[best_idx]:
            best_idx = i
    return best_idx
