from __future__ import annotations

from typing import Dict, List, Literal, Tuple

# Box color legend
COLOR_MAP: Dict[str, str] = {
    "G": "Green",
    "B": "Blue",
}

BoxColor = Literal["G", "B"]
PlayerId = Literal["A", "B"]

# Fixed four-box setup, in selection order: (color, initial weight)
INITIAL_BOXES: List[Tuple[BoxColor, float]] = [
    ("G", 0.0),
    ("G", 0.1),
    ("B", 0.2),
    ("B", 0.3),
]
